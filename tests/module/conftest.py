"""Browser fixtures for the TodoMVC suite.

Run with ``pytest tests/module --alluredir=allure-results``.
"""

from collections.abc import Generator

import allure
import pytest
from playwright.sync_api import Browser, Page, Playwright, sync_playwright

from todomvc.e2e_suite.models.suite_config import SuiteConfig


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Run every browser test once per configured engine."""
    if "browser_name" in metafunc.fixturenames:
        browsers = SuiteConfig.from_env().browsers
        metafunc.parametrize("browser_name", browsers, ids=browsers, scope="session")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_call(item: pytest.Item) -> Generator[None, None, None]:
    """Attach a screenshot to the test result, whether it passed or not."""
    yield
    page = getattr(item, "funcargs", {}).get("page")
    if page is None or page.is_closed():
        return
    with allure.step("Capture final screenshot"):
        allure.attach(
            page.screenshot(full_page=True),
            name="screenshot",
            attachment_type=allure.attachment_type.PNG,
        )


@pytest.fixture(scope="session")
def suite_config() -> SuiteConfig:
    """Suite configuration from the environment."""
    return SuiteConfig.from_env()


@pytest.fixture(scope="session")
def playwright() -> Generator[Playwright, None, None]:
    """Start Playwright once per session."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(
    playwright: Playwright, browser_name: str, suite_config: SuiteConfig
) -> Generator[Browser, None, None]:
    """Launch the browser engine under test."""
    browser_type = getattr(playwright, browser_name)
    browser = browser_type.launch(
        headless=suite_config.headless, slow_mo=suite_config.slow_mo
    )
    yield browser
    browser.close()


@pytest.fixture
def page(browser: Browser, browser_name: str) -> Generator[Page, None, None]:
    """Open a fresh page labelled with the browser it runs in."""
    allure.dynamic.parameter("Project", browser_name)
    allure.dynamic.parent_suite(browser_name)

    context = browser.new_context(viewport={"width": 1280, "height": 720})
    page = context.new_page()
    yield page
    context.close()
