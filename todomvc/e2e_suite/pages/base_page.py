"""Base page object shared by all pages."""

import logging

import allure
from playwright.sync_api import Page

logger = logging.getLogger(__name__)


class BasePage:
    """Thin wrapper around a Playwright page."""

    def __init__(self, page: Page) -> None:
        """Initialize with the Playwright page to drive."""
        self.page = page

    def goto(self, url: str) -> None:
        """Open ``url`` in the current page."""
        with allure.step(f"Open {url}"):
            logger.info(f"Navigating to {url}")
            self.page.goto(url)
