"""Configuration for the browser suite and report tooling."""

import os

from pydantic import BaseModel, Field

DEFAULT_BROWSERS = ["chromium", "firefox", "webkit"]


class SuiteConfig(BaseModel):
    """Run configuration, overridable through TODOMVC_* environment variables."""

    base_url: str = Field(
        default="https://demo.playwright.dev/todomvc/",
        description="URL of the TodoMVC application under test",
    )
    browsers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BROWSERS),
        description="Browser engines to run the suite against",
    )
    headless: bool = Field(default=True, description="Run browsers headless")
    slow_mo: float = Field(default=0, description="Delay between actions (ms)")
    results_dir: str = Field(
        default="allure-results", description="Directory of Allure JSON results"
    )
    report_dir: str = Field(
        default="allure-report", description="Directory the HTML report is written to"
    )
    include_failure_demo: bool = Field(
        default=False, description="Run the intentionally failing demo test"
    )

    @classmethod
    def from_env(cls) -> "SuiteConfig":
        """Build a configuration from defaults and TODOMVC_* overrides."""
        config = cls()
        if "TODOMVC_BASE_URL" in os.environ:
            config.base_url = os.environ["TODOMVC_BASE_URL"]
        if "TODOMVC_BROWSERS" in os.environ:
            config.browsers = [
                b.strip() for b in os.environ["TODOMVC_BROWSERS"].split(",") if b.strip()
            ]
        if "TODOMVC_HEADED" in os.environ:
            config.headless = not _is_truthy(os.environ["TODOMVC_HEADED"])
        if "TODOMVC_SLOW_MO" in os.environ:
            config.slow_mo = float(os.environ["TODOMVC_SLOW_MO"])
        if "TODOMVC_FAILURE_DEMO" in os.environ:
            config.include_failure_demo = _is_truthy(os.environ["TODOMVC_FAILURE_DEMO"])
        return config


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}
