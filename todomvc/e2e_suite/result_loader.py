"""Load Allure JSON result files and aggregate them for the report."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from todomvc.e2e_suite.models.allure_result import TestResult
from todomvc.e2e_suite.models.report_summary import ReportSummary

logger = logging.getLogger(__name__)

UNKNOWN_BROWSER = "Unknown"
KNOWN_BROWSERS = ("chromium", "firefox", "webkit")
CONTAINER_SUFFIX = "-container.json"


def load_result_file(result_file: Path) -> TestResult:
    """Parse a single Allure result file.

    Args:
        result_file: Path to a ``*.json`` result file

    Returns:
        Parsed test result, not yet decorated

    Raises:
        ValueError: If the file is not valid JSON or doesn't match the schema

    """
    content = result_file.read_text(encoding="utf-8")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {result_file}: {e}") from e

    try:
        return TestResult.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid test result schema in {result_file}: {e}") from e


def resolve_browser(result: TestResult) -> str:
    """Resolve the browser engine a result ran under.

    Checks the ``Project`` parameter, then the ``parentSuite`` label, then
    looks for a known engine name in the test name.
    """
    for param in result.parameters:
        if param.name == "Project":
            return _unquote(param.value)

    for label in result.labels:
        if label.name == "parentSuite":
            return label.value

    for browser in KNOWN_BROWSERS:
        if browser in result.name:
            return browser

    return UNKNOWN_BROWSER


def _unquote(value: str) -> str:
    # allure-pytest records dynamic parameter values as their repr
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def decorate_result(result: TestResult) -> TestResult:
    """Backfill the duration and resolve the browser of a result in place."""
    if not result.time and result.start and result.stop:
        result.time = result.stop - result.start
    result.time = result.time or 0
    result.browser = resolve_browser(result)
    return result


def load_results(results_dir: Path) -> list[TestResult]:
    """Load and decorate every result file in a directory.

    Args:
        results_dir: Allure results directory

    Returns:
        Decorated results in file name order. A missing directory yields an
        empty list.

    Raises:
        ValueError: If any result file is malformed

    """
    if not results_dir.is_dir():
        logger.warning(f"Results directory not found: {results_dir}")
        return []

    # Fixture containers share the directory but carry no test outcome
    result_files = [
        f
        for f in sorted(results_dir.glob("*.json"))
        if not f.name.endswith(CONTAINER_SUFFIX)
    ]
    logger.info(f"📄 Found {len(result_files)} result files")

    return [decorate_result(load_result_file(f)) for f in result_files]


def summarize(results: Sequence[TestResult]) -> ReportSummary:
    """Compute status counts, total duration and per-browser grouping."""
    by_browser: dict[str, list[TestResult]] = {}
    for result in results:
        by_browser.setdefault(result.browser, []).append(result)

    return ReportSummary(
        total=len(results),
        passed=sum(1 for r in results if r.status == "passed"),
        failed=sum(1 for r in results if r.status == "failed"),
        skipped=sum(1 for r in results if r.status == "skipped"),
        total_duration=sum(r.time or 0 for r in results),
        browsers=list(by_browser),
        by_browser=by_browser,
    )
