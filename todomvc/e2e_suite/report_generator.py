"""Generate the static HTML dashboard from an Allure results directory."""

import logging
from datetime import datetime
from pathlib import Path

from todomvc.e2e_suite.attachments import ATTACHMENTS_DIR_NAME, copy_all_attachments
from todomvc.e2e_suite.report_renderer import render_report
from todomvc.e2e_suite.result_loader import load_results, summarize

logger = logging.getLogger(__name__)

REPORT_FILE_NAME = "index.html"


def generate_report(
    results_dir: Path,
    report_dir: Path,
    generated_at: datetime | None = None,
) -> Path:
    """Build the report for every result in ``results_dir``.

    Args:
        results_dir: Allure results directory
        report_dir: Output directory for ``index.html`` and copied attachments
        generated_at: Timestamp shown in the report (default: now)

    Returns:
        Path of the written HTML file

    Raises:
        ValueError: If a result file is malformed
        OSError: If result files can't be read or the report can't be written

    """
    logger.info(f"Loading results from {results_dir}")
    results = load_results(results_dir)

    summary = summarize(results)
    logger.info(
        f"Aggregated {summary.total} results: {summary.passed} passed, "
        f"{summary.failed} failed, {summary.skipped} skipped "
        f"across {len(summary.browsers)} browsers"
    )

    copy_all_attachments(results, results_dir, report_dir / ATTACHMENTS_DIR_NAME)

    content = render_report(results, summary, generated_at or datetime.now())

    report_dir.mkdir(parents=True, exist_ok=True)
    report_file = report_dir / REPORT_FILE_NAME
    report_file.write_text(content, encoding="utf-8")

    logger.info("✅ HTML report generated successfully!")
    logger.info(f"📁 Location: {report_file}")
    return report_file
