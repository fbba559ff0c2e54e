"""Remove stale Allure result files before a new test run."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def clean_results(results_dir: Path) -> int:
    """Delete every JSON result file in ``results_dir``.

    The directory is created if it doesn't exist. Attachments are kept.

    Returns:
        Number of files removed

    """
    if not results_dir.exists():
        logger.info(f"Results directory {results_dir} does not exist, creating...")
        results_dir.mkdir(parents=True)
        return 0

    json_files = sorted(results_dir.glob("*.json"))
    if not json_files:
        logger.info("No old result files to clean")
        return 0

    logger.info(f"Found {len(json_files)} old result files, cleaning...")
    for json_file in json_files:
        json_file.unlink()

    logger.info("✅ Cleaned old result files")
    return len(json_files)
