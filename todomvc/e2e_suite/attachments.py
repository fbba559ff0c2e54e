"""Extract step attachments and copy them next to the HTML report."""

import logging
import shutil
from collections.abc import Iterator, Sequence
from pathlib import Path

from todomvc.e2e_suite.models.allure_result import Attachment, Step, TestResult

logger = logging.getLogger(__name__)

ATTACHMENTS_DIR_NAME = "attachments"


def iter_attachments(result: TestResult) -> Iterator[Attachment]:
    """Yield every attachment in a result's step tree.

    Steps are walked depth-first: a step's own attachments come before those
    of its nested steps.
    """
    yield from _iter_step_attachments(result.steps)


def _iter_step_attachments(steps: Sequence[Step]) -> Iterator[Attachment]:
    for step in steps:
        yield from step.attachments
        yield from _iter_step_attachments(step.steps)


def attachment_file_name(source: str) -> str:
    """Return the original file name of an attachment source.

    Allure names sources ``<uuid>-attachment.<ext>``; only the part after the
    last dash is kept.
    """
    return source.split("-")[-1]


def report_file_name(source: str, test_index: int, attachment_index: int) -> str:
    """Build the unique name an attachment is copied under."""
    original = Path(attachment_file_name(source))
    return f"{test_index}-{attachment_index}-{original.stem}{original.suffix}"


def copy_attachment(
    attachment: Attachment,
    results_dir: Path,
    attachments_dir: Path,
    test_index: int,
    attachment_index: int,
    copied: dict[str, str],
) -> str | None:
    """Copy one attachment into the report and record its report path.

    Args:
        attachment: Attachment to copy, updated with its ``report_path``
        results_dir: Allure results directory holding the source file
        attachments_dir: Flat output directory for copied files
        test_index: Position of the owning result in the report
        attachment_index: Position of the attachment within its result
        copied: Map of already copied sources to their report paths

    Returns:
        Report-relative path of the copied file, or None if it was skipped

    """
    if attachment.source in copied:
        attachment.report_path = copied[attachment.source]
        return attachment.report_path

    source_path = results_dir / attachment.source
    if not source_path.resolve().is_relative_to(results_dir.resolve()):
        logger.warning(
            f"⚠️ Attachment outside results directory, skipping: {source_path}"
        )
        return None

    if not source_path.is_file():
        logger.warning(f"⚠️ Attachment not found, skipping: {source_path}")
        return None

    file_name = report_file_name(attachment.source, test_index, attachment_index)
    try:
        shutil.copyfile(source_path, attachments_dir / file_name)
    except OSError as e:
        logger.warning(f"⚠️ Could not copy {source_path}: {e}")
        return None

    report_path = f"{attachments_dir.name}/{file_name}"
    copied[attachment.source] = report_path
    attachment.report_path = report_path
    return report_path


def copy_all_attachments(
    results: Sequence[TestResult],
    results_dir: Path,
    attachments_dir: Path,
    copied: dict[str, str] | None = None,
) -> dict[str, str]:
    """Copy the attachments of every result into ``attachments_dir``.

    Returns:
        Map of source file names to report paths, including entries from
        ``copied`` when given

    """
    copied = {} if copied is None else copied
    attachments_dir.mkdir(parents=True, exist_ok=True)

    for test_index, result in enumerate(results):
        for attachment_index, attachment in enumerate(iter_attachments(result)):
            copy_attachment(
                attachment,
                results_dir,
                attachments_dir,
                test_index,
                attachment_index,
                copied,
            )

    logger.info(f"Copied {len(copied)} attachment files")
    return copied
