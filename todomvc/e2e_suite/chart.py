"""Pie chart geometry for the report summary."""

from todomvc.e2e_suite.models.report_summary import ChartArc, ReportSummary

PIE_RADIUS = 80
PIE_CIRCUMFERENCE = 502.4

STATUS_COLORS = {
    "passed": "#28a745",
    "failed": "#dc3545",
    "skipped": "#ffc107",
}


def percentage(count: int, total: int) -> float:
    """Return ``count`` as a percentage of ``total``, 0 when there is nothing."""
    if total <= 0:
        return 0.0
    return count / total * 100


def compute_pie_arcs(summary: ReportSummary) -> list[ChartArc]:
    """Compute one stroke arc per status, stacked clockwise.

    Each arc is offset by the negated length of the arcs before it, so drawn
    on a circle rotated -90 degrees the first arc starts at 12 o'clock.
    """
    counts = {
        "passed": summary.passed,
        "failed": summary.failed,
        "skipped": summary.skipped,
    }

    arcs: list[ChartArc] = []
    consumed = 0.0
    for status, color in STATUS_COLORS.items():
        length = (
            counts[status] / summary.total * PIE_CIRCUMFERENCE if summary.total else 0.0
        )
        arcs.append(
            ChartArc(
                status=status,
                color=color,
                length=length,
                offset=-consumed if consumed else 0.0,
            )
        )
        consumed += length
    return arcs
