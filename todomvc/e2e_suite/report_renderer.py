"""Render aggregated test results as a single static HTML dashboard."""

import html
from collections.abc import Sequence
from datetime import datetime

from todomvc.e2e_suite.attachments import (
    ATTACHMENTS_DIR_NAME,
    attachment_file_name,
    iter_attachments,
)
from todomvc.e2e_suite.chart import (
    PIE_CIRCUMFERENCE,
    PIE_RADIUS,
    compute_pie_arcs,
    percentage,
)
from todomvc.e2e_suite.models.allure_result import Attachment, TestResult
from todomvc.e2e_suite.models.report_summary import ReportSummary

REPORT_TITLE = "Allure Report - TodoMVC Tests"

BROWSER_ICONS = {
    "chromium": "🟢",
    "firefox": "🦊",
    "webkit": "🟦",
}
DEFAULT_BROWSER_ICON = "🌐"

_CSS = """\
* { box-sizing: border-box; }
body {
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    margin: 0;
    background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    min-height: 100vh;
}
.container {
    max-width: 1400px;
    margin: 20px auto;
    background: white;
    padding: 30px;
    border-radius: 15px;
    box-shadow: 0 10px 30px rgba(0,0,0,0.2);
}
.header {
    text-align: center;
    margin-bottom: 40px;
    padding-bottom: 20px;
    border-bottom: 2px solid #f0f0f0;
}
.header h1 { color: #2c3e50; margin-bottom: 10px; font-size: 2.5em; }
.header p { color: #7f8c8d; font-size: 1.1em; }
.summary {
    display: grid;
    grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
    gap: 20px;
    margin: 30px 0;
}
.stat {
    text-align: center;
    padding: 25px;
    background: linear-gradient(135deg, #f8f9fa 0%, #e9ecef 100%);
    border-radius: 10px;
    border: 1px solid #dee2e6;
    transition: transform 0.3s ease;
}
.stat:hover { transform: translateY(-5px); }
.stat-number { font-size: 2.5em; font-weight: bold; margin-bottom: 10px; }
.stat-passed .stat-number { color: #28a745; }
.stat-failed .stat-number { color: #dc3545; }
.stat-skipped .stat-number { color: #ffc107; }
.stat-total .stat-number { color: #007bff; }
.stat-duration .stat-number { color: #6f42c1; }
.stat-label {
    color: #6c757d;
    font-weight: 500;
    text-transform: uppercase;
    letter-spacing: 1px;
}
.chart-container {
    display: flex;
    align-items: center;
    justify-content: center;
    gap: 40px;
    flex-wrap: wrap;
    margin: 30px 0;
}
.chart-container h3 { width: 100%; text-align: center; color: #495057; }
.chart-legend { display: flex; flex-direction: column; gap: 10px; }
.legend-item { display: flex; align-items: center; gap: 10px; }
.legend-color { width: 20px; height: 20px; border-radius: 4px; }
.filters {
    margin: 30px 0;
    padding: 20px;
    background: #f8f9fa;
    border-radius: 10px;
    border: 1px solid #dee2e6;
}
.filters h3 { margin-top: 0; color: #495057; }
.filter-buttons { display: flex; gap: 10px; flex-wrap: wrap; }
.filter-btn {
    padding: 10px 20px;
    border: none;
    border-radius: 25px;
    cursor: pointer;
    font-weight: 500;
    transition: all 0.3s ease;
    background: #6c757d;
    color: white;
}
.filter-btn:hover { transform: translateY(-2px); box-shadow: 0 5px 15px rgba(0,0,0,0.2); }
.filter-btn.active { background: #007bff; }
.filter-btn.passed { background: #28a745; }
.filter-btn.failed { background: #dc3545; }
.filter-btn.skipped { background: #ffc107; color: #000; }
.browser-filters { display: flex; gap: 10px; flex-wrap: wrap; }
.checkbox-container {
    display: flex;
    align-items: center;
    gap: 8px;
    margin: 5px 0;
    padding: 8px 12px;
    background: white;
    border-radius: 8px;
    border: 1px solid #dee2e6;
    transition: all 0.3s ease;
}
.checkbox-container:hover { background: #f8f9fa; border-color: #007bff; }
.checkbox-container input[type="checkbox"] { width: 18px; height: 18px; cursor: pointer; }
.checkbox-container label { cursor: pointer; font-weight: 500; color: #495057; margin: 0; }
.checkbox-container.checked { background: #e3f2fd; border-color: #007bff; }
.checkbox-container.checked label { color: #007bff; font-weight: 600; }
.browser-badge {
    background: #6c757d;
    color: white;
    padding: 2px 8px;
    border-radius: 12px;
    font-size: 0.7em;
    font-weight: normal;
    margin-left: 10px;
}
.browser-name { font-weight: bold; color: #17a2b8; }
.test-case {
    margin: 20px 0;
    padding: 20px;
    border: 1px solid #dee2e6;
    border-radius: 10px;
    background: white;
    transition: all 0.3s ease;
    box-shadow: 0 2px 5px rgba(0,0,0,0.1);
}
.test-case:hover { box-shadow: 0 5px 15px rgba(0,0,0,0.15); transform: translateY(-2px); }
.test-case.hidden { display: none; }
.test-header {
    display: flex;
    justify-content: space-between;
    align-items: center;
    margin-bottom: 15px;
}
.test-title { font-weight: bold; font-size: 1.2em; color: #2c3e50; margin: 0; }
.test-status {
    padding: 8px 16px;
    border-radius: 20px;
    color: white;
    font-size: 12px;
    font-weight: bold;
    text-transform: uppercase;
    letter-spacing: 1px;
    background: #6c757d;
}
.status-passed { background: linear-gradient(135deg, #28a745, #20c997); }
.status-failed { background: linear-gradient(135deg, #dc3545, #e74c3c); }
.status-skipped { background: linear-gradient(135deg, #ffc107, #fd7e14); color: #000; }
.test-meta {
    display: flex;
    gap: 20px;
    margin-bottom: 15px;
    font-size: 0.9em;
    color: #6c757d;
    flex-wrap: wrap;
}
.steps, .attachments {
    margin-top: 15px;
    padding: 15px;
    background: #f8f9fa;
    border-radius: 8px;
}
.step { padding: 8px 12px; margin: 5px 0; background: white; border-left: 3px solid #007bff; border-radius: 4px; }
.step-name { font-weight: 500; color: #2c3e50; }
.step-status { font-size: 0.85em; color: #6c757d; }
.attachment-item { padding: 8px 0; }
.attachment-link { color: #007bff; text-decoration: none; font-weight: 500; }
.attachment-link:hover { text-decoration: underline; }
"""

_JS = """\
let currentStatusFilter = 'all';
let selectedBrowsers = new Set(['all']);

function filterTests(status, button) {
    currentStatusFilter = status;
    document.querySelectorAll('.filter-btn').forEach(btn => btn.classList.remove('active'));
    button.classList.add('active');
    applyFilters();
}

function setChecked(checkbox, checked) {
    checkbox.checked = checked;
    checkbox.closest('.checkbox-container').classList.toggle('checked', checked);
}

function toggleBrowser(checkbox) {
    const browser = checkbox.dataset.browser;
    const allCheckbox = document.getElementById('browser-all');
    const browserCheckboxes = document.querySelectorAll('.browser-checkbox');

    if (browser === 'all') {
        selectedBrowsers.clear();
        if (checkbox.checked) {
            selectedBrowsers.add('all');
            browserCheckboxes.forEach(cb => setChecked(cb, false));
        } else {
            browserCheckboxes.forEach(cb => {
                selectedBrowsers.add(cb.dataset.browser);
                setChecked(cb, true);
            });
        }
    } else if (checkbox.checked) {
        selectedBrowsers.add(browser);
        selectedBrowsers.delete('all');
        setChecked(allCheckbox, false);
    } else {
        selectedBrowsers.delete(browser);
        if (selectedBrowsers.size === 0) {
            selectedBrowsers.add('all');
            setChecked(allCheckbox, true);
        }
    }

    setChecked(checkbox, checkbox.checked);
    applyFilters();
}

function applyFilters() {
    document.querySelectorAll('.test-case').forEach(test => {
        const statusMatch = currentStatusFilter === 'all'
            || test.dataset.status === currentStatusFilter;
        const browserMatch = selectedBrowsers.has('all')
            || selectedBrowsers.has(test.dataset.browser);
        test.classList.toggle('hidden', !(statusMatch && browserMatch));
    });
}
"""


def format_duration(ms: int | float | None) -> str:
    """Format a duration in milliseconds for display."""
    if not ms:
        return "0ms"
    if ms < 1000:
        return f"{ms}ms"
    if ms < 60000:
        return f"{ms / 1000:.2f}s"
    return f"{ms / 60000:.2f}m"


def format_timestamp(ms: int | None) -> str:
    """Format an epoch timestamp in milliseconds as local time."""
    if not ms:
        return "N/A"
    return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M:%S")


def browser_icon(browser: str) -> str:
    """Return the icon shown next to a browser name."""
    return BROWSER_ICONS.get(browser, DEFAULT_BROWSER_ICON)


def attachment_icon(mime_type: str) -> str:
    """Return the icon shown next to an attachment link."""
    if "video" in mime_type:
        return "🎥"
    if "image" in mime_type:
        return "📸"
    return "📄"


def render_report(
    results: Sequence[TestResult],
    summary: ReportSummary,
    generated_at: datetime,
) -> str:
    """Render the complete HTML report.

    Args:
        results: Decorated test results, in report order
        summary: Aggregates computed from ``results``
        generated_at: Timestamp shown in the report header

    Returns:
        Complete HTML document

    """
    parts: list[str] = []
    parts.append("<!DOCTYPE html>")
    parts.append('<html lang="en">')
    parts.append("<head>")
    parts.append('<meta charset="UTF-8">')
    parts.append(
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">'
    )
    parts.append(f"<title>{html.escape(REPORT_TITLE)}</title>")
    parts.append(f"<style>{_CSS}</style>")
    parts.append("</head>")
    parts.append("<body>")
    parts.append('<div class="container">')

    parts.append(_render_header(generated_at))
    parts.append(_render_summary(summary))
    parts.append(_render_chart(summary))
    parts.append(_render_filters(summary))

    parts.append("<h2>📋 Test Details</h2>")
    parts.append('<div id="test-results">')
    for test_index, result in enumerate(results):
        parts.append(_render_test_case(result, test_index))
    parts.append("</div>")

    parts.append("</div>")
    parts.append(f"<script>{_JS}</script>")
    parts.append("</body>")
    parts.append("</html>")
    return "\n".join(parts)


def _render_header(generated_at: datetime) -> str:
    timestamp = generated_at.strftime("%Y-%m-%d %H:%M:%S")
    return (
        '<div class="header">'
        "<h1>🎭 TodoMVC Test Report</h1>"
        f"<p>Report generated on {html.escape(timestamp)}</p>"
        "</div>"
    )


def _render_summary(summary: ReportSummary) -> str:
    tiles = [
        ("stat-total", summary.total, "Total Tests"),
        ("stat-passed", summary.passed, "Passed"),
        ("stat-failed", summary.failed, "Failed"),
        ("stat-skipped", summary.skipped, "Skipped"),
        ("stat-duration", format_duration(summary.total_duration), "Total Duration"),
    ]
    parts: list[str] = ['<div class="summary">']
    for css_class, value, label in tiles:
        parts.append(
            f'<div class="stat {css_class}">'
            f'<div class="stat-number">{html.escape(str(value))}</div>'
            f'<div class="stat-label">{label}</div>'
            "</div>"
        )
    parts.append("</div>")
    return "\n".join(parts)


def _render_chart(summary: ReportSummary) -> str:
    center = PIE_RADIUS + 20
    size = center * 2
    rotate = f"rotate(-90 {center} {center})"

    parts: list[str] = ['<div class="chart-container">']
    parts.append("<h3>📊 Test Results Distribution</h3>")
    parts.append('<div class="pie-chart">')
    parts.append(
        f'<svg width="{size}" height="{size}" viewBox="0 0 {size} {size}">'
    )
    parts.append(
        f'<circle cx="{center}" cy="{center}" r="{PIE_RADIUS}" fill="none" '
        'stroke="#e9ecef" stroke-width="40"/>'
    )
    arcs = compute_pie_arcs(summary)
    for arc in arcs:
        parts.append(
            f'<circle class="arc-{arc.status}" cx="{center}" cy="{center}" '
            f'r="{PIE_RADIUS}" fill="none" stroke="{arc.color}" stroke-width="40" '
            f'stroke-dasharray="{arc.length:.2f} {PIE_CIRCUMFERENCE}" '
            f'stroke-dashoffset="{arc.offset:.2f}" transform="{rotate}"/>'
        )
    parts.append(
        f'<text x="{center}" y="{center}" text-anchor="middle" dy="0.3em" '
        f'font-size="24" font-weight="bold" fill="#2c3e50">{summary.total}</text>'
    )
    parts.append(
        f'<text x="{center}" y="{center + 20}" text-anchor="middle" '
        'font-size="12" fill="#6c757d">Total</text>'
    )
    parts.append("</svg>")
    parts.append("</div>")

    counts = {
        "passed": summary.passed,
        "failed": summary.failed,
        "skipped": summary.skipped,
    }
    parts.append('<div class="chart-legend">')
    for arc in arcs:
        count = counts[arc.status]
        parts.append(
            '<div class="legend-item">'
            f'<div class="legend-color" style="background: {arc.color};"></div>'
            f"<span>{arc.status.capitalize()} ({count}) - "
            f"{percentage(count, summary.total):.1f}%</span>"
            "</div>"
        )
    parts.append("</div>")
    parts.append("</div>")
    return "\n".join(parts)


def _render_filters(summary: ReportSummary) -> str:
    parts: list[str] = ['<div class="filters">']
    parts.append("<h3>🔍 Filter Tests</h3>")
    parts.append('<div class="filter-buttons">')
    for status, css_class, label in (
        ("all", "active", "All Tests"),
        ("passed", "passed", "Passed Only"),
        ("failed", "failed", "Failed Only"),
        ("skipped", "skipped", "Skipped Only"),
    ):
        parts.append(
            f'<button class="filter-btn {css_class}" '
            f"onclick=\"filterTests('{status}', this)\">{label}</button>"
        )
    parts.append("</div>")

    parts.append("<h4>🌐 Filter by Browser</h4>")
    parts.append('<div class="browser-filters">')
    parts.append(
        '<div class="checkbox-container all-browsers-container checked">'
        '<input type="checkbox" id="browser-all" data-browser="all" checked '
        'onchange="toggleBrowser(this)">'
        f'<label for="browser-all">{DEFAULT_BROWSER_ICON} All Browsers</label>'
        "</div>"
    )
    for index, browser in enumerate(summary.browsers):
        name = html.escape(browser, quote=True)
        parts.append(
            '<div class="checkbox-container checked">'
            f'<input type="checkbox" class="browser-checkbox" id="browser-{index}" '
            f'data-browser="{name}" checked onchange="toggleBrowser(this)">'
            f'<label for="browser-{index}">{browser_icon(browser)} {name}</label>'
            "</div>"
        )
    parts.append("</div>")
    parts.append("</div>")
    return "\n".join(parts)


def _render_test_case(result: TestResult, test_index: int) -> str:
    status = html.escape(result.status, quote=True)
    browser = html.escape(result.browser, quote=True)

    parts: list[str] = [
        f'<div class="test-case" data-status="{status}" data-browser="{browser}">'
    ]
    parts.append(
        '<div class="test-header">'
        f'<h3 class="test-title">{html.escape(result.name)} '
        f'<span class="browser-badge">[{browser}]</span></h3>'
        f'<div class="test-status status-{status}">{status.upper()}</div>'
        "</div>"
    )
    parts.append(
        '<div class="test-meta">'
        "<span><strong>Duration:</strong> "
        f'<span class="duration">{format_duration(result.time)}</span></span>'
        "<span><strong>Executed:</strong> "
        f'<span class="timestamp">{format_timestamp(result.start)}</span></span>'
        "<span><strong>Browser:</strong> "
        f'<span class="browser-name">{browser}</span></span>'
        "</div>"
    )

    if result.steps:
        parts.append('<div class="steps">')
        parts.append("<h4>📝 Test Steps:</h4>")
        for step in result.steps:
            parts.append('<div class="step">')
            parts.append(f'<div class="step-name">{html.escape(step.name)}</div>')
            if step.status:
                parts.append(
                    f'<div class="step-status">Status: {html.escape(step.status)}</div>'
                )
            parts.append("</div>")
        parts.append("</div>")

    attachments = list(iter_attachments(result))
    if attachments:
        parts.append('<div class="attachments">')
        parts.append("<h4>📎 Attachments (Videos &amp; Screenshots):</h4>")
        for index, attachment in enumerate(attachments):
            parts.append(_render_attachment(attachment, test_index, index))
        parts.append("</div>")

    parts.append("</div>")
    return "\n".join(parts)


def _render_attachment(attachment: Attachment, test_index: int, index: int) -> str:
    file_name = attachment_file_name(attachment.source)
    display_name = attachment.name or file_name
    report_path = (
        attachment.report_path
        or f"{ATTACHMENTS_DIR_NAME}/{test_index}-{index}-{file_name}"
    )
    return (
        '<div class="attachment-item">'
        f'<a href="{html.escape(report_path, quote=True)}" class="attachment-link" '
        'target="_blank">'
        f"{attachment_icon(attachment.type)} {html.escape(display_name)}</a>"
        '<small style="color: #6c757d; margin-left: 10px;">'
        f"{html.escape(attachment.type)}</small>"
        "</div>"
    )
