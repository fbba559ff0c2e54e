"""Tests for the result loader and aggregation."""

import json
from pathlib import Path
from typing import Any

import pytest

from todomvc.e2e_suite.models.allure_result import Label, Parameter, TestResult
from todomvc.e2e_suite.result_loader import (
    decorate_result,
    load_result_file,
    load_results,
    resolve_browser,
    summarize,
)


def write_result(results_dir: Path, file_name: str, data: dict[str, Any]) -> Path:
    """Write a result JSON file."""
    path = results_dir / file_name
    path.write_text(json.dumps(data))
    return path


def test_load_result_file_valid(tmp_path: Path) -> None:
    """load_result_file parses a valid result."""
    path = write_result(
        tmp_path,
        "a-result.json",
        {
            "name": "workflow",
            "status": "passed",
            "start": 1000,
            "stop": 1500,
            "parameters": [{"name": "Project", "value": "chromium"}],
        },
    )

    result = load_result_file(path)

    assert result.name == "workflow"
    assert result.status == "passed"
    assert result.parameters == [Parameter(name="Project", value="chromium")]
    assert result.time is None


def test_load_result_file_invalid_json(tmp_path: Path) -> None:
    """load_result_file raises ValueError for malformed JSON."""
    path = tmp_path / "broken-result.json"
    path.write_text('{"name": "broken", ')

    with pytest.raises(ValueError, match="Invalid JSON"):
        load_result_file(path)


def test_load_result_file_invalid_schema(tmp_path: Path) -> None:
    """load_result_file raises ValueError when the schema doesn't match."""
    path = write_result(tmp_path, "bad-result.json", {"name": "no status"})

    with pytest.raises(ValueError, match="Invalid test result schema"):
        load_result_file(path)


def test_load_results_missing_directory(tmp_path: Path) -> None:
    """load_results returns an empty list for a missing directory."""
    assert load_results(tmp_path / "allure-results") == []


def test_load_results_empty_directory(tmp_path: Path) -> None:
    """load_results returns an empty list when there are no JSON files."""
    (tmp_path / "attachment.png").write_bytes(b"png")
    assert load_results(tmp_path) == []


def test_load_results_sorted_and_decorated(tmp_path: Path) -> None:
    """load_results reads files in name order and decorates each result."""
    write_result(
        tmp_path,
        "b-result.json",
        {"name": "second firefox", "status": "failed", "time": 42},
    )
    write_result(
        tmp_path,
        "a-result.json",
        {"name": "first", "status": "passed", "start": 1000, "stop": 1500},
    )

    results = load_results(tmp_path)

    assert [r.name for r in results] == ["first", "second firefox"]
    assert results[0].time == 500
    assert results[0].browser == "Unknown"
    assert results[1].time == 42
    assert results[1].browser == "firefox"


def test_load_results_skips_containers(tmp_path: Path) -> None:
    """Allure fixture container files aren't treated as results."""
    write_result(tmp_path, "a-result.json", {"name": "test", "status": "passed"})
    write_result(
        tmp_path, "b-container.json", {"uuid": "b", "children": ["a"], "befores": []}
    )

    results = load_results(tmp_path)

    assert len(results) == 1
    assert results[0].name == "test"


def test_load_results_malformed_file_aborts(tmp_path: Path) -> None:
    """A single malformed file fails the whole load."""
    write_result(tmp_path, "a-result.json", {"name": "ok", "status": "passed"})
    (tmp_path / "b-result.json").write_text("not json")

    with pytest.raises(ValueError, match="b-result.json"):
        load_results(tmp_path)


def test_decorate_result_backfills_time() -> None:
    """Duration is derived from start and stop when absent."""
    result = decorate_result(TestResult(status="passed", start=1000, stop=1500))
    assert result.time == 500


def test_decorate_result_keeps_explicit_time() -> None:
    """An explicit duration wins over start and stop."""
    result = decorate_result(
        TestResult(status="passed", start=1000, stop=1500, time=123)
    )
    assert result.time == 123


def test_decorate_result_defaults_time_to_zero() -> None:
    """Duration defaults to 0 without timestamps."""
    result = decorate_result(TestResult(status="passed", start=1000))
    assert result.time == 0


def test_resolve_browser_prefers_project_parameter() -> None:
    """The Project parameter wins over labels and the test name."""
    result = TestResult(
        name="runs on chromium",
        status="passed",
        parameters=[Parameter(name="Project", value="firefox")],
        labels=[Label(name="parentSuite", value="webkit")],
    )
    assert resolve_browser(result) == "firefox"


def test_resolve_browser_falls_back_to_parent_suite() -> None:
    """The parentSuite label is used when there is no Project parameter."""
    result = TestResult(
        name="runs on chromium",
        status="passed",
        parameters=[Parameter(name="browser_name", value="firefox")],
        labels=[
            Label(name="suite", value="test_todo_mvc"),
            Label(name="parentSuite", value="webkit"),
        ],
    )
    assert resolve_browser(result) == "webkit"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("workflow [chromium]", "chromium"),
        ("workflow [firefox]", "firefox"),
        ("workflow [webkit]", "webkit"),
        ("chromium vs firefox", "chromium"),
        ("workflow", "Unknown"),
    ],
)
def test_resolve_browser_from_name(name: str, expected: str) -> None:
    """The test name is searched for a known engine as a last resort."""
    assert resolve_browser(TestResult(name=name, status="passed")) == expected


def test_summarize_counts() -> None:
    """Status buckets add up to the total for recognized statuses."""
    results = [
        TestResult(status="passed", time=100, browser="chromium"),
        TestResult(status="passed", time=200, browser="firefox"),
        TestResult(status="failed", time=300, browser="chromium"),
        TestResult(status="skipped", time=0, browser="webkit"),
    ]

    summary = summarize(results)

    assert summary.total == 4
    assert summary.passed == 2
    assert summary.failed == 1
    assert summary.skipped == 1
    assert summary.total == summary.passed + summary.failed + summary.skipped
    assert summary.total_duration == 600


def test_summarize_unknown_status_counts_only_in_total() -> None:
    """A status outside the three buckets is only part of the total."""
    summary = summarize(
        [
            TestResult(status="passed"),
            TestResult(status="broken"),
        ]
    )

    assert summary.total == 2
    assert summary.passed == 1
    assert summary.failed == 0
    assert summary.skipped == 0


def test_summarize_groups_by_browser_in_first_seen_order() -> None:
    """Browsers keep the order they first appear in."""
    results = [
        TestResult(name="a", status="passed", browser="webkit"),
        TestResult(name="b", status="passed", browser="chromium"),
        TestResult(name="c", status="failed", browser="webkit"),
    ]

    summary = summarize(results)

    assert summary.browsers == ["webkit", "chromium"]
    assert [r.name for r in summary.by_browser["webkit"]] == ["a", "c"]
    assert [r.name for r in summary.by_browser["chromium"]] == ["b"]


def test_summarize_empty() -> None:
    """An empty result list summarizes to zeros."""
    summary = summarize([])
    assert summary.total == 0
    assert summary.total_duration == 0
    assert summary.browsers == []
    assert summary.by_browser == {}


def test_load_results_project_parameter_written_by_allure_pytest(
    tmp_path: Path,
) -> None:
    """Quoted Project values from allure-pytest resolve to the bare engine."""
    write_result(
        tmp_path,
        "a-result.json",
        {
            "name": "test_complete_todo_workflow[chromium]",
            "status": "passed",
            "parameters": [
                {"name": "browser_name", "value": "'chromium'"},
                {"name": "Project", "value": "'chromium'"},
            ],
            "labels": [{"name": "parentSuite", "value": "chromium"}],
        },
    )

    results = load_results(tmp_path)

    assert results[0].browser == "chromium"
    assert summarize(results).browsers == ["chromium"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("'webkit'", "webkit"),
        ('"firefox"', "firefox"),
        ("firefox", "firefox"),
        ("'", "'"),
        ("'mixed\"", "'mixed\""),
    ],
)
def test_resolve_browser_unquotes_project_parameter(value: str, expected: str) -> None:
    """Only a matching pair of surrounding quotes is removed."""
    result = TestResult(
        status="passed", parameters=[Parameter(name="Project", value=value)]
    )
    assert resolve_browser(result) == expected
