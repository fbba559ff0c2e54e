"""Models for aggregated report data."""

from pydantic import BaseModel, Field

from todomvc.e2e_suite.models.allure_result import TestResult


class ReportSummary(BaseModel):
    """Counts and groupings computed from a list of test results."""

    total: int = Field(default=0, description="Number of results")
    passed: int = Field(default=0, description="Results with status passed")
    failed: int = Field(default=0, description="Results with status failed")
    skipped: int = Field(default=0, description="Results with status skipped")
    total_duration: int = Field(default=0, description="Sum of durations (ms)")
    browsers: list[str] = Field(
        default_factory=list, description="Unique browsers in first-seen order"
    )
    by_browser: dict[str, list[TestResult]] = Field(default_factory=dict)


class ChartArc(BaseModel):
    """One status slice of the summary pie chart."""

    status: str
    color: str
    length: float = Field(..., description="Visible stroke length")
    offset: float = Field(..., description="Negative cumulative preceding length")
