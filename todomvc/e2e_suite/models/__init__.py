"""Data models for Allure results, report aggregates and suite configuration."""

from todomvc.e2e_suite.models.allure_result import (
    Attachment,
    Label,
    Parameter,
    Step,
    TestResult,
)
from todomvc.e2e_suite.models.report_summary import ChartArc, ReportSummary
from todomvc.e2e_suite.models.suite_config import SuiteConfig

__all__ = [
    "Attachment",
    "ChartArc",
    "Label",
    "Parameter",
    "ReportSummary",
    "Step",
    "SuiteConfig",
    "TestResult",
]
