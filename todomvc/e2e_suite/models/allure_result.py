"""Models for Allure JSON test result files."""

from pydantic import BaseModel, Field


class Parameter(BaseModel):
    """Named parameter recorded for a test run."""

    name: str = Field(..., description="Parameter name (e.g., Project)")
    value: str = Field(..., description="Parameter value")


class Label(BaseModel):
    """Named label recorded for a test run."""

    name: str = Field(..., description="Label name (e.g., parentSuite)")
    value: str = Field(..., description="Label value")


class Attachment(BaseModel):
    """Binary artifact (screenshot, video, trace) attached to a step."""

    name: str | None = Field(default=None, description="Display name")
    source: str = Field(..., description="File name inside the results directory")
    type: str = Field(default="", description="MIME type of the attachment")
    report_path: str | None = Field(
        default=None,
        exclude=True,
        description="Path relative to the report once the file has been copied",
    )


class Step(BaseModel):
    """Step of a test, possibly containing nested steps."""

    name: str = Field(default="", description="Step title")
    status: str | None = Field(default=None, description="Step status")
    attachments: list[Attachment] = Field(
        default_factory=list, description="Attachments recorded in this step"
    )
    steps: list["Step"] = Field(default_factory=list, description="Nested steps")


class TestResult(BaseModel):
    """Recorded outcome of a single browser test run."""

    name: str = Field(default="", description="Test name")
    status: str = Field(..., description="passed, failed, skipped or other")
    start: int | None = Field(default=None, description="Start timestamp (ms)")
    stop: int | None = Field(default=None, description="Stop timestamp (ms)")
    time: int | None = Field(default=None, description="Duration in milliseconds")
    parameters: list[Parameter] = Field(default_factory=list)
    labels: list[Label] = Field(default_factory=list)
    steps: list[Step] = Field(default_factory=list)
    browser: str = Field(default="Unknown", description="Resolved browser engine")
