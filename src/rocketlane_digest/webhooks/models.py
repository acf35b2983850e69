"""
Pydantic models for webhook data processing.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUMMARY_PREVIEW_LENGTH = 100
SUMMARY_PREVIEW_SUFFIX = "..."


class ProcessingStatus(str, Enum):
    """Processing status enumeration."""

    PENDING = "pending"
    COMPLETE = "complete"
    FAILED = "failed"


class WebhookPayload(BaseModel):
    """
    Rocketlane webhook body.

    ``data`` is passed to the summarizer untouched. Unknown top-level keys
    are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    event: str | None = Field(None, description="Event type tag, e.g. task.completed")
    data: Any = Field(None, description="Event data, opaque to this service")

    @field_validator("event", mode="before")
    @classmethod
    def coerce_event(cls, v: Any) -> Any:
        """Scalar event tags are kept as their string form."""
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float, bool)):
            return str(v)
        raise ValueError(f"Event must be a string, got: {type(v).__name__}")

    @classmethod
    def from_webhook_data(cls, data: Any) -> "WebhookPayload":
        """
        Create payload from the decoded JSON body.

        Raises:
            ValueError: If the body is not a JSON object
        """
        if not isinstance(data, dict):
            raise ValueError("Webhook body must be a JSON object")
        return cls.model_validate(data)


class ProcessingResult(BaseModel):
    """Result of the summarize-then-notify pipeline."""

    model_config = ConfigDict(
        extra="forbid",
        use_enum_values=True,
    )

    success: bool = Field(..., description="Whether processing succeeded")
    status: ProcessingStatus = Field(..., description="Processing status")
    summary: str | None = Field(None, description="Full summary text")
    error_message: str | None = Field(None, description="Error message if failed")
    processing_time_ms: int = Field(
        ..., ge=0, description="Processing time in milliseconds"
    )

    @property
    def summary_preview(self) -> str | None:
        if self.summary is None:
            return None
        return summary_preview(self.summary)


def summary_preview(summary: str) -> str:
    """First 100 characters followed by an ellipsis, appended even for short summaries."""
    return summary[:SUMMARY_PREVIEW_LENGTH] + SUMMARY_PREVIEW_SUFFIX


class WebhookSuccessResponse(BaseModel):
    success: bool = True
    message: str = "Data analyzed and email sent"
    summary: str


class WebhookFailureResponse(BaseModel):
    success: bool = False
    error: str


class ErrorResponse(BaseModel):
    """Body for rejected requests (405, 401)."""

    error: str


class HealthStatus(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    configuration: dict[str, bool] = Field(
        default_factory=dict, description="Which required settings are present"
    )
