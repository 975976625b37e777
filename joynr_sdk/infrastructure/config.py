"""Configuration objects for the infrastructure layer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BrowserMessagingStubConfig(BaseModel):
    """Validated settings for a browser messaging stub.

    The transport handle is not part of the config: it is a live object
    shared between stubs and is injected separately.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
        populate_by_name=True,
    )

    window_id: str | None = Field(
        default=None,
        alias="windowId",
        description="Destination window, None if unspecified",
    )


class LogContext(BaseModel):
    """Structured context attached to log records."""

    model_config = ConfigDict(
        extra="allow",
        strict=False,
        validate_assignment=True,
    )

    component: str | None = Field(default=None, description="Component emitting the log")
    operation: str | None = Field(default=None, description="Operation being performed")
    window_id: str | None = Field(default=None, description="Destination browser window")
    message_type: str | None = Field(default=None, description="Type of the forwarded message")
    error_code: str | None = Field(default=None, description="Structured error code")
    error_type: str | None = Field(default=None, description="Qualified error type")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict for logger ``extra``, dropping unset fields."""
        return {k: v for k, v in self.model_dump().items() if v is not None}

    def with_error(self, error: Exception) -> LogContext:
        """Create a new context with error information."""
        return LogContext(
            **{
                **self.model_dump(),
                "error_code": error.__class__.__name__,
                "error_type": type(error).__module__ + "." + type(error).__name__,
            }
        )
