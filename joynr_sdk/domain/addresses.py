"""Routing addresses for messaging destinations."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BrowserAddress(BaseModel):
    """Address of a participant living in a browser context."""

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    window_id: str | None = Field(
        default=None, description="Destination window, None if unspecified"
    )


class InProcessAddress(BaseModel):
    """Address of a participant reachable inside the current process."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    skeleton: Any = Field(..., description="Object receiving messages for this participant")
