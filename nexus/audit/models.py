"""InteractionRecord model for the audit domain."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class InteractionRecord(BaseModel):
    """One routed webhook turn.

    Successful turns carry the reply summary in data; failed turns carry
    the error message instead.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    platform: str = Field(..., description="Platform the webhook arrived on")
    user_id: str = Field(default="", description="Sender identifier, empty if unknown")
    duration_ms: float = Field(..., ge=0, description="Routing time in milliseconds")
    success: bool = Field(..., description="Whether the turn produced a reply")
    status_code: int = Field(default=200, description="Status of the routed result")
    data: dict[str, Any] = Field(default_factory=dict, description="Reply summary")
    error: str | None = Field(default=None, description="Error message for failed turns")
    timestamp: datetime = Field(default_factory=utc_now, description="Record time")
