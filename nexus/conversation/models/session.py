"""Session models for conversation domain."""

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from nexus.conversation.models.enums import ReplyKind, Step


def new_session_id() -> str:
    """Return a fresh opaque session token."""
    return uuid4().hex


def session_key(platform: str, user_id: str) -> str:
    """Platform-qualified user key; the same id on two platforms is two users."""
    return f"{platform}:{user_id}"


class HistoryEntry(BaseModel):
    """Record of one completed turn."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Inbound text after pre-processing")
    reply_kind: ReplyKind = Field(..., description="Kind of reply emitted")
    step: str = Field(..., description="Step after the turn")
    at: float = Field(..., description="Monotonic time of the turn")


class Session(BaseModel):
    """Runtime conversation state for one user key.

    Timestamps are monotonic clock readings, not wall-clock datetimes.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    id: str = Field(default_factory=new_session_id, frozen=True, description="Opaque token")
    user_key: str = Field(..., description="Platform-qualified user identifier")
    step: str = Field(default=Step.INIT.value, description="Current state machine step")
    current_category: str | None = Field(default=None, description="Selected category")
    history: list[HistoryEntry] = Field(default_factory=list, description="Recent turns")
    created_at: float = Field(..., description="Creation time")
    last_active_at: float = Field(..., description="Last access time")
    turn_count: int = Field(default=0, ge=0, description="Total turns")
    data: dict[str, Any] = Field(default_factory=dict, description="State machine fields")


class SessionSnapshot(BaseModel):
    """Immutable deep copy of a session handed to plugins and responses."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_key: str
    step: str
    current_category: str | None = None
    history: tuple[HistoryEntry, ...] = ()
    created_at: float
    last_active_at: float
    turn_count: int = 0
    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def of(cls, session: Session) -> "SessionSnapshot":
        """Copy a live session; model_dump builds fresh containers throughout."""
        return cls.model_validate(session.model_dump())
