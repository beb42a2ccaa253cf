"""Conversation domain models.

Contains the Pydantic models for conversation state:
- Sessions and their immutable snapshots
- History entries for completed turns
- Replies produced by the state machine
"""

from nexus.conversation.models.enums import ReplyKind, Step
from nexus.conversation.models.reply import Reply, ReplyOption
from nexus.conversation.models.session import (
    HistoryEntry,
    Session,
    SessionSnapshot,
    new_session_id,
    session_key,
)

__all__ = [
    # Enums
    "ReplyKind",
    "Step",
    # Reply models
    "Reply",
    "ReplyOption",
    # Session models
    "HistoryEntry",
    "Session",
    "SessionSnapshot",
    "new_session_id",
    "session_key",
]
