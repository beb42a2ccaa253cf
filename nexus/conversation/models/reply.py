"""Platform-agnostic reply content."""

from typing import Any

from pydantic import BaseModel, Field

from nexus.conversation.models.enums import ReplyKind


class ReplyOption(BaseModel):
    """A selectable choice; adapters render these as quick replies."""

    id: str = Field(..., description="Value sent back when selected")
    label: str = Field(..., description="Human-readable label")


class Reply(BaseModel):
    """Message content produced by one turn."""

    kind: ReplyKind = Field(..., description="Reply type")
    text: str = Field(..., description="Rendered message text")
    options: list[ReplyOption] = Field(default_factory=list, description="Choices offered")
    category: str | None = Field(default=None, description="Category the reply relates to")
    data: dict[str, Any] = Field(default_factory=dict, description="Structured payload")
