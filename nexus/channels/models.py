"""Canonical event and response models shared by all platforms."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from nexus.conversation.models import Reply


class Platform(str, Enum):
    """Messaging platforms with a dedicated adapter."""

    FACEBOOK = "facebook"
    ZALO = "zalo"
    TELEGRAM = "telegram"
    TIKTOK = "tiktok"
    WEIBO = "weibo"


class InboundEvent(BaseModel):
    """Platform-independent inbound message."""

    platform: str = Field(..., description="Platform the message arrived on")
    user_id: str = Field(default="", description="Sender identifier on that platform")
    message: str = Field(default="", description="Message text or selected option id")
    raw_data: dict[str, Any] = Field(default_factory=dict, description="Original payload")
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Adapter-specific reply hints",
    )


class CanonicalResponse(BaseModel):
    """Platform-independent reply plus recipient identity."""

    platform: str = Field(..., description="Platform to reply on")
    user_id: str = Field(..., description="Recipient identifier")
    reply: Reply = Field(..., description="Reply content")
    step: str = Field(..., description="Session step after the turn")
    session_id: str | None = Field(default=None, description="Session that produced the reply")
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Reply hints copied from the inbound event",
    )
