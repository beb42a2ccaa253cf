"""Conversation engine configuration."""

from pydantic import BaseModel, Field, field_validator


class ConversationConfig(BaseModel):
    """Session lifecycle, context expiry and command vocabulary."""

    session_timeout_seconds: float = Field(
        default=1800,
        gt=0,
        description="Idle time after which a session is swept",
    )
    sweep_interval_seconds: float = Field(
        default=60,
        gt=0,
        description="How often expired sessions and context entries are swept",
    )
    history_max_length: int = Field(
        default=20,
        ge=1,
        description="Maximum history entries kept per session",
    )
    context_default_ttl_seconds: float = Field(
        default=300,
        gt=0,
        description="TTL applied when context.set() gets no ttl_seconds",
    )
    back_command: str = Field(default="back", description="Returns to the category list")
    reset_commands: list[str] = Field(
        default_factory=lambda: ["reset", "/reset", "/start"],
        description="Destroy the session and start over",
    )

    @field_validator("back_command")
    @classmethod
    def _normalize_back(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("back_command must not be empty")
        return value

    @field_validator("reset_commands")
    @classmethod
    def _normalize_reset(cls, value: list[str]) -> list[str]:
        return [v.strip().lower() for v in value if v.strip()]
