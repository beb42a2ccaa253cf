"""Fallback adapter for platforms without a dedicated one."""

from typing import Any

from nexus.channels.adapter import PlatformAdapter, as_text, dig
from nexus.channels.models import CanonicalResponse, InboundEvent

# Probed in order for the sender id and the message text
USER_ID_PATHS: tuple[tuple[str, ...], ...] = (
    ("user_id",),
    ("userId",),
    ("sender", "id"),
    ("from", "id"),
)
MESSAGE_PATHS: tuple[tuple[str, ...], ...] = (
    ("message", "text"),
    ("message",),
    ("text",),
)


def _first(payload: dict[str, Any], paths: tuple[tuple[str, ...], ...]) -> Any:
    for path in paths:
        value = dig(payload, *path)
        if value is not None and not isinstance(value, (dict, list)):
            return value
    return None


class DefaultAdapter(PlatformAdapter):
    """Extracts the most generic shape; may yield a partially empty event."""

    def __init__(self, platform: str = "default") -> None:
        self._platform = platform

    @property
    def platform(self) -> str:
        return self._platform

    def _standardize(self, payload: dict[str, Any]) -> InboundEvent:
        return InboundEvent(
            platform=self.platform,
            user_id=as_text(_first(payload, USER_ID_PATHS)),
            message=as_text(_first(payload, MESSAGE_PATHS)),
            raw_data=payload,
        )

    def adapt(self, response: CanonicalResponse) -> dict[str, Any]:
        message: dict[str, Any] = {"text": self.render_text(response)}
        if response.reply.options:
            message["options"] = [o.model_dump() for o in response.reply.options]
        return {
            "recipient": {"id": response.user_id},
            "message": message,
        }
