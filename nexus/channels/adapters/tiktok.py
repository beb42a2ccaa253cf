"""TikTok Business Messaging adapter."""

from typing import Any

from nexus.channels.adapter import PlatformAdapter, as_text, dig
from nexus.channels.models import CanonicalResponse, InboundEvent, Platform

MAX_TEXT_LENGTH = 1000


class TikTokAdapter(PlatformAdapter):
    """TikTok direct-message webhook format.

    Event content may arrive as a nested object or under a flat text key.
    Options are rendered into the text since the API has no quick replies.
    """

    @property
    def platform(self) -> str:
        return Platform.TIKTOK.value

    def _standardize(self, payload: dict[str, Any]) -> InboundEvent:
        user_id = dig(payload, "sender", "open_id") or payload.get("user_openid")
        text = dig(payload, "message", "text")
        if text is None:
            text = dig(payload, "content", "text")
        return InboundEvent(
            platform=self.platform,
            user_id=as_text(user_id),
            message=as_text(text),
            raw_data=payload,
        )

    def adapt(self, response: CanonicalResponse) -> dict[str, Any]:
        text = self.render_text(response)
        if response.reply.options:
            hints = "\n".join(f"- {o.label} ({o.id})" for o in response.reply.options)
            text = f"{text}\n\n{hints}"
        if len(text) > MAX_TEXT_LENGTH:
            text = text[: MAX_TEXT_LENGTH - 3] + "..."
        return {
            "recipient": {"open_id": response.user_id},
            "message_type": "text",
            "text": {"content": text},
        }
