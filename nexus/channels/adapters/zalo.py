"""Zalo Official Account adapter."""

from typing import Any

from nexus.channels.adapter import PlatformAdapter, as_text, dig
from nexus.channels.models import CanonicalResponse, InboundEvent, Platform

MAX_TEXT_LENGTH = 2000


class ZaloAdapter(PlatformAdapter):
    """Zalo OA webhook and message API format.

    Older webhooks identify the sender with a top-level fromuid; newer ones
    use sender.id. Both are accepted.
    """

    @property
    def platform(self) -> str:
        return Platform.ZALO.value

    def _standardize(self, payload: dict[str, Any]) -> InboundEvent:
        user_id = payload.get("fromuid") or dig(payload, "sender", "id")
        return InboundEvent(
            platform=self.platform,
            user_id=as_text(user_id),
            message=as_text(dig(payload, "message", "text")),
            raw_data=payload,
        )

    def adapt(self, response: CanonicalResponse) -> dict[str, Any]:
        text = self.render_text(response, MAX_TEXT_LENGTH)
        message: dict[str, Any] = {"text": text}
        if response.reply.options:
            message["attachment"] = {
                "type": "template",
                "payload": {
                    "buttons": [
                        {
                            "title": option.label,
                            "type": "oa.query.show",
                            "payload": option.id,
                        }
                        for option in response.reply.options
                    ]
                },
            }
        return {
            "recipient": {"user_id": response.user_id},
            "message": message,
        }
