"""Facebook Messenger adapter."""

from typing import Any

from nexus.channels.adapter import PlatformAdapter, as_text, dig
from nexus.channels.models import CanonicalResponse, InboundEvent, Platform

# Messenger limits
MAX_TEXT_LENGTH = 2000
MAX_QUICK_REPLIES = 13
MAX_QUICK_REPLY_TITLE = 20


class FacebookAdapter(PlatformAdapter):
    """Messenger Send API format.

    Accepts either a single messaging event or the full webhook envelope
    (entry[0].messaging[0]). A quick-reply payload takes precedence over the
    typed text so button selections arrive as option ids.
    """

    @property
    def platform(self) -> str:
        return Platform.FACEBOOK.value

    def _standardize(self, payload: dict[str, Any]) -> InboundEvent:
        event = dig(payload, "entry", 0, "messaging", 0) or payload
        message = dig(event, "message", "quick_reply", "payload")
        if message is None:
            message = dig(event, "postback", "payload")
        if message is None:
            message = dig(event, "message", "text")
        return InboundEvent(
            platform=self.platform,
            user_id=as_text(dig(event, "sender", "id")),
            message=as_text(message),
            raw_data=payload,
        )

    def adapt(self, response: CanonicalResponse) -> dict[str, Any]:
        message: dict[str, Any] = {"text": self.render_text(response, MAX_TEXT_LENGTH)}
        if response.reply.options:
            message["quick_replies"] = [
                {
                    "content_type": "text",
                    "title": option.label[:MAX_QUICK_REPLY_TITLE],
                    "payload": option.id,
                }
                for option in response.reply.options[:MAX_QUICK_REPLIES]
            ]
        return {
            "recipient": {"id": response.user_id},
            "message": message,
            "messaging_type": "RESPONSE",
        }
