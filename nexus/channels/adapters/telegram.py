"""Telegram Bot API adapter."""

from typing import Any

from nexus.channels.adapter import PlatformAdapter, as_text, dig
from nexus.channels.models import CanonicalResponse, InboundEvent, Platform
from nexus.observability.logging import get_logger

logger = get_logger(__name__)

MAX_TEXT_LENGTH = 4096
MAX_CALLBACK_BYTES = 64


def callback_data(option_id: str) -> str:
    """Fit an option id into Telegram's 64-byte callback_data.

    A cut id no longer matches its option, so cutting is logged.
    """
    encoded = option_id.encode("utf-8")
    if len(encoded) <= MAX_CALLBACK_BYTES:
        return option_id
    logger.warning("callback_data_truncated", option_id=option_id, size=len(encoded))
    return encoded[:MAX_CALLBACK_BYTES].decode("utf-8", errors="ignore")


class TelegramAdapter(PlatformAdapter):
    """Telegram update in, sendMessage webhook reply out.

    Callback queries (inline keyboard taps) carry the option id in data.
    The chat id is kept in event metadata because group chats reply to the
    chat, not the sender.
    """

    @property
    def platform(self) -> str:
        return Platform.TELEGRAM.value

    def _standardize(self, payload: dict[str, Any]) -> InboundEvent:
        callback = payload.get("callback_query")
        if isinstance(callback, dict):
            message = callback.get("message") or {}
            user_id = dig(callback, "from", "id")
            text = callback.get("data")
        else:
            message = payload.get("message") or payload.get("edited_message") or {}
            user_id = dig(message, "from", "id")
            text = dig(message, "text")

        chat_id = dig(message, "chat", "id")
        metadata = {"chat_id": chat_id} if chat_id is not None else {}
        return InboundEvent(
            platform=self.platform,
            user_id=as_text(user_id if user_id is not None else chat_id),
            message=as_text(text),
            raw_data=payload,
            metadata=metadata,
        )

    def adapt(self, response: CanonicalResponse) -> dict[str, Any]:
        chat_id = response.metadata.get("chat_id", response.user_id)
        body: dict[str, Any] = {
            "method": "sendMessage",
            "chat_id": chat_id,
            "text": self.render_text(response, MAX_TEXT_LENGTH),
        }
        if response.reply.options:
            body["reply_markup"] = {
                "inline_keyboard": [
                    [{"text": option.label, "callback_data": callback_data(option.id)}]
                    for option in response.reply.options
                ]
            }
        return body
