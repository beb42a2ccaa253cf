"""Sina Weibo fan-service messaging adapter."""

import json
from typing import Any

from nexus.channels.adapter import PlatformAdapter, as_text
from nexus.channels.models import CanonicalResponse, InboundEvent, Platform


class WeiboAdapter(PlatformAdapter):
    """Weibo push messages in, reply API parameters out.

    The reply API takes its content as a JSON-encoded string in data.
    """

    @property
    def platform(self) -> str:
        return Platform.WEIBO.value

    def _standardize(self, payload: dict[str, Any]) -> InboundEvent:
        metadata = {}
        if payload.get("receiver_id") is not None:
            metadata["receiver_id"] = payload["receiver_id"]
        return InboundEvent(
            platform=self.platform,
            user_id=as_text(payload.get("sender_id")),
            message=as_text(payload.get("text")),
            raw_data=payload,
            metadata=metadata,
        )

    def adapt(self, response: CanonicalResponse) -> dict[str, Any]:
        text = self.render_text(response)
        if response.reply.options:
            hints = "\n".join(f"{o.id}: {o.label}" for o in response.reply.options)
            text = f"{text}\n\n{hints}"
        return {
            "receiver_id": response.user_id,
            "type": "text",
            "data": json.dumps({"text": text}, ensure_ascii=False),
        }
