"""Platform adapter interface.

Defines the interface that all platform adapters must implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from nexus.channels.models import CanonicalResponse, InboundEvent
from nexus.exceptions import PayloadError


def dig(payload: Any, *path: str | int) -> Any:
    """Walk nested mappings and lists, returning None on any missing step."""
    current = payload
    for part in path:
        if isinstance(part, int):
            if not isinstance(current, list) or not -len(current) <= part < len(current):
                return None
            current = current[part]
        elif isinstance(current, Mapping):
            current = current.get(part)
        else:
            return None
        if current is None:
            return None
    return current


def as_text(value: Any) -> str:
    """Coerce an id or text field to a string; None becomes empty."""
    if value is None:
        return ""
    return str(value)


class PlatformAdapter(ABC):
    """Converts between a platform's wire format and the canonical models.

    Adapters are stateless. standardize() is best-effort: missing fields
    produce empty strings rather than errors, and only a payload that is
    not a JSON object is rejected.
    """

    @property
    @abstractmethod
    def platform(self) -> str:
        """Platform identifier this adapter serves."""
        ...

    def standardize(self, payload: Any) -> InboundEvent:
        """Build a canonical event from a raw webhook payload.

        Raises:
            PayloadError: If payload is not a mapping
        """
        if not isinstance(payload, Mapping):
            raise PayloadError(
                f"{self.platform} payload must be a JSON object, got {type(payload).__name__}"
            )
        return self._standardize(dict(payload))

    @abstractmethod
    def _standardize(self, payload: dict[str, Any]) -> InboundEvent:
        ...

    @abstractmethod
    def adapt(self, response: CanonicalResponse) -> dict[str, Any]:
        """Render a canonical response in the platform's wire format."""
        ...

    @staticmethod
    def render_text(response: CanonicalResponse, max_length: int | None = None) -> str:
        """Reply text truncated to a platform limit."""
        text = response.reply.text
        if max_length is not None and len(text) > max_length:
            text = text[: max_length - 3] + "..."
        return text
