"""Whitespace and length normalization for inbound messages."""

from nexus.plugins.models import DataBag, HookKind


class MessageNormalizerPlugin:
    """Collapses runs of whitespace and truncates overlong messages."""

    name = "message-normalizer"
    hooks = frozenset({HookKind.PRE_PROCESS})

    def __init__(self, max_length: int = 1000) -> None:
        if max_length < 1:
            raise ValueError("max_length must be at least 1")
        self.max_length = max_length

    def execute(self, hook: HookKind, bag: DataBag) -> DataBag:
        message = bag.get("message")
        if isinstance(message, str):
            bag["message"] = " ".join(message.split())[: self.max_length]
        return bag
