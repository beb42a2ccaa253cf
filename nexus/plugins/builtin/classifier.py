"""Keyword-based inquiry classification with per-user counters."""

import re

from nexus.plugins.models import DataBag, HookKind

ANALYTICS_NAMESPACE = "analytics"

# Checked in order; the first match wins. Whole words only, so "fee" does
# not fire on "feedback"; English stems take their inflections explicitly.
INQUIRY_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("price_inquiry", re.compile(r"\b(?:giá|chi phí|phí|prices?|pricing|costs?|fees?)\b")),
    (
        "registration",
        re.compile(r"\b(?:đăng ký|đăng kí|thành viên|regist\w*|sign(?:ing)? up|members?(?:hip)?)\b"),
    ),
    ("investment", re.compile(r"\b(?:đầu tư|cổ đông|góp vốn|invest\w*|shareholders?)\b")),
    ("complaint", re.compile(r"\b(?:khiếu nại|phàn nàn|complain\w*)\b")),
    ("support", re.compile(r"\b(?:hỗ trợ|tư vấn|help\w*|support\w*)\b")),
)
DEFAULT_INQUIRY = "general_inquiry"


def classify_inquiry(message: str) -> str:
    """Map a message to an inquiry type."""
    lowered = message.lower()
    for inquiry_type, pattern in INQUIRY_PATTERNS:
        if pattern.search(lowered):
            return inquiry_type
    return DEFAULT_INQUIRY


class InquiryClassifierPlugin:
    """Tags each turn with an inquiry type and counts types per user.

    Counts live in the context store's analytics namespace under the
    platform-qualified user key.
    """

    name = "inquiry-classifier"
    hooks = frozenset({HookKind.PRE_PROCESS})

    def __init__(self, ttl_seconds: float = 86400) -> None:
        self.ttl_seconds = ttl_seconds

    async def execute(self, hook: HookKind, bag: DataBag) -> DataBag:
        message = bag.get("message")
        if not isinstance(message, str):
            return bag

        inquiry_type = classify_inquiry(message)
        bag["inquiry_type"] = inquiry_type

        context = bag.get("context")
        if context is not None:
            key = f"{bag.get('platform')}:{bag.get('user_id')}"
            counts = dict(await context.get(key, namespace=ANALYTICS_NAMESPACE, default={}))
            counts[inquiry_type] = counts.get(inquiry_type, 0) + 1
            await context.set(
                key,
                counts,
                ttl_seconds=self.ttl_seconds,
                namespace=ANALYTICS_NAMESPACE,
            )
        return bag
