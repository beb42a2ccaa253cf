"""FAQ content: models, provider interface and loaders."""

from nexus.content.loader import load_faq_document
from nexus.content.models import (
    Answer,
    FAQCategory,
    FAQDocument,
    FAQMetadata,
    FAQQuestion,
    QuestionSummary,
)
from nexus.content.provider import ContentProvider, StaticContentProvider

__all__ = [
    "Answer",
    "ContentProvider",
    "FAQCategory",
    "FAQDocument",
    "FAQMetadata",
    "FAQQuestion",
    "QuestionSummary",
    "StaticContentProvider",
    "load_faq_document",
]
