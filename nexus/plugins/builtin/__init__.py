"""Plugins shipped with Nexus."""

from nexus.plugins.builtin.classifier import (
    ANALYTICS_NAMESPACE,
    InquiryClassifierPlugin,
    classify_inquiry,
)
from nexus.plugins.builtin.normalizer import MessageNormalizerPlugin

__all__ = [
    "ANALYTICS_NAMESPACE",
    "InquiryClassifierPlugin",
    "MessageNormalizerPlugin",
    "classify_inquiry",
]
