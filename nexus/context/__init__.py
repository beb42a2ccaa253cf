"""Namespaced context store with per-entry expiry."""

from nexus.context.models import DEFAULT_NAMESPACE, ContextEntry
from nexus.context.store import ContextStore
from nexus.context.stores.inmemory import InMemoryContextStore

__all__ = [
    "DEFAULT_NAMESPACE",
    "ContextEntry",
    "ContextStore",
    "InMemoryContextStore",
]
