"""Context store implementations."""

from nexus.context.store import ContextStore
from nexus.context.stores.inmemory import InMemoryContextStore

__all__ = [
    "ContextStore",
    "InMemoryContextStore",
]
