"""Session stores for conversation management."""

from nexus.conversation.store import SessionStore
from nexus.conversation.stores.inmemory import InMemorySessionStore

__all__ = [
    "SessionStore",
    "InMemorySessionStore",
]
