"""In-memory implementation of ContextStore."""

import asyncio
from typing import Any

from nexus.clock import Clock, monotonic
from nexus.context.models import DEFAULT_NAMESPACE, ContextEntry
from nexus.context.store import ContextStore
from nexus.observability.logging import get_logger

logger = get_logger(__name__)


class InMemoryContextStore(ContextStore):
    """Dict-backed context store guarded by an asyncio lock.

    Keys are (namespace, key) tuples so writers in different namespaces
    never collide.
    """

    def __init__(
        self,
        default_ttl_seconds: float = 300,
        clock: Clock = monotonic,
    ) -> None:
        if default_ttl_seconds <= 0:
            raise ValueError("default_ttl_seconds must be positive")
        self._default_ttl = default_ttl_seconds
        self._clock = clock
        self._entries: dict[tuple[str, str], ContextEntry] = {}
        self._lock = asyncio.Lock()

    @property
    def default_ttl_seconds(self) -> float:
        return self._default_ttl

    async def set(
        self,
        key: str,
        value: Any,
        *,
        ttl_seconds: float | None = None,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        ttl = self._default_ttl if ttl_seconds is None else ttl_seconds
        entry = ContextEntry(
            value=value,
            expires_at=self._clock() + ttl,
            namespace=namespace,
        )
        async with self._lock:
            self._entries[(namespace, key)] = entry

    async def get(
        self,
        key: str,
        namespace: str = DEFAULT_NAMESPACE,
        default: Any = None,
    ) -> Any:
        async with self._lock:
            entry = self._entries.get((namespace, key))
            if entry is None:
                return default
            if entry.is_expired(self._clock()):
                del self._entries[(namespace, key)]
                logger.debug("context_entry_expired", namespace=namespace, key=key)
                return default
            return entry.value

    async def delete(self, key: str, namespace: str = DEFAULT_NAMESPACE) -> bool:
        async with self._lock:
            return self._entries.pop((namespace, key), None) is not None

    async def sweep(self, now: float | None = None) -> int:
        now = self._clock() if now is None else now
        async with self._lock:
            expired = [k for k, entry in self._entries.items() if entry.is_expired(now)]
            for k in expired:
                del self._entries[k]
        if expired:
            logger.debug("context_sweep_evicted", count=len(expired))
        return len(expired)

    async def count(self) -> int:
        return len(self._entries)
