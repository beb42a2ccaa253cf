"""ContextStore abstract interface."""

from abc import ABC, abstractmethod
from typing import Any

from nexus.context.models import DEFAULT_NAMESPACE


class ContextStore(ABC):
    """Namespaced key/value store with fixed per-entry expiry.

    Reads never extend an entry's lifetime. Expired entries are dropped
    when read and by the periodic sweep.
    """

    @abstractmethod
    async def set(
        self,
        key: str,
        value: Any,
        *,
        ttl_seconds: float | None = None,
        namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        """Store or overwrite a value."""
        pass

    @abstractmethod
    async def get(
        self,
        key: str,
        namespace: str = DEFAULT_NAMESPACE,
        default: Any = None,
    ) -> Any:
        """Get a live value, or default if absent or expired."""
        pass

    @abstractmethod
    async def delete(self, key: str, namespace: str = DEFAULT_NAMESPACE) -> bool:
        """Delete an entry, returning whether it existed."""
        pass

    @abstractmethod
    async def sweep(self, now: float | None = None) -> int:
        """Evict every expired entry, returning how many were removed."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored entries, expired-but-unswept included."""
        pass
