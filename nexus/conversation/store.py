"""SessionStore abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from nexus.conversation.models import Session


class SessionStore(ABC):
    """Abstract interface for session storage, keyed by user key.

    Implementations must make get_or_create and evict atomic with respect
    to each other so a sweep cannot interleave with session creation.
    """

    @abstractmethod
    async def get(self, user_key: str) -> Session | None:
        """Get the session for a user key."""
        pass

    @abstractmethod
    async def get_or_create(
        self,
        user_key: str,
        factory: Callable[[], Session],
    ) -> tuple[Session, bool]:
        """Get the session for a user key, creating it with factory if absent.

        Returns the session and whether it was created.
        """
        pass

    @abstractmethod
    async def save(self, session: Session) -> str:
        """Save a session, returning its ID."""
        pass

    @abstractmethod
    async def delete(self, user_key: str) -> bool:
        """Delete the session for a user key."""
        pass

    @abstractmethod
    async def evict(self, predicate: Callable[[Session], bool]) -> list[Session]:
        """Delete and return every session matching predicate."""
        pass

    @abstractmethod
    async def list_all(self) -> list[Session]:
        """List all live sessions."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of live sessions."""
        pass
