"""In-memory implementation of SessionStore."""

import asyncio
from collections.abc import Callable

from nexus.conversation.models import Session
from nexus.conversation.store import SessionStore


class InMemorySessionStore(SessionStore):
    """Dict-backed session store guarded by an asyncio lock.

    Sessions are held by reference: the object returned by get() is the
    live record, so in-place mutation is visible to every reader.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = asyncio.Lock()

    async def get(self, user_key: str) -> Session | None:
        return self._sessions.get(user_key)

    async def get_or_create(
        self,
        user_key: str,
        factory: Callable[[], Session],
    ) -> tuple[Session, bool]:
        async with self._lock:
            session = self._sessions.get(user_key)
            if session is not None:
                return session, False
            session = factory()
            self._sessions[user_key] = session
            return session, True

    async def save(self, session: Session) -> str:
        async with self._lock:
            self._sessions[session.user_key] = session
        return session.id

    async def delete(self, user_key: str) -> bool:
        async with self._lock:
            return self._sessions.pop(user_key, None) is not None

    async def evict(self, predicate: Callable[[Session], bool]) -> list[Session]:
        async with self._lock:
            doomed = [s for s in self._sessions.values() if predicate(s)]
            for session in doomed:
                del self._sessions[session.user_key]
        return doomed

    async def list_all(self) -> list[Session]:
        sessions = list(self._sessions.values())
        sessions.sort(key=lambda s: s.last_active_at, reverse=True)
        return sessions

    async def count(self) -> int:
        return len(self._sessions)
