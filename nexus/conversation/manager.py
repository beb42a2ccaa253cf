"""Session manager: lazy creation, activity tracking and idle eviction."""

from collections import Counter
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from nexus.clock import Clock, monotonic
from nexus.conversation.models import (
    HistoryEntry,
    Reply,
    Session,
    SessionSnapshot,
)
from nexus.conversation.store import SessionStore
from nexus.observability.logging import get_logger
from nexus.observability.metrics import ACTIVE_SESSIONS

logger = get_logger(__name__)


class SessionManager:
    """Authoritative record of where each user is in the conversation.

    Sessions are created on first access and swept once idle for longer
    than the timeout. A session leased by an in-flight turn is never swept,
    however stale its last_active_at looks.

    Concurrent turns for the same user key are not serialized: both get the
    same live session and the last write to session.data wins.
    """

    def __init__(
        self,
        store: SessionStore,
        *,
        timeout_seconds: float = 1800,
        history_max_length: int = 20,
        clock: Clock = monotonic,
    ) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if history_max_length < 1:
            raise ValueError("history_max_length must be at least 1")
        self._store = store
        self._timeout = timeout_seconds
        self._history_max = history_max_length
        self._clock = clock
        self._in_flight: Counter[str] = Counter()

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    @property
    def store(self) -> SessionStore:
        return self._store

    async def get_or_create(self, user_key: str) -> Session:
        """Return the session for user_key, creating it at step init if absent.

        Always refreshes last_active_at.
        """
        now = self._clock()

        def _new_session() -> Session:
            return Session(user_key=user_key, created_at=now, last_active_at=now)

        session, created = await self._store.get_or_create(user_key, _new_session)
        session.last_active_at = now
        if created:
            logger.info("session_created", user_key=user_key, session_id=session.id)
            ACTIVE_SESSIONS.set(await self._store.count())
        return session

    async def peek(self, user_key: str) -> Session | None:
        """Look up a session without creating or touching it."""
        return await self._store.get(user_key)

    @asynccontextmanager
    async def lease(self, user_key: str) -> AsyncIterator[Session]:
        """Hold a session for the duration of a turn.

        The session is shielded from sweeps while leased and is saved and
        touched again when the lease ends, even if the turn failed.
        """
        self._in_flight[user_key] += 1
        try:
            session = await self.get_or_create(user_key)
            try:
                yield session
            finally:
                session.last_active_at = self._clock()
                await self._store.save(session)
        finally:
            self._in_flight[user_key] -= 1
            if self._in_flight[user_key] <= 0:
                del self._in_flight[user_key]

    def is_leased(self, user_key: str) -> bool:
        return self._in_flight[user_key] > 0

    async def reset(self, user_key: str) -> bool:
        """Destroy a session explicitly; the next access starts over at init."""
        deleted = await self._store.delete(user_key)
        if deleted:
            logger.info("session_reset", user_key=user_key)
            ACTIVE_SESSIONS.set(await self._store.count())
        return deleted

    async def sweep(self, now: float | None = None) -> int:
        """Remove sessions idle for longer than the timeout.

        A session is removed iff now - last_active_at > timeout and it is
        not leased. Returns the number of sessions removed.
        """
        now = self._clock() if now is None else now

        def _expired(session: Session) -> bool:
            if self.is_leased(session.user_key):
                return False
            return now - session.last_active_at > self._timeout

        evicted = await self._store.evict(_expired)
        if evicted:
            logger.info("sessions_swept", count=len(evicted))
        ACTIVE_SESSIONS.set(await self._store.count())
        return len(evicted)

    def record_turn(self, session: Session, message: str, reply: Reply) -> None:
        """Append a history entry, dropping the oldest beyond the limit."""
        entry = HistoryEntry(
            message=message,
            reply_kind=reply.kind,
            step=session.step,
            at=self._clock(),
        )
        history = [*session.history, entry]
        if len(history) > self._history_max:
            history = history[-self._history_max :]
        session.history = history
        session.turn_count += 1

    @staticmethod
    def snapshot(session: Session) -> SessionSnapshot:
        """Immutable deep copy of a session."""
        return SessionSnapshot.of(session)

    async def count(self) -> int:
        return await self._store.count()
