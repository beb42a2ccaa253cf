"""Background sweep of idle sessions and expired context entries.

The sweeper:
1. Wakes every sweep_interval_seconds
2. Evicts idle sessions that are not leased by an in-flight turn
3. Evicts expired context entries
"""

import asyncio

from nexus.context.store import ContextStore
from nexus.conversation.manager import SessionManager
from nexus.observability.logging import get_logger
from nexus.observability.metrics import SWEEP_EVICTIONS

logger = get_logger(__name__)


class SweepScheduler:
    """Periodic driver for SessionManager.sweep and ContextStore.sweep."""

    def __init__(
        self,
        manager: SessionManager,
        context: ContextStore,
        interval_seconds: float = 60,
    ) -> None:
        """Initialize sweeper.

        Args:
            manager: Session manager to sweep
            context: Context store to sweep
            interval_seconds: Delay between sweeps
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._manager = manager
        self._context = context
        self._interval_seconds = interval_seconds
        self._running = False
        self._poll_task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the sweep loop as a background task."""
        if self._running:
            logger.warning("sweeper_already_running")
            return

        self._running = True
        self._poll_task = asyncio.create_task(self._poll_loop())

        logger.info("sweeper_started", interval_seconds=self._interval_seconds)

    async def stop(self) -> None:
        """Stop the sweep loop."""
        if not self._running:
            return

        self._running = False

        if self._poll_task:
            self._poll_task.cancel()
            try:
                await self._poll_task
            except asyncio.CancelledError:
                pass
            self._poll_task = None

        logger.info("sweeper_stopped")

    async def run_once(self, now: float | None = None) -> tuple[int, int]:
        """Sweep both stores once.

        Returns:
            Tuple of (sessions evicted, context entries evicted)
        """
        sessions = await self._manager.sweep(now)
        entries = await self._context.sweep(now)

        SWEEP_EVICTIONS.labels(kind="session").inc(sessions)
        SWEEP_EVICTIONS.labels(kind="context").inc(entries)
        if sessions or entries:
            logger.info("sweep_completed", sessions=sessions, context_entries=entries)
        return sessions, entries

    async def _poll_loop(self) -> None:
        while self._running:
            await asyncio.sleep(self._interval_seconds)
            try:
                await self.run_once()
            except Exception as e:
                logger.error("sweep_failed", error=str(e), error_type=type(e).__name__)
