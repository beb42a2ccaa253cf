"""AuditSink abstract interface and dispatcher."""

import asyncio
from abc import ABC, abstractmethod

from nexus.audit.models import InteractionRecord
from nexus.observability.logging import get_logger

logger = get_logger(__name__)


class AuditSink(ABC):
    """Destination for interaction records.

    Implementations may be slow or unreliable; callers go through
    AuditDispatcher so a sink never delays or fails a turn.
    """

    @abstractmethod
    async def log_interaction(self, record: InteractionRecord) -> None:
        """Persist one interaction record."""
        ...


class AuditDispatcher:
    """Fire-and-forget front for an AuditSink.

    Each record is written in its own task. Failures are logged and
    dropped. flush() waits for pending writes.
    """

    def __init__(self, sink: AuditSink) -> None:
        self._sink = sink
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def sink(self) -> AuditSink:
        return self._sink

    @property
    def pending(self) -> int:
        return len(self._pending)

    def submit(self, record: InteractionRecord) -> None:
        """Schedule a record for writing without waiting for it.

        Must be called from within a running event loop.
        """
        task = asyncio.create_task(self._sink.log_interaction(record))
        self._pending.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: "asyncio.Task[None]") -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(
                "audit_write_failed",
                sink=type(self._sink).__name__,
                error=str(error),
                error_type=type(error).__name__,
            )

    async def flush(self) -> None:
        """Wait for every pending write to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
