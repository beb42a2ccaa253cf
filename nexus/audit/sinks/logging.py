"""Structured-log implementation of AuditSink."""

from nexus.audit.models import InteractionRecord
from nexus.audit.sink import AuditSink
from nexus.observability.logging import get_logger

logger = get_logger(__name__)


class LoggingAuditSink(AuditSink):
    """Writes each record as an interaction_logged event."""

    async def log_interaction(self, record: InteractionRecord) -> None:
        logger.info(
            "interaction_logged",
            record_id=str(record.id),
            platform=record.platform,
            user_id=record.user_id,
            success=record.success,
            status_code=record.status_code,
            duration_ms=round(record.duration_ms, 2),
            reply_kind=record.data.get("reply_kind"),
            step=record.data.get("step"),
            error=record.error,
        )
