"""In-memory implementation of AuditSink."""

from nexus.audit.models import InteractionRecord
from nexus.audit.sink import AuditSink


class InMemoryAuditSink(AuditSink):
    """Keeps records in a list for testing and development."""

    def __init__(self) -> None:
        self.records: list[InteractionRecord] = []

    async def log_interaction(self, record: InteractionRecord) -> None:
        self.records.append(record)

    def for_user(self, platform: str, user_id: str) -> list[InteractionRecord]:
        """Records of one user in chronological order."""
        return [r for r in self.records if r.platform == platform and r.user_id == user_id]
