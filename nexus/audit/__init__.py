"""Interaction audit logging.

Records every routed turn without ever failing or delaying it.
"""

from nexus.audit.models import InteractionRecord
from nexus.audit.sink import AuditDispatcher, AuditSink
from nexus.audit.sinks import InMemoryAuditSink, LoggingAuditSink

__all__ = [
    "AuditDispatcher",
    "AuditSink",
    "InMemoryAuditSink",
    "InteractionRecord",
    "LoggingAuditSink",
]
