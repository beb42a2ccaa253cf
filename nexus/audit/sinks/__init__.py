"""AuditSink implementations."""

from nexus.audit.sinks.inmemory import InMemoryAuditSink
from nexus.audit.sinks.logging import LoggingAuditSink

__all__ = ["InMemoryAuditSink", "LoggingAuditSink"]
