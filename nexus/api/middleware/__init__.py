"""API middleware."""

from nexus.api.middleware.context import LoggingContextMiddleware

__all__ = ["LoggingContextMiddleware"]
