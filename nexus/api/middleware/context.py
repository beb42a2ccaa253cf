"""Logging context middleware for observability.

Binds request_id and, for webhook calls, platform to structlog
contextvars for the duration of each request.
"""

from collections.abc import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from structlog.contextvars import bind_contextvars, clear_contextvars

from nexus.observability.logging import get_logger

logger = get_logger(__name__)

WEBHOOK_PREFIX = "/webhook/"


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware that binds request context to structlog contextvars.

    Headers:
        X-Request-ID: Request identifier, generated when absent and echoed
            back on the response
    """

    async def dispatch(  # type: ignore[override]
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        """Process request and bind logging context."""
        clear_contextvars()

        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        bind_contextvars(
            request_id=request_id,
            platform=self._extract_platform(request.url.path),
        )

        logger.debug("request_started", method=request.method, path=request.url.path)

        response = await call_next(request)  # type: ignore[misc]
        response.headers["X-Request-ID"] = request_id

        logger.debug(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
        )

        return response  # type: ignore[no-any-return]

    @staticmethod
    def _extract_platform(path: str) -> str | None:
        """Platform segment of /webhook/{platform}, if this is a webhook call."""
        if not path.startswith(WEBHOOK_PREFIX):
            return None
        segment = path[len(WEBHOOK_PREFIX):].split("/", 1)[0]
        return segment or None
