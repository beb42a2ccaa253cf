"""Webhook router: platform payload in, platform payload out.

Errors never escape route(); they become 400 or 500 results.
"""

import time
from collections.abc import Iterable
from typing import Any

from nexus.audit.models import InteractionRecord
from nexus.audit.sink import AuditDispatcher
from nexus.channels.gateway import PlatformGateway
from nexus.channels.models import CanonicalResponse
from nexus.conversation.engine import ConversationEngine
from nexus.exceptions import InputError, PayloadError, UnsupportedPlatformError
from nexus.observability.logging import get_logger
from nexus.observability.metrics import TURN_COUNT, TURN_LATENCY
from nexus.routing.models import RouteResult

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
# Metric label for platforms outside the allow-list
UNSUPPORTED_LABEL = "unsupported"


class Router:
    """Maps platform + raw payload to adapter, engine, adapter."""

    def __init__(
        self,
        gateway: PlatformGateway,
        engine: ConversationEngine,
        *,
        allowed_platforms: Iterable[str],
        audit: AuditDispatcher | None = None,
    ) -> None:
        self._gateway = gateway
        self._engine = engine
        self._allowed = frozenset(allowed_platforms)
        self._audit = audit

    @property
    def engine(self) -> ConversationEngine:
        return self._engine

    @property
    def audit(self) -> AuditDispatcher | None:
        return self._audit

    @property
    def allowed_platforms(self) -> frozenset[str]:
        return self._allowed

    def is_supported(self, platform: str) -> bool:
        return platform in self._allowed

    async def route(self, platform: str, raw_payload: Any) -> RouteResult:
        """Route one webhook.

        Returns:
            200 with the platform payload, 400 for unsupported platforms and
            unusable payloads, 500 for anything unexpected
        """
        started = time.perf_counter()
        user_id = ""
        response: CanonicalResponse | None = None

        try:
            if not self.is_supported(platform):
                raise UnsupportedPlatformError(platform)

            event = self._gateway.standardize(platform, raw_payload)
            user_id = event.user_id
            if not user_id:
                raise PayloadError(f"Could not find a user id in the {platform} payload")

            response = await self._engine.handle(event)
            status_code, body = 200, self._gateway.adapt_to_platform(platform, response)
            error = None
        except InputError as e:
            logger.warning(
                "route_rejected",
                platform=platform,
                error=e.message,
                error_type=type(e).__name__,
            )
            status_code, body, error = e.status_code, {"error": e.message}, e.message
        except Exception as e:
            logger.exception(
                "route_failed",
                platform=platform,
                user_id=user_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            status_code, body = 500, {"error": INTERNAL_ERROR_MESSAGE}
            error = str(e) or type(e).__name__

        elapsed_ms = (time.perf_counter() - started) * 1000
        result = RouteResult(status_code=status_code, body=body, processing_time_ms=elapsed_ms)
        self._record(platform, user_id, result, response, error)
        return result

    def _record(
        self,
        platform: str,
        user_id: str,
        result: RouteResult,
        response: CanonicalResponse | None,
        error: str | None,
    ) -> None:
        """Update metrics and submit the audit record; never raises."""
        try:
            label = platform if self.is_supported(platform) else UNSUPPORTED_LABEL
            status = "ok" if result.ok else ("rejected" if result.status_code < 500 else "error")
            TURN_COUNT.labels(platform=label, status=status).inc()
            TURN_LATENCY.labels(platform=label).observe(result.processing_time_ms / 1000)

            if self._audit is None:
                return
            data: dict[str, Any] = {}
            if response is not None:
                data = {
                    "reply_kind": response.reply.kind.value,
                    "step": response.step,
                    "session_id": response.session_id,
                }
            self._audit.submit(
                InteractionRecord(
                    platform=platform,
                    user_id=user_id,
                    duration_ms=result.processing_time_ms,
                    success=result.ok,
                    status_code=result.status_code,
                    data=data,
                    error=error,
                )
            )
        except Exception as e:
            logger.error("route_bookkeeping_failed", platform=platform, error=str(e))
