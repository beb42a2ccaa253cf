"""Prometheus metrics endpoint."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from nexus.observability.logging import get_logger

logger = get_logger(__name__)


def create_metrics_router(path: str = "/metrics") -> APIRouter:
    """Router exposing the default Prometheus registry at path."""
    router = APIRouter()

    @router.get(path)
    async def get_metrics() -> Response:
        """Get Prometheus metrics in text exposition format."""
        logger.debug("metrics_request")
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return router
