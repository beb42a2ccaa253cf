"""API route registration."""

from fastapi import FastAPI

from nexus.config.settings import Settings
from nexus.observability.logging import get_logger

logger = get_logger(__name__)


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register all routes with the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Settings deciding whether metrics are exposed
    """
    from nexus.api.routes.health import router as health_router
    from nexus.api.routes.webhook import router as webhook_router

    app.include_router(webhook_router, tags=["Webhooks"])
    app.include_router(health_router, tags=["Health"])

    metrics = settings.observability.metrics
    if metrics.enabled:
        from nexus.api.routes.metrics import create_metrics_router

        app.include_router(create_metrics_router(metrics.path), tags=["Metrics"])

    logger.info("routes_registered", metrics_enabled=metrics.enabled)
