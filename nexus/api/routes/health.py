"""Health check endpoint."""

from fastapi import APIRouter

from nexus import __version__
from nexus.api.dependencies import RuntimeDep
from nexus.api.models.health import HealthResponse
from nexus.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(runtime: RuntimeDep) -> HealthResponse:
    """Report operational metadata.

    Returns:
        HealthResponse with version, uptime and store sizes
    """
    logger.debug("health_check_request")

    engine = runtime.engine
    return HealthResponse(
        version=__version__,
        environment=runtime.settings.environment,
        uptime_seconds=round(runtime.uptime_seconds, 3),
        active_sessions=await engine.manager.count(),
        context_entries=await engine.context.count(),
        platforms=sorted(runtime.router.allowed_platforms),
    )
