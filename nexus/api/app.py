"""FastAPI application factory.

Creates and configures the FastAPI application with middleware,
exception handlers, lifespan hooks and route registration.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nexus import __version__
from nexus.api.dependencies import get_runtime, get_settings
from nexus.api.exceptions import NexusAPIError
from nexus.api.middleware import LoggingContextMiddleware
from nexus.api.models.errors import ErrorCode, ErrorResponse
from nexus.api.routes import register_routes
from nexus.exceptions import NexusError
from nexus.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Start the sweeper on startup; stop it and flush audit writes on shutdown."""
    runtime = get_runtime()
    await runtime.start()
    logger.info("app_started", version=__version__)
    try:
        yield
    finally:
        await runtime.stop()
        logger.info("app_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()
    log_config = settings.observability.logging
    setup_logging(
        level=log_config.level,
        format=log_config.format,
        redact_pii=log_config.redact_pii,
    )

    app = FastAPI(
        title="Nexus Relay",
        description="Multi-platform chat-bot relay",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingContextMiddleware)

    _register_exception_handlers(app)
    register_routes(app, settings)

    logger.info(
        "app_created",
        environment=settings.environment,
        cors_origins=settings.api.cors_origins,
    )

    return app


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(NexusAPIError)
    async def nexus_api_error_handler(request: Request, exc: NexusAPIError) -> JSONResponse:
        """Handle NexusAPIError and its subclasses."""
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )
        return _error(exc.status_code, exc.message)

    @app.exception_handler(NexusError)
    async def nexus_error_handler(request: Request, exc: NexusError) -> JSONResponse:
        """Handle domain errors raised outside the router."""
        logger.warning(
            "domain_error",
            error_type=type(exc).__name__,
            message=exc.message,
            path=request.url.path,
        )
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle FastAPI request validation errors."""
        logger.warning(
            "validation_error",
            error_code=ErrorCode.INVALID_REQUEST.value,
            errors=exc.errors(),
            path=request.url.path,
        )
        return _error(400, "Request validation failed")

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unexpected_error",
            error_code=ErrorCode.INTERNAL_ERROR.value,
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
        )
        return _error(500, "Internal server error")

    logger.debug("exception_handlers_registered")


# Create the app instance for uvicorn
app = create_app()
