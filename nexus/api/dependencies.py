"""Dependency injection for API routes.

The runtime is built once from settings on first use and shared by every
request. Tests install their own with set_runtime() and clear it with
reset_dependencies().
"""

from typing import Annotated

from fastapi import Depends

from nexus.bootstrap import Runtime, build_runtime
from nexus.config import get_settings as _load_settings
from nexus.config.settings import Settings
from nexus.observability.logging import get_logger
from nexus.routing import Router

logger = get_logger(__name__)

_runtime: Runtime | None = None


def get_settings() -> Settings:
    """Get application settings."""
    return _load_settings()


def get_runtime() -> Runtime:
    """Get the shared runtime, building it on first access."""
    global _runtime
    if _runtime is None:
        _runtime = build_runtime(get_settings())
        logger.info("runtime_initialized")
    return _runtime


def set_runtime(runtime: Runtime) -> None:
    """Install a prebuilt runtime."""
    global _runtime
    _runtime = runtime


def get_router() -> Router:
    return get_runtime().router


async def reset_dependencies() -> None:
    """Stop and drop the cached runtime and settings.

    Used for testing to ensure fresh instances.
    """
    global _runtime
    if _runtime is not None:
        await _runtime.stop()
        _runtime = None
    _load_settings.cache_clear()


SettingsDep = Annotated[Settings, Depends(get_settings)]
RuntimeDep = Annotated[Runtime, Depends(get_runtime)]
RouterDep = Annotated[Router, Depends(get_router)]
