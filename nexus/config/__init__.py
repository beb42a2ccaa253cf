"""Configuration loading for Nexus.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from nexus.config import get_settings

    settings = get_settings()
    timeout = settings.conversation.session_timeout_seconds
"""

from functools import lru_cache

from nexus.config.loader import load_config
from nexus.config.settings import Settings, set_toml_config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    A missing config/default.toml is not an error: model defaults and
    NEXUS_* environment variables still apply. A NEXUS_CONFIG_DIR that
    does not exist is.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    set_toml_config(load_config())

    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
