"""Configuration section models."""

from nexus.config.models.api import APIConfig
from nexus.config.models.content import ContentConfig
from nexus.config.models.conversation import ConversationConfig
from nexus.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from nexus.config.models.platforms import PlatformsConfig
from nexus.config.models.plugins import PluginsConfig

__all__ = [
    "APIConfig",
    "ContentConfig",
    "ConversationConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "PlatformsConfig",
    "PluginsConfig",
]
