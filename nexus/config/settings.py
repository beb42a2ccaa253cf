"""Root settings model for Nexus configuration."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from nexus.config.models.api import APIConfig
from nexus.config.models.content import ContentConfig
from nexus.config.models.conversation import ConversationConfig
from nexus.config.models.observability import ObservabilityConfig
from nexus.config.models.platforms import PlatformsConfig
from nexus.config.models.plugins import PluginsConfig

# TOML config consumed by TomlConfigSettingsSource
_toml_config: dict[str, Any] = {}


def set_toml_config(config: dict[str, Any]) -> None:
    """Set the TOML configuration to be used by Settings."""
    global _toml_config
    _toml_config = config


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that reads from TOML configuration."""

    def get_field_value(
        self, field: Any, field_name: str  # noqa: ARG002
    ) -> tuple[Any, str, bool]:
        """Get field value from TOML config."""
        value = _toml_config.get(field_name)
        return value, field_name, value is not None

    def __call__(self) -> dict[str, Any]:
        """Return the TOML config values."""
        return _toml_config.copy()


class Settings(BaseSettings):
    """Root configuration object containing all nested configuration sections.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{NEXUS_ENV}.toml (environment overrides)
    4. NEXUS_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="NEXUS_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="nexus", description="Application name for logging")
    environment: str = Field(default="production", description="Deployment environment")
    debug: bool = Field(default=False, description="Enable debug mode")

    api: APIConfig = Field(default_factory=APIConfig, description="API server configuration")
    conversation: ConversationConfig = Field(
        default_factory=ConversationConfig,
        description="Session, context and state machine configuration",
    )
    platforms: PlatformsConfig = Field(
        default_factory=PlatformsConfig,
        description="Webhook platform allow-list",
    )
    content: ContentConfig = Field(
        default_factory=ContentConfig,
        description="FAQ content source",
    )
    plugins: PluginsConfig = Field(
        default_factory=PluginsConfig,
        description="Built-in plugin configuration",
    )
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include TOML config.

        Priority order (highest to lowest):
        1. init_settings (constructor arguments)
        2. env_settings (NEXUS_* environment variables)
        3. toml_settings (config/*.toml files)
        4. (defaults from model)
        """
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )
