"""Built-in plugin configuration."""

from pydantic import BaseModel, Field


class PluginsConfig(BaseModel):
    """Which built-in plugins are registered at startup."""

    normalizer_enabled: bool = Field(default=True, description="Register MessageNormalizerPlugin")
    max_message_length: int = Field(
        default=1000,
        ge=1,
        description="Messages longer than this are truncated",
    )
    classifier_enabled: bool = Field(
        default=True,
        description="Register InquiryClassifierPlugin",
    )
    analytics_ttl_seconds: float = Field(
        default=86400,
        gt=0,
        description="TTL of per-user inquiry counters in the analytics namespace",
    )
