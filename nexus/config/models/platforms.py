"""Webhook platform configuration."""

from pydantic import BaseModel, Field, field_validator

from nexus.channels.models import Platform


class PlatformsConfig(BaseModel):
    """Fixed allow-list of platforms accepted on /webhook/{platform}."""

    allowed: list[str] = Field(
        default_factory=lambda: [p.value for p in Platform],
        description="Platforms accepted by the router",
    )

    @field_validator("allowed")
    @classmethod
    def _validate_allowed(cls, value: list[str]) -> list[str]:
        known = {p.value for p in Platform}
        normalized = [v.strip().lower() for v in value]
        unknown = sorted(set(normalized) - known)
        if unknown:
            raise ValueError(f"Unknown platforms in allow-list: {', '.join(unknown)}")
        return normalized
