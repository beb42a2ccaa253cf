"""FAQ content configuration."""

from pathlib import Path

from pydantic import BaseModel, Field


class ContentConfig(BaseModel):
    """Where FAQ content is loaded from."""

    faq_path: Path | None = Field(
        default=None,
        description="TOML or JSON FAQ document; built-in content when unset",
    )
