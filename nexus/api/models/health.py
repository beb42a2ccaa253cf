"""Health check response model."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Operational metadata returned by GET /health."""

    status: Literal["operational"] = "operational"
    version: str = Field(..., description="Package version")
    environment: str = Field(..., description="Deployment environment")
    uptime_seconds: float = Field(..., ge=0, description="Seconds since startup")
    active_sessions: int = Field(..., ge=0, description="Live sessions")
    context_entries: int = Field(..., ge=0, description="Stored context entries")
    platforms: list[str] = Field(default_factory=list, description="Accepted platforms")
