"""Routing result model."""

from typing import Any

from pydantic import BaseModel, Field


class RouteResult(BaseModel):
    """Outcome of routing one webhook, ready to send as an HTTP response."""

    status_code: int = Field(..., description="HTTP status to return")
    body: dict[str, Any] = Field(default_factory=dict, description="Response body")
    processing_time_ms: float = Field(default=0.0, ge=0, description="Routing time")

    @property
    def ok(self) -> bool:
        return self.status_code < 400
