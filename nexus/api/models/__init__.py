"""API request and response models."""

from nexus.api.models.errors import ErrorCode, ErrorResponse
from nexus.api.models.health import HealthResponse

__all__ = ["ErrorCode", "ErrorResponse", "HealthResponse"]
