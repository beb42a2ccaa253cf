"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Machine-readable error codes, logged with every API error."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Malformed JSON or request validation failure."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorResponse(BaseModel):
    """Body of every error response, matching the router's error results."""

    error: str
    """Human-readable error description."""
