"""API exception hierarchy for consistent error handling.

All API exceptions inherit from NexusAPIError, which provides status_code
and error_code attributes used by the global exception handler.
"""

from nexus.api.models.errors import ErrorCode


class NexusAPIError(Exception):
    """Base exception for all API errors."""

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidRequestError(NexusAPIError):
    """Raised when the request body is not valid JSON."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST
