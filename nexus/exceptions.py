"""Domain exception hierarchy.

Input errors carry an HTTP-equivalent status so the router can map them to
client errors without knowing each subclass.
"""


class NexusError(Exception):
    """Base exception for all relay errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InputError(NexusError):
    """Malformed or unsupported inbound request."""

    status_code = 400


class UnsupportedPlatformError(InputError):
    """Raised when the webhook platform is not on the allow-list."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"Unsupported platform: {platform}")
        self.platform = platform


class PayloadError(InputError):
    """Raised when a webhook payload cannot be standardized."""


class StateMachineError(NexusError):
    """Raised when a session step has no handler."""

    def __init__(self, step: str) -> None:
        super().__init__(f"No handler for step: {step}")
        self.step = step


class ContentError(NexusError):
    """Raised when FAQ content cannot be loaded or fails validation."""
