"""Monotonic clock used for session activity and context expiry."""

import time
from collections.abc import Callable

Clock = Callable[[], float]


def monotonic() -> float:
    """Seconds from an arbitrary fixed point, never going backwards."""
    return time.monotonic()
