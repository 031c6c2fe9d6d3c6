"""Wall-clock helpers measured in milliseconds."""

import time

__all__ = ["get_time_ms", "sleep_ms"]


def get_time_ms() -> int:
    """Return the current wall-clock time in milliseconds.

    Only whole seconds count, so the value is always a multiple of 1000.
    """
    return int(time.time()) * 1000


def sleep_ms(ms: int) -> None:
    """Block the calling thread for ``ms`` milliseconds."""
    time.sleep(ms / 1000)