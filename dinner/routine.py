"""What each philosopher thread does."""

from __future__ import annotations

from .table import Philosopher
from .timing import get_time_ms

__all__ = ["format_action", "print_action", "philo_routine"]


def format_action(philo: Philosopher, text: str, now: int) -> str:
    """Return the log line for ``philo`` doing ``text`` at time ``now``.

    The timestamp is the number of milliseconds since the simulation started.
    """
    elapsed = now - philo.table.since_start
    return f"{elapsed} {philo.id} {text}"


def print_action(philo: Philosopher, text: str) -> None:
    """Print the log line for ``philo`` doing ``text`` right now."""
    print(format_action(philo, text, get_time_ms()), flush=True)


def philo_routine(philo: Philosopher) -> None:
    """Body of a philosopher thread: announce sleeping under the table lock."""
    with philo.table.control:
        print_action(philo, "is sleeping")