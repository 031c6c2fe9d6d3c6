"""Running the philosopher threads."""

from __future__ import annotations

import threading

from .routine import philo_routine
from .table import Table
from .timing import get_time_ms

__all__ = ["SimulationError", "start_simulation"]


class SimulationError(Exception):
    """Raised when a philosopher thread cannot be started or joined."""


def _start(thread: threading.Thread) -> None:
    try:
        thread.start()
    except RuntimeError as err:
        raise SimulationError("Resource temporarily unavailable") from err


def _join(thread: threading.Thread) -> None:
    try:
        thread.join()
    except RuntimeError as err:
        if "current thread" in str(err):
            raise SimulationError("Deadlock detected") from err
        raise SimulationError("Invalid argument") from err


def start_simulation(table: Table) -> None:
    """Start one thread per philosopher, then wait for all of them."""
    table.since_start = get_time_ms()
    for philo in table.philos:
        philo.since_last_meal = table.since_start
        philo.thread = threading.Thread(
            target=philo_routine, args=(philo,), name=f"philo-{philo.id}"
        )
        _start(philo.thread)
    for philo in table.philos:
        if philo.thread is None:
            raise SimulationError("No such thread")
        _join(philo.thread)