"""The table: forks, philosophers and shared simulation state."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .parser import Settings, parse_args

__all__ = ["Fork", "Philosopher", "Table", "init"]


@dataclass
class Fork:
    """A fork guarded by its own lock."""

    id: int
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


@dataclass
class Philosopher:
    """One diner; ``forks`` holds the indices of its two forks."""

    id: int
    forks: tuple[int, int]
    table: "Table" = field(repr=False, compare=False)
    meals_count: int = 0
    since_last_meal: int = 0
    is_full: bool = False
    thread: Optional[threading.Thread] = field(
        default=None, repr=False, compare=False
    )


@dataclass
class Table:
    """Shared state of one simulation run."""

    philo_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_for_each: int
    forks: list[Fork] = field(default_factory=list)
    philos: list[Philosopher] = field(default_factory=list, repr=False)
    control: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )
    since_start: int = 0
    is_finished: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "Table":
        """Build a table with one fork and one philosopher per seat."""
        table = cls(
            philo_count=settings.philo_count,
            time_to_die=settings.time_to_die,
            time_to_eat=settings.time_to_eat,
            time_to_sleep=settings.time_to_sleep,
            meals_for_each=settings.meals_for_each,
        )
        count = settings.philo_count
        table.forks = [Fork(seat) for seat in range(count)]
        table.philos = [
            Philosopher(
                id=seat,
                forks=(seat, count - 1 if seat == 0 else seat - 1),
                table=table,
            )
            for seat in range(count)
        ]
        return table


def init(args: Sequence[str]) -> Table:
    """Validate ``args`` and set the table; raises ArgumentError on bad input."""
    return Table.from_settings(parse_args(args))