"""Command-line argument validation for the dining philosophers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

__all__ = [
    "WHITESPACE",
    "MAX_PHILO",
    "MIN_MS",
    "MAX_MS",
    "PhiloErrno",
    "ArgumentError",
    "Settings",
    "atol",
    "skip_chars",
    "error_message",
    "parse_int",
    "parse_args",
]

WHITESPACE = "\t\n\v\f\r "
DIGITS = "0123456789"
SIGNS = "-+"

MAX_PHILO = 200
MIN_MS = 60
MAX_MS = 800

_INT_MAX = 2**31 - 1


class PhiloErrno(enum.Enum):
    """Kinds of argument and runtime errors."""

    ARG_NON = enum.auto()
    ARG_INV = enum.auto()
    ARG_EMT = enum.auto()
    NBR_NON = enum.auto()
    PHI_CNT = enum.auto()
    TME_DIE = enum.auto()
    TME_EAT = enum.auto()
    TME_SLP = enum.auto()
    MLS_CNT = enum.auto()
    MTX_MDE = enum.auto()
    PTH_MDE = enum.auto()


_MESSAGES = {
    PhiloErrno.ARG_NON: "no arguments provided",
    PhiloErrno.ARG_INV: "invalid arguments: expected 4-5 arguments",
    PhiloErrno.ARG_EMT: "empty arguments not allowed",
    PhiloErrno.NBR_NON: "non-numeric arguments not allowed",
    PhiloErrno.PHI_CNT: "invalid value for philo_count: expected 1-200 philos",
    PhiloErrno.TME_DIE: "invalid value for time_to_die: expected 60-800 ms",
    PhiloErrno.TME_EAT: "invalid value for time_to_eat: expected 60-800 ms",
    PhiloErrno.TME_SLP: "invalid value for time_to_sleep: expected 60-800 ms",
    PhiloErrno.MLS_CNT: "invalid value for meals_count: expected 60-800 ms",
    PhiloErrno.MTX_MDE: "unexpected occurs during mutex_mode",
    PhiloErrno.PTH_MDE: "unexpected occurs during pthread_mode",
}


def error_message(kind: PhiloErrno) -> str:
    """Return the human-readable text for an error kind."""
    return _MESSAGES[kind]


class ArgumentError(Exception):
    """Raised when the command-line arguments are rejected.

    ``kinds`` lists every diagnostic in the order it would be reported;
    ``kind`` is the final, most specific one.
    """

    def __init__(self, *kinds: PhiloErrno) -> None:
        if not kinds:
            raise TypeError("ArgumentError needs at least one kind")
        self.kinds: tuple[PhiloErrno, ...] = kinds
        super().__init__(*kinds)

    @property
    def kind(self) -> PhiloErrno:
        return self.kinds[-1]

    def __str__(self) -> str:
        return "\n".join(f"philo: {error_message(k)}" for k in self.kinds)


@dataclass(frozen=True)
class Settings:
    """Validated simulation parameters."""

    philo_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_for_each: int = 1


def skip_chars(text: str, charset: str) -> str:
    """Return ``text`` without its leading characters that are in ``charset``."""
    for index, char in enumerate(text):
        if char not in charset:
            return text[index:]
    return ""


def atol(text: str) -> int:
    """Read a leading signed decimal integer from ``text``.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. A magnitude beyond the 32-bit signed range yields -1.
    """
    rest = skip_chars(text, WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+") and rest:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if char not in DIGITS:
            break
        result = result * 10 + DIGITS.index(char)
        if result > _INT_MAX:
            return -1
    return sign * result


def parse_int(text: str, minimum: int, maximum: int) -> int:
    """Parse a whitespace-padded integer and check it lies in the range.

    Raises ArgumentError(NBR_NON) for text that is not a number and
    ValueError for a number outside ``minimum``..``maximum``.
    """
    start = skip_chars(text, WHITESPACE)
    rest = skip_chars(skip_chars(start, SIGNS), DIGITS)
    if rest == start:
        raise ArgumentError(PhiloErrno.NBR_NON)
    if skip_chars(rest, WHITESPACE):
        raise ArgumentError(PhiloErrno.NBR_NON)
    number = atol(start)
    if not minimum <= number <= maximum:
        raise ValueError(f"{number} is outside {minimum}..{maximum}")
    return number


def _parse_field(text: str, minimum: int, maximum: int, kind: PhiloErrno) -> int:
    try:
        return parse_int(text, minimum, maximum)
    except ArgumentError as err:
        raise ArgumentError(*err.kinds, kind) from err
    except ValueError as err:
        raise ArgumentError(kind) from err


def parse_args(args: Sequence[str]) -> Settings:
    """Validate the program arguments (without the program name)."""
    if len(args) not in (4, 5):
        raise ArgumentError(PhiloErrno.ARG_INV)
    if any(arg == "" for arg in args):
        raise ArgumentError(PhiloErrno.ARG_EMT)
    philo_count = _parse_field(args[0], 1, MAX_PHILO, PhiloErrno.PHI_CNT)
    time_to_die = _parse_field(args[1], MIN_MS, MAX_MS, PhiloErrno.TME_DIE)
    time_to_eat = _parse_field(args[2], MIN_MS, MAX_MS, PhiloErrno.TME_EAT)
    time_to_sleep = _parse_field(args[3], MIN_MS, MAX_MS, PhiloErrno.TME_SLP)
    if len(args) == 5:
        meals_for_each = _parse_field(args[4], MIN_MS, MAX_MS, PhiloErrno.MLS_CNT)
    else:
        meals_for_each = 1
    return Settings(
        philo_count=philo_count,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meals_for_each=meals_for_each,
    )