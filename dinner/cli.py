"""Command-line entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parser import ArgumentError
from .simulation import SimulationError, start_simulation
from .table import init

__all__ = ["main"]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the dinner with the given arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        table = init(args)
    except ArgumentError as err:
        sys.stderr.write(f"{err}\n")
        return 1
    try:
        start_simulation(table)
    except SimulationError as err:
        print(err)
    return 0


if __name__ == "__main__":
    sys.exit(main())