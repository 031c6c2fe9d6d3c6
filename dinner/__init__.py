"""Dining philosophers: argument validation, table set-up and philosopher threads."""

__version__ = "0.1.0"