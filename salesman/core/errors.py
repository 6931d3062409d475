"""
Error types raised by the loader and the solvers.

Every error derives from TourError so callers can catch the whole
family at a single boundary (CLI, HTTP routes).
"""

from __future__ import annotations


class TourError(Exception):
    """Base class for all tour-solving failures."""


class GraphIOError(TourError, OSError):
    """The graph input could not be opened or read."""


class GraphParseError(TourError, ValueError):
    """
    An edge line is malformed: fewer than three fields, or a cost
    that is not a base-10 integer.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class GraphIncompleteError(TourError):
    """No tour covering every city could be built."""


class SolveAborted(TourError):
    """The solve was cancelled or ran past its deadline."""
