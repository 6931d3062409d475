"""
Tour — the value a solver returns on success.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

DEFAULT_SEPARATOR = "--->"


class Tour:
    """
    An ordered visit of every city, implicitly returning to the first.

    Attributes
    ----------
    path : list[str]
        City ids in visitation order.
    cost : int
        Total cost of the edges actually traversed.
    closed : bool
        Whether the edge from the last city back to the first exists
        (and is part of *cost*).
    """

    def __init__(self, path: Sequence[str], cost: int, closed: bool = True) -> None:
        self.path = list(path)
        self.cost = cost
        self.closed = closed

    @property
    def rank(self) -> tuple[bool, int]:
        """Sort key: closed tours before open walks, then by cost."""
        return (not self.closed, self.cost)

    def format_path(self, separator: str = DEFAULT_SEPARATOR) -> str:
        return separator.join(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": list(self.path),
            "formatted_path": self.format_path(),
            "cost": self.cost,
            "closed": self.closed,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tour):
            return NotImplemented
        return (self.path, self.cost, self.closed) == (
            other.path,
            other.cost,
            other.closed,
        )

    def __repr__(self) -> str:
        return f"Tour({self.format_path()!r}, cost={self.cost})"

    def __len__(self) -> int:
        return len(self.path)

    def __iter__(self) -> Iterator[str]:
        return iter(self.path)
