"""
CityGraph — the weighted undirected graph the solvers work on.

Holds the declared cities (in declaration order) and a symmetric
neighbor map of integer travel costs.  The loader builds it and then
freezes it; solvers only read from it.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence

import networkx as nx
import numpy as np

logger = logging.getLogger(__name__)


class CityGraph:
    """
    A symmetric adjacency map ``city -> {neighbor -> cost}``.

    Every edge is stored in both directions, so ``cost(a, b)`` always
    equals ``cost(b, a)``.  A city with no neighbors is isolated.
    """

    def __init__(self, cities: Iterable[str] | None = None) -> None:
        self._adjacency: dict[str, dict[str, int]] = {}
        self._frozen = False
        for city in cities or ():
            self.add_city(city)

    # ── Construction ───────────────────────────────────────────────

    def add_city(self, city: str) -> bool:
        """
        Declare *city*.  Returns False if it was already declared
        (its existing edges are kept).
        """
        self._check_mutable()
        if city in self._adjacency:
            return False
        self._adjacency[city] = {}
        return True

    def add_edge(self, a: str, b: str, cost: int) -> bool:
        """
        Insert the undirected edge *a* — *b* with *cost*.

        Both endpoints must already be declared; otherwise nothing is
        stored and False is returned.  A repeated edge overwrites the
        previous cost (last value wins).
        """
        self._check_mutable()
        if a not in self._adjacency or b not in self._adjacency:
            return False
        previous = self._adjacency[a].get(b)
        if previous is not None and previous != cost:
            logger.debug(
                "Edge %s-%s redefined: %d -> %d", a, b, previous, cost
            )
        self._adjacency[a][b] = cost
        self._adjacency[b][a] = cost
        return True

    def freeze(self) -> CityGraph:
        """Reject any further mutation.  Returns self for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("CityGraph is frozen; cities and edges are fixed.")

    # ── Lookup ─────────────────────────────────────────────────────

    @property
    def cities(self) -> list[str]:
        """All cities in declaration order."""
        return list(self._adjacency)

    def neighbors(self, city: str) -> Mapping[str, int]:
        """Read-only view of *city*'s neighbors and their costs."""
        return MappingProxyType(self._adjacency[city])

    def cost(self, a: str, b: str) -> int | None:
        """Cost of the edge *a* — *b*, or None if there is none."""
        return self._adjacency.get(a, {}).get(b)

    def has_edge(self, a: str, b: str) -> bool:
        return b in self._adjacency.get(a, {})

    def edges(self) -> list[tuple[str, str, int]]:
        """Each undirected edge once, as ``(a, b, cost)``."""
        seen: set[frozenset[str]] = set()
        result: list[tuple[str, str, int]] = []
        for a, nbrs in self._adjacency.items():
            for b, cost in nbrs.items():
                key = frozenset((a, b))
                if key in seen:
                    continue
                seen.add(key)
                result.append((a, b, cost))
        return result

    @property
    def edge_count(self) -> int:
        return len(self.edges())

    # ── Path costs ─────────────────────────────────────────────────

    def walk_cost(self, path: Sequence[str]) -> int | None:
        """
        Sum of the edges between consecutive cities of *path*.

        Returns None as soon as one consecutive pair has no edge.
        The edge back to the start is not included.
        """
        total = 0
        for a, b in zip(path, path[1:]):
            step = self.cost(a, b)
            if step is None:
                return None
            total += step
        return total

    def closing_cost(self, path: Sequence[str]) -> int | None:
        """Cost of the edge from the last city back to the first, if any."""
        if len(path) < 2:
            return None
        return self.cost(path[-1], path[0])

    def tour_cost(self, path: Sequence[str]) -> tuple[int, bool] | None:
        """
        Cost of *path* as a closed tour.

        Returns ``(cost, closed)`` where *closed* tells whether the
        return edge exists and was counted; a missing return edge is
        never invented.  Returns None if the walk itself is broken.
        """
        walk = self.walk_cost(path)
        if walk is None:
            return None
        closing = self.closing_cost(path)
        if closing is None:
            return walk, len(path) == 1
        return walk + closing, True

    # ── Analysis ───────────────────────────────────────────────────

    def to_networkx(self) -> nx.Graph:
        """Build an undirected NetworkX graph with ``weight`` attributes."""
        g = nx.Graph()
        g.add_nodes_from(self._adjacency)
        g.add_weighted_edges_from(self.edges())
        return g

    def is_connected(self) -> bool:
        """True if every city can reach every other city."""
        if not self._adjacency:
            return False
        return nx.is_connected(self.to_networkx())

    def components(self) -> list[list[str]]:
        """Connected components, largest first, cities in declaration order."""
        order = {city: i for i, city in enumerate(self._adjacency)}
        comps = [
            sorted(comp, key=order.__getitem__)
            for comp in nx.connected_components(self.to_networkx())
        ]
        comps.sort(key=lambda c: (-len(c), order[c[0]]))
        return comps

    def cost_matrix(self) -> np.ndarray:
        """
        Dense cost matrix in declaration order.

        Missing edges are ``inf``; the diagonal is 0 unless a self-loop
        was declared.
        """
        index = {city: i for i, city in enumerate(self._adjacency)}
        n = len(index)
        matrix = np.full((n, n), np.inf)
        np.fill_diagonal(matrix, 0.0)
        for a, b, cost in self.edges():
            matrix[index[a], index[b]] = cost
            matrix[index[b], index[a]] = cost
        return matrix

    # ── Dunder helpers ─────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"CityGraph(cities={len(self)}, edges={self.edge_count})"

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, city: object) -> bool:
        return city in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)
