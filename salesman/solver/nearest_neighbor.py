"""
NearestNeighborSolver — greedy multi-start heuristic.

Every city is tried as the start.  From the current city the walk moves
to the cheapest unvisited neighbor until none is left; the cheapest
complete walk wins.
"""

from __future__ import annotations

import logging

from salesman.core.errors import GraphIncompleteError
from salesman.core.graph import CityGraph
from salesman.core.tour import Tour
from salesman.solver.cancel import CancelToken
from salesman.solver.interface import SolverInterface

logger = logging.getLogger(__name__)


class NearestNeighborSolver(SolverInterface):
    """
    Nearest-neighbor heuristic over all start cities.

    Ties between equally cheap neighbors go to the lexicographically
    smallest city id.  Walks that can return to their start beat walks
    that cannot, whatever their cost.

    Parameters
    ----------
    skip_incomplete_starts : bool
        False (default): the first start whose walk dead-ends before
        covering every city fails the whole solve.
        True: such starts are skipped and the solve fails only if no
        start produces a complete walk.
    """

    name = "nearest-neighbor"

    def __init__(self, skip_incomplete_starts: bool = False) -> None:
        self.skip_incomplete_starts = skip_incomplete_starts

    # ── Public API ─────────────────────────────────────────────────

    def solve(self, graph: CityGraph, cancel: CancelToken | None = None) -> Tour:
        if len(graph) == 0:
            raise GraphIncompleteError("Graph has no cities.")

        best: Tour | None = None
        for start in graph:
            if cancel is not None:
                cancel.raise_if_cancelled()

            path, cost = self._walk(graph, start)
            if len(path) != len(graph):
                logger.info(
                    "Walk from %s reached %d of %d cities",
                    start,
                    len(path),
                    len(graph),
                )
                if self.skip_incomplete_starts:
                    continue
                raise GraphIncompleteError("Graph is not complete.")

            closing = graph.closing_cost(path)
            closed = closing is not None or len(path) == 1
            if closing is not None:
                cost += closing
            logger.debug("Walk from %s: cost=%d closed=%s", start, cost, closed)
            candidate = Tour(path, cost, closed)
            if best is None or candidate.rank < best.rank:
                best = candidate

        if best is None:
            raise GraphIncompleteError("Graph is not complete.")
        return best

    # ── Greedy walk ────────────────────────────────────────────────

    @staticmethod
    def _walk(graph: CityGraph, start: str) -> tuple[list[str], int]:
        """
        Greedy walk from *start*.  Takes at most ``len(graph) - 1``
        steps and returns the cities in visitation order together with
        the summed cost of the edges taken.
        """
        path = [start]
        visited = {start}
        current = start
        total = 0

        for _ in range(len(graph) - 1):
            candidates = [
                (cost, city)
                for city, cost in graph.neighbors(current).items()
                if city not in visited
            ]
            if not candidates:
                break
            step, current = min(candidates)
            total += step
            path.append(current)
            visited.add(current)

        return path, total
