"""
ExactSolver — brute-force search over every ordering of the cities.

Enumerates all n! permutations of the sorted city ids in lexicographic
order and keeps the cheapest valid one.  There is no pruning; this is
the correctness baseline and is only practical for small graphs.
"""

from __future__ import annotations

import logging
from itertools import permutations
from typing import Sequence

from salesman.core.errors import GraphIncompleteError
from salesman.core.graph import CityGraph
from salesman.core.tour import Tour
from salesman.solver.cancel import CancelToken
from salesman.solver.interface import SolverInterface

logger = logging.getLogger(__name__)


class ExactSolver(SolverInterface):
    """
    Exhaustive permutation search.

    A permutation is valid when every consecutive pair of cities is
    joined by an edge.  Valid permutations are scored as closed tours
    (the return edge is counted when it exists).  A permutation with a
    return edge always beats one without; on equal cost the
    lexicographically first permutation is kept, so results are fully
    deterministic.
    """

    name = "exact"

    # ── Public API ─────────────────────────────────────────────────

    def solve(self, graph: CityGraph, cancel: CancelToken | None = None) -> Tour:
        if len(graph) == 0:
            raise GraphIncompleteError("Graph has no cities.")

        baseline = sorted(graph)
        best: Tour | None = None
        checked = 0
        valid = 0

        for perm in permutations(baseline):
            if cancel is not None:
                cancel.raise_if_cancelled()
            checked += 1

            scored = graph.tour_cost(perm)
            if scored is None:
                continue
            valid += 1
            cost, closed = scored
            candidate = Tour(perm, cost, closed)
            if best is None or candidate.rank < best.rank:
                best = candidate

        logger.debug(
            "Exact search checked %d permutations, %d valid", checked, valid
        )
        if best is None:
            raise GraphIncompleteError("No tour visits every city.")
        return best

    @staticmethod
    def evaluate(graph: CityGraph, path: Sequence[str]) -> Tour | None:
        """
        Score a single permutation the way ``solve`` does.

        Returns None if some consecutive pair has no edge.
        """
        scored = graph.tour_cost(path)
        if scored is None:
            return None
        cost, closed = scored
        return Tour(path, cost, closed)
