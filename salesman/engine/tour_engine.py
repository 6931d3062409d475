"""
TourEngine — Top-level orchestrator.

Loads graphs from text or files, delegates to the configured solver,
times the run, and can compare every registered algorithm on the same
graph.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Any, Iterable

import numpy as np

from salesman.core.errors import GraphIncompleteError, TourError
from salesman.core.graph import CityGraph
from salesman.core.loader import load_graph, parse_graph_text
from salesman.solver.cancel import CancelToken
from salesman.solver.interface import SolverInterface
from salesman.solver.nearest_neighbor import NearestNeighborSolver
from salesman.solver.registry import create_solver, list_algorithms

logger = logging.getLogger(__name__)


class TourEngine:
    """
    Main entry-point for tour computation.

    Usage
    -----
    >>> engine = TourEngine()
    >>> result = engine.solve_file("samples/cities.txt")
    >>> print(result["formatted_path"], result["cost"])
    """

    def __init__(self, solver: SolverInterface | None = None) -> None:
        self.solver = solver or NearestNeighborSolver()

    # ── Public API ─────────────────────────────────────────────────

    def solve(
        self,
        graph: CityGraph,
        cancel: CancelToken | None = None,
    ) -> dict[str, Any]:
        """
        Run the configured solver on *graph*.

        Returns
        -------
        dict with keys: algorithm, path, formatted_path, cost, closed,
        node_count, edge_count, elapsed_ms

        Raises GraphIncompleteError / SolveAborted from the solver.
        """
        return self._run(self.solver, graph, cancel)

    def solve_text(
        self, text: str, cancel: CancelToken | None = None
    ) -> dict[str, Any]:
        """Parse *text* in the two-section format and solve it."""
        return self.solve(parse_graph_text(text), cancel)

    def solve_file(
        self, path: str | os.PathLike[str], cancel: CancelToken | None = None
    ) -> dict[str, Any]:
        """Load the graph file at *path* and solve it."""
        return self.solve(load_graph(path), cancel)

    def compare(
        self,
        graph: CityGraph,
        algorithms: Iterable[str | int] | None = None,
        cancel: CancelToken | None = None,
    ) -> dict[str, Any]:
        """
        Run several algorithms on the same graph.

        Each algorithm's entry is either a solve result or
        ``{"error": message}`` when it raised GraphIncompleteError.

        Returns
        -------
        dict with keys: results (name → entry), best (name or None)
        """
        names = list(algorithms) if algorithms is not None else list_algorithms()
        results: dict[str, dict[str, Any]] = {}

        for name in names:
            solver = create_solver(name)
            try:
                results[solver.name] = self._run(solver, graph, cancel)
            except GraphIncompleteError as exc:
                results[solver.name] = {"error": str(exc)}

        scored = [
            (not entry["closed"], entry["cost"], name)
            for name, entry in results.items()
            if "error" not in entry
        ]
        best = min(scored)[2] if scored else None
        return {"results": results, "best": best}

    def describe(self, graph: CityGraph) -> dict[str, Any]:
        """
        Structural summary of *graph*: sizes, connectivity and edge
        cost statistics.
        """
        # object dtype: costs are unbounded Python ints
        costs = np.array([cost for _a, _b, cost in graph.edges()], dtype=object)
        components = graph.components()
        return {
            "node_count": len(graph),
            "edge_count": len(costs),
            "connected": graph.is_connected(),
            "components": components,
            "isolated": [
                city for city in graph if not graph.neighbors(city)
            ],
            "min_cost": int(costs.min()) if costs.size else None,
            "max_cost": int(costs.max()) if costs.size else None,
            "mean_cost": float(sum(costs) / costs.size) if costs.size else None,
        }

    # ── Helper ─────────────────────────────────────────────────────

    @staticmethod
    def _run(
        solver: SolverInterface,
        graph: CityGraph,
        cancel: CancelToken | None,
    ) -> dict[str, Any]:
        logger.info(
            "Running %s on %d cities...", solver.name, len(graph)
        )
        started = time.perf_counter()
        try:
            tour = solver.solve(graph, cancel)
        except TourError:
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            logger.warning(
                "%s failed after %.3f ms", solver.name, elapsed_ms
            )
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.info(
            "%s finished in %.3f ms (cost=%d)", solver.name, elapsed_ms, tour.cost
        )

        result = tour.to_dict()
        result.update(
            {
                "algorithm": solver.name,
                "node_count": len(graph),
                "edge_count": graph.edge_count,
                "elapsed_ms": elapsed_ms,
            }
        )
        return result
