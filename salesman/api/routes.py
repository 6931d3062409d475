"""
FastAPI routes for the Tour Core backend.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from salesman.api.schemas import (
    CompareEntry,
    CompareInput,
    CompareResult,
    GraphInput,
    GraphSummary,
    SolveInput,
    SolveResult,
)
from salesman.core.errors import GraphIncompleteError, GraphParseError, SolveAborted
from salesman.core.loader import parse_graph_text
from salesman.engine.tour_engine import TourEngine
from salesman.solver.cancel import CancelToken
from salesman.solver.registry import create_solver, list_algorithms, resolve_algorithm

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Algorithms ─────────────────────────────────────────────────────

@router.get("/algorithms")
async def get_algorithms() -> dict[str, list[str]]:
    """List the registered algorithm names."""
    return {"algorithms": list_algorithms()}


# ── Solving ────────────────────────────────────────────────────────

@router.post("/solve", response_model=SolveResult)
def solve_tour(payload: SolveInput) -> SolveResult:
    """
    Parse the graph, run the chosen algorithm and return the best tour.
    """
    try:
        solver = create_solver(payload.algorithm)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=exc.args[0])

    try:
        graph = parse_graph_text(payload.graph)
        engine = TourEngine(solver)
        result = engine.solve(graph, _cancel_token(payload.timeout))
        return SolveResult(**result)
    except GraphParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except GraphIncompleteError as exc:
        logger.warning("Solve failed: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))
    except SolveAborted as exc:
        logger.warning("Solve aborted: %s", exc)
        raise HTTPException(status_code=408, detail=str(exc))


@router.post("/compare", response_model=CompareResult)
def compare_algorithms(payload: CompareInput) -> CompareResult:
    """
    Run several algorithms on the same graph.  Algorithms that cannot
    cover the graph report their error instead of a result.
    """
    try:
        algorithms = (
            [resolve_algorithm(a) for a in payload.algorithms]
            if payload.algorithms
            else None
        )
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=exc.args[0])

    try:
        graph = parse_graph_text(payload.graph)
        comparison = TourEngine().compare(
            graph, algorithms, _cancel_token(payload.timeout)
        )
    except GraphParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except SolveAborted as exc:
        logger.warning("Comparison aborted: %s", exc)
        raise HTTPException(status_code=408, detail=str(exc))

    entries = {
        name: (
            CompareEntry(error=entry["error"])
            if "error" in entry
            else CompareEntry(result=SolveResult(**entry))
        )
        for name, entry in comparison["results"].items()
    }
    return CompareResult(results=entries, best=comparison["best"])


# ── Inspection ─────────────────────────────────────────────────────

@router.post("/describe", response_model=GraphSummary)
async def describe_graph(payload: GraphInput) -> GraphSummary:
    """Node/edge counts, connectivity and edge cost statistics."""
    try:
        graph = parse_graph_text(payload.graph)
    except GraphParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return GraphSummary(**TourEngine().describe(graph))


def _cancel_token(timeout: float | None) -> CancelToken | None:
    return CancelToken(timeout) if timeout is not None else None
