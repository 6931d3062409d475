"""
Pydantic schemas for the FastAPI endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from salesman.solver.registry import DEFAULT_ALGORITHM

DEFAULT_TIMEOUT_SECONDS = 10.0


# ── Solve ──────────────────────────────────────────────────────────

class GraphInput(BaseModel):
    """Graph in the two-section text format."""

    graph: str = Field(..., description="City list, blank line, then '<a> <b> <cost>' edges")


class SolveInput(GraphInput):
    """Graph + which algorithm to run."""

    algorithm: str = Field(default=DEFAULT_ALGORITHM, description="nearest-neighbor or exact (1 / 2)")
    timeout: float | None = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Abort the solve after this many seconds",
    )


class SolveResult(BaseModel):
    """A solved tour."""

    algorithm: str
    path: list[str]
    formatted_path: str
    cost: int
    closed: bool
    node_count: int
    edge_count: int
    elapsed_ms: float


# ── Compare ────────────────────────────────────────────────────────

class CompareInput(GraphInput):
    """Graph + the algorithms to compare (all when omitted)."""

    algorithms: list[str] | None = None
    timeout: float | None = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)


class CompareEntry(BaseModel):
    """One algorithm's outcome: a result or the failure message."""

    result: SolveResult | None = None
    error: str | None = None


class CompareResult(BaseModel):
    results: dict[str, CompareEntry]
    best: str | None


# ── Describe ───────────────────────────────────────────────────────

class GraphSummary(BaseModel):
    """Structural summary of a graph."""

    node_count: int
    edge_count: int
    connected: bool
    components: list[list[str]]
    isolated: list[str]
    min_cost: int | None = None
    max_cost: int | None = None
    mean_cost: float | None = None
