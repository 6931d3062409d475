"""
Solver Registry — maps algorithm names to solver classes.

This is the single extensibility point for adding new algorithms.
Numeric ids from the legacy command line (``--algorithm 1``) are
accepted as aliases.
"""

from __future__ import annotations

from typing import Any, Type

from salesman.solver.exact_solver import ExactSolver
from salesman.solver.interface import SolverInterface
from salesman.solver.nearest_neighbor import NearestNeighborSolver

DEFAULT_ALGORITHM = NearestNeighborSolver.name

# ── Default registry ───────────────────────────────────────────────

_REGISTRY: dict[str, Type[SolverInterface]] = {
    NearestNeighborSolver.name: NearestNeighborSolver,
    ExactSolver.name: ExactSolver,
}

_NUMERIC_IDS: dict[str, str] = {
    "1": NearestNeighborSolver.name,
    "2": ExactSolver.name,
}


def register_solver(name: str, cls: Type[SolverInterface]) -> None:
    """Register a new algorithm (or override an existing one)."""
    _REGISTRY[name] = cls


def resolve_algorithm(name: str | int) -> str:
    """
    Normalise *name* to a registered algorithm name.

    Accepts registry names and the numeric ids ``1`` / ``2``.
    Raises KeyError if nothing matches.
    """
    key = str(name).strip()
    key = _NUMERIC_IDS.get(key, key)
    if key not in _REGISTRY:
        raise KeyError(
            f"Unknown algorithm {name!r}. "
            f"Registered algorithms: {list(_REGISTRY.keys())}"
        )
    return key


def get_solver_class(name: str | int) -> Type[SolverInterface]:
    """
    Look up the solver class for an algorithm name or numeric id.

    Raises KeyError if the algorithm is not registered.
    """
    return _REGISTRY[resolve_algorithm(name)]


def list_algorithms() -> list[str]:
    """Return all registered algorithm names."""
    return list(_REGISTRY.keys())


def create_solver(name: str | int = DEFAULT_ALGORITHM, **options: Any) -> SolverInterface:
    """
    Factory: instantiate a solver by algorithm name, passing *options*
    to its constructor.
    """
    cls = get_solver_class(name)
    return cls(**options)
