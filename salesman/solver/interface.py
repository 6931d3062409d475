"""
Solver Interface — abstract base for all tour-solving strategies.

Design: Strategy pattern.  The TourEngine delegates to whichever
SolverInterface implementation is configured, so the exact search and
the nearest-neighbor heuristic can be swapped without touching the
rest of the code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from salesman.core.graph import CityGraph
from salesman.core.tour import Tour
from salesman.solver.cancel import CancelToken


class SolverInterface(ABC):
    """
    Abstract solver that turns a CityGraph into its best Tour.
    """

    #: Registry name of the algorithm.
    name: str = ""

    @abstractmethod
    def solve(self, graph: CityGraph, cancel: CancelToken | None = None) -> Tour:
        """
        Find a closed tour through every city of *graph*.

        Parameters
        ----------
        graph : the (frozen) CityGraph; never mutated
        cancel : optional CancelToken polled between units of work

        Returns
        -------
        Tour
            The best tour found.

        Raises
        ------
        GraphIncompleteError
            If no tour covers every city.
        SolveAborted
            If *cancel* fired before the solve finished.
        """
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
