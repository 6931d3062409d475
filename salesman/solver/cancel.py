"""
CancelToken — cooperative cancellation for long-running solves.

Solvers poll the token between units of work (permutations, start
cities) and raise SolveAborted once it fires.
"""

from __future__ import annotations

import time

from salesman.core.errors import SolveAborted


class CancelToken:
    """
    Fires when ``cancel()`` is called or when *timeout* seconds have
    elapsed since construction.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = False
        self._timed_out = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        if self._cancelled:
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._cancelled = True
            self._timed_out = True
        return self._cancelled

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            if self._timed_out:
                raise SolveAborted(f"Solve aborted after {self.timeout:g}s timeout.")
            raise SolveAborted("Solve aborted.")

    def __repr__(self) -> str:
        return f"CancelToken(timeout={self.timeout!r}, cancelled={self._cancelled})"
