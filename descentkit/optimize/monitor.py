"""Iteration bookkeeping shared by the solvers.

:class:`ConvergenceMonitor` owns the iteration counter, the safety budget
and the exit status. :class:`StepRecorder` optionally keeps the trajectory
so a reporting layer can plot convergence curves afterwards.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .core import Array, Status


@dataclass
class StepRecorder:
    """
    Trajectory of visited points and their objective values.

    Points are stored as copies, so later in-place changes by the caller do
    not alter the record. A disabled recorder ignores every call.
    """

    enabled: bool = True
    points: List[Array] = field(default_factory=list)
    values: List[float] = field(default_factory=list)

    def record(self, x: Array, fx: float) -> None:
        """Append a point and its objective value."""
        if not self.enabled:
            return
        self.points.append(np.array(x, dtype=float, copy=True))
        self.values.append(float(fx))

    def __len__(self) -> int:
        return len(self.points)

    def is_monotone(self, atol: float = 0.0) -> bool:
        """Return True if the recorded objective values never increase."""
        return all(b <= a + atol for a, b in zip(self.values, self.values[1:]))


class ConvergenceMonitor:
    """
    Iteration counter with an iteration ceiling and an optional time limit.

    Args:
        maxiter: Maximum number of accepted steps.
        max_time: Optional wall-clock limit in seconds, measured from
            construction.
    """

    def __init__(self, maxiter: int, max_time: Optional[float] = None) -> None:
        self.maxiter = int(maxiter)
        self.max_time = max_time
        self.nit = 0
        self.status: Optional[Status] = None
        self._start = time.perf_counter()

    @property
    def converged(self) -> bool:
        return self.status is Status.CONVERGED

    @property
    def elapsed(self) -> float:
        """Seconds since the monitor was created."""
        return time.perf_counter() - self._start

    def step(self) -> None:
        """Count one accepted step."""
        self.nit += 1

    def mark(self, status: Status) -> None:
        """Record the exit status of the run."""
        self.status = status

    def budget_exhausted(self) -> bool:
        """
        Return True (and set the status) once the iteration or time budget
        is used up.
        """
        if self.nit >= self.maxiter:
            self.status = Status.MAX_ITER
            return True
        if self.max_time is not None and self.elapsed >= self.max_time:
            self.status = Status.MAX_TIME
            return True
        return False

    def message(self) -> str:
        """Human-readable description of the exit status."""
        if self.status is Status.CONVERGED:
            return "Stopping tolerance satisfied."
        if self.status is Status.MAX_ITER:
            return f"Maximum iterations ({self.maxiter}) reached."
        if self.status is Status.MAX_TIME:
            return f"Time limit ({self.max_time:g} s) reached."
        if self.status is Status.LINE_SEARCH_FAILED:
            return "Line search failed to find a sufficient decrease."
        return "Solver has not finished."


__all__ = ["ConvergenceMonitor", "StepRecorder"]
