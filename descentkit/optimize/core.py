"""Core interfaces shared across the descent solvers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]
Gradient = Callable[[Array], Array]
Hessian = Callable[[Array], Array]
StepCallback = Callable[[Array, float, Array], None]

# Backtracking defaults for a standalone line search.
LS_ALPHA = 0.1
LS_BETA = 0.7
LS_MAXITER = 100

# Solver defaults. Newton stops on the decrement, so it can afford a much
# tighter tolerance than the first-order methods.
SOLVER_ALPHA = 0.2
SOLVER_BETA = 0.7
FIRST_ORDER_TOL = 1e-3
NEWTON_TOL = 1e-7
FIRST_ORDER_MAXITER = 10_000
NEWTON_MAXITER = 100


class Status(Enum):
    """Exit status shared by all solvers."""

    CONVERGED = "converged"
    MAX_ITER = "max_iter"
    MAX_TIME = "max_time"
    LINE_SEARCH_FAILED = "line_search_failed"


class PreconditionError(ValueError):
    """Invalid input: hyperparameters, shapes, or a non-descent direction."""


class LineSearchError(RuntimeError):
    """Backtracking exhausted its budget without sufficient decrease."""

    def __init__(self, message: str, step: float, nfev: int) -> None:
        super().__init__(message)
        self.step = step
        self.nfev = nfev


class SingularHessianError(np.linalg.LinAlgError):
    """Hessian is singular or not positive definite at the current iterate."""


@dataclass(frozen=True)
class Problem:
    """
    Differentiable objective bundle.

    ``fun`` maps a point to a scalar, ``grad`` maps a point to a vector of
    the same length, and ``hess`` (Newton only) maps a point to a square
    matrix. All three are treated as pure functions.
    """

    fun: Objective
    grad: Gradient
    hess: Optional[Hessian] = None
    dim: Optional[int] = None


@dataclass
class OptimizeResult:
    """Standard result object returned by all solvers in this module."""

    x: Array
    fun: float
    nit: int
    success: bool
    status: Status
    message: str
    grad_norm: float
    nfev: int
    njev: int
    nhev: int = 0
    decrement: Optional[float] = None
    history: List[Array] = field(default_factory=list)
    fun_history: List[float] = field(default_factory=list)


__all__ = [
    "Array",
    "Objective",
    "Gradient",
    "Hessian",
    "StepCallback",
    "Problem",
    "OptimizeResult",
    "Status",
    "PreconditionError",
    "LineSearchError",
    "SingularHessianError",
    "LS_ALPHA",
    "LS_BETA",
    "LS_MAXITER",
    "SOLVER_ALPHA",
    "SOLVER_BETA",
    "FIRST_ORDER_TOL",
    "NEWTON_TOL",
    "FIRST_ORDER_MAXITER",
    "NEWTON_MAXITER",
]
