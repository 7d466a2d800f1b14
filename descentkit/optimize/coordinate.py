"""Greedy coordinate descent (steepest descent in the L1 norm)."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .core import (
    FIRST_ORDER_MAXITER,
    FIRST_ORDER_TOL,
    LS_MAXITER,
    SOLVER_ALPHA,
    SOLVER_BETA,
    Array,
    OptimizeResult,
    Problem,
    StepCallback,
)
from .gradient import _first_order_descent


def coordinate_direction(grad: Array) -> Array:
    """
    Return the axis-aligned steepest-descent direction for ``grad``.

    The direction is zero except at ``i = argmax_i |grad_i|``, where it equals
    ``-grad_i``. Ties go to the lowest index.
    """
    grad = np.asarray(grad, dtype=float)
    i = int(np.argmax(np.abs(grad)))
    direction = np.zeros_like(grad)
    direction[i] = -grad[i]
    return direction


def coordinate_descent(
    problem: Problem,
    x0: Array,
    alpha: float = SOLVER_ALPHA,
    beta: float = SOLVER_BETA,
    tol: float = FIRST_ORDER_TOL,
    maxiter: int = FIRST_ORDER_MAXITER,
    ls_maxiter: int = LS_MAXITER,
    max_time: Optional[float] = None,
    callback: Optional[StepCallback] = None,
    history: bool = False,
) -> OptimizeResult:
    """
    Minimize ``problem.fun`` one coordinate at a time.

    Every step moves along the single axis with the largest gradient
    magnitude, so strongly coupled objectives zig-zag and may need many
    more iterations than :func:`gradient_descent`. Arguments and stopping
    rule match :func:`gradient_descent`.
    """
    return _first_order_descent(
        problem,
        x0,
        coordinate_direction,
        "coordinate_descent",
        alpha=alpha,
        beta=beta,
        tol=tol,
        maxiter=maxiter,
        ls_maxiter=ls_maxiter,
        max_time=max_time,
        callback=callback,
        history=history,
    )


__all__ = ["coordinate_descent", "coordinate_direction"]
