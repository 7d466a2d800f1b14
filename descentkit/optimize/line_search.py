"""Backtracking line search with the Armijo sufficient-decrease test.

The search starts from a unit step and shrinks it geometrically until

    f(x + t * d) <= f(x) + alpha * t * <grad f(x), d>

holds. For a descent direction and an objective that is smooth near ``x``
the condition is met after finitely many shrinks; the ``max_iter`` budget
only guards against violated preconditions such as a discontinuous
objective.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..logging import get_logger
from .core import (
    LS_ALPHA,
    LS_BETA,
    LS_MAXITER,
    Array,
    Gradient,
    LineSearchError,
    Objective,
    PreconditionError,
)
from .utils import check_gradient, check_line_search_params

logger = get_logger(__name__)


def backtracking_line_search(
    f: Objective,
    x: Array,
    direction: Array,
    grad: Gradient,
    alpha: float = LS_ALPHA,
    beta: float = LS_BETA,
    max_iter: int = LS_MAXITER,
    fx: Optional[float] = None,
    grad_fx: Optional[Array] = None,
) -> tuple[float, int, float]:
    """
    Find a step size satisfying the sufficient-decrease condition.

    Parameters
    ----------
    f:
        Objective function.
    x:
        Current point. Not modified.
    direction:
        Descent direction, ``<grad f(x), direction> < 0``.
    grad:
        Gradient function of ``f``.
    alpha:
        Fraction of the linear decrease required, in ``(0, 0.5)``.
    beta:
        Shrink factor applied on each rejected trial, in ``(0, 1)``.
    max_iter:
        Maximum number of rejected trials before giving up.
    fx, grad_fx:
        ``f(x)`` and ``grad(x)`` when the caller already has them; they are
        evaluated here otherwise.

    Returns
    -------
    tuple[float, int, float]
        Accepted step ``t`` in ``(0, 1]``, the number of objective
        evaluations spent on trial points, and ``f(x + t * direction)`` at the
        accepted step so callers need not evaluate it again.

    Raises
    ------
    PreconditionError
        If ``alpha``/``beta`` are out of range, shapes disagree, or
        ``direction`` is not a descent direction.
    LineSearchError
        If ``max_iter`` trials are rejected.
    """
    check_line_search_params(alpha, beta)
    if max_iter < 1:
        raise PreconditionError(f"max_iter must be at least 1, got {max_iter!r}")
    x = np.asarray(x, dtype=float)
    direction = np.asarray(direction, dtype=float)
    if direction.shape != x.shape:
        raise PreconditionError(
            f"Direction has shape {direction.shape}, point has shape {x.shape}"
        )
    if grad_fx is None:
        grad_fx = grad(x)
    grad_fx = check_gradient(grad_fx, x.size)
    slope = float(np.dot(direction, grad_fx))
    if not slope < 0.0:
        raise PreconditionError(
            f"Search direction must be a descent direction (slope={slope!r})"
        )
    f0 = float(f(x)) if fx is None else float(fx)

    t = 1.0
    nfev = 0
    for _ in range(max_iter):
        f_new = float(f(x + t * direction))
        nfev += 1
        # NaN and inf trials fail this comparison and are shrunk away.
        if f_new <= f0 + alpha * t * slope:
            if nfev > 1:
                logger.debug("Accepted step %.3e after %d trials", t, nfev)
            return t, nfev, f_new
        t *= beta
    logger.warning(
        "Line search exhausted %d trials without sufficient decrease (t=%.3e)",
        max_iter,
        t,
    )
    raise LineSearchError(
        f"No step satisfied sufficient decrease within {max_iter} trials",
        step=t,
        nfev=nfev,
    )


__all__ = ["backtracking_line_search"]
