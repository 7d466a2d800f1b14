"""Input validation helpers shared by the line search and the solvers.

All checks fail fast with :class:`PreconditionError`; nothing is clamped or
coerced beyond converting array-likes to float arrays.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .core import Array, PreconditionError


def check_line_search_params(alpha: float, beta: float) -> None:
    """Validate the sufficient-decrease fraction and the shrink factor."""
    if not (0.0 < alpha < 0.5):
        raise PreconditionError(f"alpha must lie in (0, 0.5), got {alpha!r}")
    if not (0.0 < beta < 1.0):
        raise PreconditionError(f"beta must lie in (0, 1), got {beta!r}")


def check_budget(
    tol: float,
    maxiter: int,
    max_time: Optional[float] = None,
    ls_maxiter: int = 1,
) -> None:
    """Validate the stopping tolerance and the iteration/time budget."""
    if not tol >= 0.0:
        raise PreconditionError(f"tol must be non-negative, got {tol!r}")
    if maxiter < 0:
        raise PreconditionError(f"maxiter must be non-negative, got {maxiter!r}")
    if ls_maxiter < 1:
        raise PreconditionError(f"ls_maxiter must be at least 1, got {ls_maxiter!r}")
    if max_time is not None and not max_time > 0.0:
        raise PreconditionError(f"max_time must be positive, got {max_time!r}")


def as_point(x0: Array, dim: Optional[int] = None) -> Array:
    """Return a private float copy of ``x0`` after checking shape and values."""
    x = np.array(x0, dtype=float, copy=True)
    if x.ndim != 1:
        raise PreconditionError(f"Starting point must be 1-D, got shape {x.shape}")
    if dim is not None and x.size != dim:
        raise PreconditionError(
            f"Starting point has length {x.size}, problem dimension is {dim}"
        )
    if not np.all(np.isfinite(x)):
        raise PreconditionError("Starting point contains non-finite values")
    return x


def check_gradient(grad: Array, n: int) -> Array:
    """Convert a gradient evaluation to a float vector of length ``n``."""
    g = np.asarray(grad, dtype=float)
    if g.shape != (n,):
        raise PreconditionError(f"Gradient has shape {g.shape}, expected ({n},)")
    return g


def check_hessian(hess: Array, n: int) -> Array:
    """Convert a Hessian evaluation to a float ``(n, n)`` matrix."""
    h = np.asarray(hess, dtype=float)
    if h.shape != (n, n):
        raise PreconditionError(f"Hessian has shape {h.shape}, expected ({n}, {n})")
    return h


def check_objective_value(fx: float) -> float:
    """Reject a non-finite objective value at the starting point."""
    fx = float(fx)
    if not np.isfinite(fx):
        raise PreconditionError(
            f"Objective must be finite at the starting point, got {fx!r}"
        )
    return fx


__all__ = [
    "as_point",
    "check_budget",
    "check_gradient",
    "check_hessian",
    "check_line_search_params",
    "check_objective_value",
]
