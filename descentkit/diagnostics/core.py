"""Debug switch and the numeric consistency checks the solvers run under it.

Debug mode starts from the ``DESCENTKIT_DEBUG`` environment variable and can
be changed at runtime with :func:`set_debug_enabled` or, for a block of code,
with :func:`debug_context`. While it is on, every solver passes each accepted
step through :func:`check_accepted_step`.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

import numpy as np

DEBUG_ENV_VAR = "DESCENTKIT_DEBUG"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

_debug_enabled = os.environ.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUE_VALUES


def is_debug_enabled() -> bool:
    """Return whether the solvers run their per-step consistency checks."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> bool:
    """Turn debug mode on or off and return the previous setting."""
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    return previous


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with debug mode set to ``enabled``.

    The previous setting is restored on exit, also when the block raises.

    Example
    -------
    >>> with debug_context():
    ...     result = gradient_descent(problem, x0)  # doctest: +SKIP
    """
    previous = set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)


def is_symmetric(mat: np.ndarray, atol: float = 1e-10, rtol: float = 1e-8) -> bool:
    """
    Check whether a square matrix equals its transpose.

    Parameters
    ----------
    mat:
        Two-dimensional array.
    atol, rtol:
        Tolerances passed to ``np.allclose(mat, mat.T)``.
    """
    mat = np.asarray(mat)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        return False
    return bool(np.allclose(mat, mat.T, atol=atol, rtol=rtol))


def assert_symmetric(mat: np.ndarray, atol: float = 1e-10, rtol: float = 1e-8) -> None:
    """
    Raise ValueError unless ``mat`` is square and symmetric within tolerance.

    The message reports the largest entry of ``|mat - mat.T|``.
    """
    mat = np.asarray(mat)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {mat.shape}.")
    if not is_symmetric(mat, atol=atol, rtol=rtol):
        raise ValueError(
            f"Matrix is not symmetric within tolerance {atol}. "
            f"Largest asymmetry: {np.max(np.abs(mat - mat.T))}"
        )


def check_accepted_step(
    f_prev: float, f_new: float, x: np.ndarray, atol: float = 0.0
) -> None:
    """
    Verify a step a solver has just accepted.

    Parameters
    ----------
    f_prev:
        Objective value at the point the step started from.
    f_new:
        Objective value at the accepted point.
    x:
        The accepted point.
    atol:
        Slack allowed on the decrease for floating-point noise.

    Raises
    ------
    ValueError
        If ``x`` has non-finite entries, or if ``f_new`` is not finite or is
        larger than ``f_prev + atol``.
    """
    if not np.all(np.isfinite(x)):
        raise ValueError("Accepted iterate contains non-finite values.")
    if not f_new <= f_prev + atol:
        raise ValueError(
            f"Objective increased from {f_prev!r} to {f_new!r}; "
            "accepted steps must not increase the objective."
        )


__all__ = [
    "DEBUG_ENV_VAR",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "is_symmetric",
    "assert_symmetric",
    "check_accepted_step",
]
