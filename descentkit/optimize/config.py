"""Solver configuration and name-based dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .coordinate import coordinate_descent
from .core import Array, OptimizeResult, Problem, StepCallback
from .gradient import gradient_descent
from .newton import newton_method

_SOLVERS: dict[str, Callable[..., OptimizeResult]] = {
    "gradient": gradient_descent,
    "coordinate": coordinate_descent,
    "newton": newton_method,
}


@dataclass(frozen=True)
class SolverConfig:
    """
    Configuration for :func:`minimize`.

    Fields left as ``None`` fall back to the defaults of the selected solver,
    so the same config can be reused across methods.

    Args:
        method: Solver name. Supported values: "gradient", "coordinate",
            "newton".
        alpha: Sufficient-decrease fraction in ``(0, 0.5)``.
        beta: Step shrink factor in ``(0, 1)``.
        tol: Stopping threshold (gradient norm, or ``lambda^2 / 2`` for
            Newton).
        maxiter: Ceiling on accepted steps.
        ls_maxiter: Ceiling on rejected trials per line search.
        max_time: Wall-clock limit in seconds.
        history: Record the trajectory in the result.
    """

    method: str = "gradient"
    alpha: Optional[float] = None
    beta: Optional[float] = None
    tol: Optional[float] = None
    maxiter: Optional[int] = None
    ls_maxiter: Optional[int] = None
    max_time: Optional[float] = None
    history: bool = False

    def solver_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for the solver, omitting unset fields."""
        kwargs: dict[str, Any] = {"history": self.history}
        for name in ("alpha", "beta", "tol", "maxiter", "ls_maxiter", "max_time"):
            value = getattr(self, name)
            if value is not None:
                kwargs[name] = value
        return kwargs


def minimize(
    problem: Problem,
    x0: Array,
    config: Optional[SolverConfig] = None,
    callback: Optional[StepCallback] = None,
    **overrides: Any,
) -> OptimizeResult:
    """
    Run the solver named by ``config.method`` on ``problem``.

    Args:
        problem: Objective bundle. Newton additionally needs ``hess``.
        x0: Starting point.
        config: Solver configuration. Defaults to ``SolverConfig()``.
        callback: Per-step callback forwarded to the solver.
        **overrides: Solver keyword arguments that take precedence over the
            config, e.g. ``tol=1e-8``.

    Raises:
        ValueError: If the method name is not supported.

    Example:
        >>> import numpy as np
        >>> problem = Problem(fun=lambda x: x @ x, grad=lambda x: 2 * x)
        >>> res = minimize(problem, np.ones(2), SolverConfig(method="gradient"))
        >>> res.success
        True
    """
    if config is None:
        config = SolverConfig()
    name_lower = config.method.lower()
    if name_lower not in _SOLVERS:
        supported = sorted(_SOLVERS)
        raise ValueError(
            f"Unsupported method '{config.method}'. Supported methods: {supported}"
        )
    kwargs = config.solver_kwargs()
    kwargs.update(overrides)
    return _SOLVERS[name_lower](problem, x0, callback=callback, **kwargs)


__all__ = ["SolverConfig", "minimize"]
