"""Gradient descent with backtracking line search."""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from ..diagnostics import check_accepted_step, is_debug_enabled
from ..logging import get_logger
from .core import (
    FIRST_ORDER_MAXITER,
    FIRST_ORDER_TOL,
    LS_MAXITER,
    SOLVER_ALPHA,
    SOLVER_BETA,
    Array,
    LineSearchError,
    OptimizeResult,
    Problem,
    Status,
    StepCallback,
)
from .line_search import backtracking_line_search
from .monitor import ConvergenceMonitor, StepRecorder
from .utils import (
    as_point,
    check_budget,
    check_gradient,
    check_line_search_params,
    check_objective_value,
)

logger = get_logger(__name__)

DirectionRule = Callable[[Array], Array]


def _first_order_descent(
    problem: Problem,
    x0: Array,
    direction_rule: DirectionRule,
    name: str,
    alpha: float,
    beta: float,
    tol: float,
    maxiter: int,
    ls_maxiter: int,
    max_time: Optional[float],
    callback: Optional[StepCallback],
    history: bool,
) -> OptimizeResult:
    """Shared loop for methods that stop on the gradient norm.

    ``direction_rule`` maps the gradient at the current point to a descent
    direction; everything else (line search, budget, bookkeeping) is common.
    """
    check_line_search_params(alpha, beta)
    check_budget(tol, maxiter, max_time, ls_maxiter)
    x = as_point(x0, problem.dim)
    n = x.size
    fx = check_objective_value(problem.fun(x))
    nfev = 1
    njev = 0
    recorder = StepRecorder(enabled=history)
    recorder.record(x, fx)
    monitor = ConvergenceMonitor(maxiter, max_time)

    while True:
        grad = check_gradient(problem.grad(x), n)
        njev += 1
        grad_norm = float(np.linalg.norm(grad))
        if grad_norm < tol or grad_norm == 0.0:
            monitor.mark(Status.CONVERGED)
            break
        if monitor.budget_exhausted():
            break
        direction = direction_rule(grad)
        try:
            t, ls_fev, f_new = backtracking_line_search(
                problem.fun,
                x,
                direction,
                problem.grad,
                alpha=alpha,
                beta=beta,
                max_iter=ls_maxiter,
                fx=fx,
                grad_fx=grad,
            )
        except LineSearchError as exc:
            nfev += exc.nfev
            monitor.mark(Status.LINE_SEARCH_FAILED)
            break
        x = x + t * direction
        nfev += ls_fev
        if is_debug_enabled():
            check_accepted_step(fx, f_new, x)
        fx = f_new
        monitor.step()
        recorder.record(x, fx)
        logger.debug(
            "%s iter %d: f=%.6e |grad|=%.3e t=%.3e",
            name,
            monitor.nit,
            fx,
            grad_norm,
            t,
        )
        if callback is not None:
            callback(x.copy(), fx, grad.copy())

    logger.info(
        "%s finished after %d iterations: %s", name, monitor.nit, monitor.message()
    )
    return OptimizeResult(
        x=x,
        fun=fx,
        nit=monitor.nit,
        success=monitor.converged,
        status=monitor.status,
        message=monitor.message(),
        grad_norm=grad_norm,
        nfev=nfev,
        njev=njev,
        history=recorder.points,
        fun_history=recorder.values,
    )


def gradient_descent(
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
    Minimize ``problem.fun`` along the negative gradient.

    Each iteration takes ``direction = -grad f(x)``, stops once
    ``||direction||_2 < tol``, and otherwise moves by the step returned from
    :func:`backtracking_line_search`. On strongly convex objectives the
    objective gap shrinks geometrically, at a rate that degrades with the
    condition number.

    Args:
        problem: Objective bundle; ``problem.hess`` is ignored.
        x0: Starting point. Copied, never modified.
        alpha: Sufficient-decrease fraction in ``(0, 0.5)``.
        beta: Step shrink factor in ``(0, 1)``.
        tol: Gradient-norm stopping threshold.
        maxiter: Ceiling on accepted steps.
        ls_maxiter: Ceiling on rejected trials per line search.
        max_time: Optional wall-clock limit in seconds.
        callback: Called as ``callback(x, fx, grad)`` after each step, where
            ``grad`` is the gradient at the point the step started from.
        history: Record visited points and objective values.

    Returns:
        OptimizeResult with ``status`` CONVERGED, MAX_ITER, MAX_TIME or
        LINE_SEARCH_FAILED.
    """
    return _first_order_descent(
        problem,
        x0,
        np.negative,
        "gradient_descent",
        alpha=alpha,
        beta=beta,
        tol=tol,
        maxiter=maxiter,
        ls_maxiter=ls_maxiter,
        max_time=max_time,
        callback=callback,
        history=history,
    )


__all__ = ["gradient_descent"]
