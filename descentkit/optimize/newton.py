"""Damped Newton's method with backtracking line search."""

from __future__ import annotations

from typing import Optional

import numpy as np
from scipy.linalg import cho_factor, cho_solve

from ..diagnostics import assert_symmetric, check_accepted_step, is_debug_enabled
from ..logging import get_logger
from .core import (
    LS_MAXITER,
    NEWTON_MAXITER,
    NEWTON_TOL,
    SOLVER_ALPHA,
    SOLVER_BETA,
    Array,
    LineSearchError,
    OptimizeResult,
    PreconditionError,
    Problem,
    SingularHessianError,
    Status,
    StepCallback,
)
from .line_search import backtracking_line_search
from .monitor import ConvergenceMonitor, StepRecorder
from .utils import (
    as_point,
    check_budget,
    check_gradient,
    check_hessian,
    check_line_search_params,
    check_objective_value,
)

logger = get_logger(__name__)


def newton_step(hess: Array, grad: Array) -> tuple[Array, float]:
    """
    Solve ``hess @ step = -grad`` and return the step with ``lambda^2``.

    The system is solved by a Cholesky factorization followed by two
    triangular solves; the factorization doubles as the
    positive-definiteness test. ``lambda^2 = -step @ grad`` is the
    squared Newton decrement.

    Raises:
        PreconditionError: If ``hess`` is not symmetric.
        SingularHessianError: If ``hess`` has non-finite entries or is not
            positive definite.
    """
    hess = np.asarray(hess, dtype=float)
    grad = np.asarray(grad, dtype=float)
    if not np.all(np.isfinite(hess)):
        raise SingularHessianError("Hessian contains non-finite entries")
    try:
        assert_symmetric(hess)
    except ValueError as exc:
        raise PreconditionError(f"Hessian must be symmetric: {exc}") from exc
    try:
        factor = cho_factor(hess, lower=True, check_finite=False)
    except np.linalg.LinAlgError as exc:
        raise SingularHessianError(
            "Hessian is not positive definite at the current iterate"
        ) from exc
    step = cho_solve(factor, -grad, check_finite=False)
    lambda_sq = float(-np.dot(step, grad))
    if not np.all(np.isfinite(step)) or lambda_sq < 0.0:
        raise SingularHessianError("Hessian is numerically singular")
    return step, lambda_sq


def newton_method(
    problem: Problem,
    x0: Array,
    alpha: float = SOLVER_ALPHA,
    beta: float = SOLVER_BETA,
    tol: float = NEWTON_TOL,
    maxiter: int = NEWTON_MAXITER,
    ls_maxiter: int = LS_MAXITER,
    max_time: Optional[float] = None,
    callback: Optional[StepCallback] = None,
    history: bool = False,
) -> OptimizeResult:
    """
    Newton's method with backtracking line search.

    The search direction is the Newton step ``-H^{-1} g`` (computed by a
    linear solve) and the loop stops once half the squared Newton decrement,
    ``g^T H^{-1} g / 2``, drops below ``tol``. Close to the optimum the line
    search accepts ``t = 1`` and convergence becomes quadratic.

    Args:
        problem: Objective bundle; ``problem.hess`` is required.
        x0: Starting point. Copied, never modified.
        alpha: Sufficient-decrease fraction in ``(0, 0.5)``.
        beta: Step shrink factor in ``(0, 1)``.
        tol: Threshold on ``lambda^2 / 2``.
        maxiter: Ceiling on accepted steps.
        ls_maxiter: Ceiling on rejected trials per line search.
        max_time: Optional wall-clock limit in seconds.
        callback: Called as ``callback(x, fx, grad)`` after each step.
        history: Record visited points and objective values.

    Returns:
        OptimizeResult whose ``decrement`` holds the last ``lambda^2 / 2``.

    Raises:
        SingularHessianError: If the Hessian is not positive definite at a
            visited point. No regularization is attempted.
    """
    if problem.hess is None:
        raise PreconditionError("newton_method requires problem.hess")
    check_line_search_params(alpha, beta)
    check_budget(tol, maxiter, max_time, ls_maxiter)
    x = as_point(x0, problem.dim)
    n = x.size
    fx = check_objective_value(problem.fun(x))
    nfev = 1
    njev = 0
    nhev = 0
    recorder = StepRecorder(enabled=history)
    recorder.record(x, fx)
    monitor = ConvergenceMonitor(maxiter, max_time)

    while True:
        grad = check_gradient(problem.grad(x), n)
        njev += 1
        hess = check_hessian(problem.hess(x), n)
        nhev += 1
        step, lambda_sq = newton_step(hess, grad)
        decrement = 0.5 * lambda_sq
        if decrement < tol or lambda_sq == 0.0:
            monitor.mark(Status.CONVERGED)
            break
        if monitor.budget_exhausted():
            break
        try:
            t, ls_fev, f_new = backtracking_line_search(
                problem.fun,
                x,
                step,
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
        x = x + t * step
        nfev += ls_fev
        if is_debug_enabled():
            check_accepted_step(fx, f_new, x)
        fx = f_new
        monitor.step()
        recorder.record(x, fx)
        logger.debug(
            "newton_method iter %d: f=%.6e lambda^2/2=%.3e t=%.3e",
            monitor.nit,
            fx,
            decrement,
            t,
        )
        if callback is not None:
            callback(x.copy(), fx, grad.copy())

    logger.info(
        "newton_method finished after %d iterations: %s",
        monitor.nit,
        monitor.message(),
    )
    return OptimizeResult(
        x=x,
        fun=fx,
        nit=monitor.nit,
        success=monitor.converged,
        status=monitor.status,
        message=monitor.message(),
        grad_norm=float(np.linalg.norm(grad)),
        nfev=nfev,
        njev=njev,
        nhev=nhev,
        decrement=decrement,
        history=recorder.points,
        fun_history=recorder.values,
    )


__all__ = ["newton_method", "newton_step"]
