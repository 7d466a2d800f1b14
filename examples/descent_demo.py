"""
Example: Descent Methods on Small Convex Problems

This example compares gradient descent, coordinate descent and Newton's
method on two textbook objectives:

1. The scalar parabola f(x) = x^2 - 2x - 5, minimized at x = 1.
2. The quadratic f(x) = 0.5 (x1^2 + gamma x2^2) with gamma = 10, whose
   condition number slows the first-order methods down.
"""

import numpy as np

from descentkit import (
    Problem,
    SolverConfig,
    backtracking_line_search,
    minimize,
)


def example_line_search():
    """Example: one backtracking step on the parabola."""
    print("=" * 60)
    print("Example 1: Backtracking line search on x^2 - 2x - 5")
    print("=" * 60)

    def f(x):
        return float(x[0] ** 2 - 2 * x[0] - 5)

    def grad(x):
        return np.array([2 * x[0] - 2])

    x = np.array([0.0])
    direction = np.array([10.0])
    t, nfev, f_new = backtracking_line_search(f, x, direction, grad, alpha=0.1, beta=0.7)
    print(f"Accepted step: t = {t:.5f} after {nfev} trials")
    print(f"New point: x = {x[0] + t * direction[0]:.5f}, f(x) = {f_new:.5f}")

    problem = Problem(fun=f, grad=grad, hess=lambda x: np.array([[2.0]]), dim=1)
    result = minimize(problem, x, SolverConfig(method="gradient"))
    print(f"Gradient descent: x* = {result.x[0]:.5f}, f(x*) = {result.fun:.5f}")
    print()


def example_condition_number(gamma: float = 10.0):
    """Example: iteration counts on an ill-conditioned quadratic."""
    print("=" * 60)
    print(f"Example 2: 0.5 (x1^2 + {gamma:g} x2^2) from (10, 1)")
    print("=" * 60)

    Q = np.diag([1.0, gamma])
    problem = Problem(
        fun=lambda x: float(0.5 * x @ Q @ x),
        grad=lambda x: Q @ x,
        hess=lambda x: Q,
        dim=2,
    )
    x0 = np.array([10.0, 1.0])
    for method in ("gradient", "coordinate", "newton"):
        result = minimize(problem, x0, SolverConfig(method=method, tol=1e-6))
        print(
            f"{method:>10s}: {result.nit:4d} iterations, "
            f"f = {result.fun:.3e}, status = {result.status.value}"
        )
    print()


if __name__ == "__main__":
    example_line_search()
    example_condition_number()
    print("All descent examples completed.")
