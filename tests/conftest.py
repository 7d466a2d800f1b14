"""Pytest configuration and shared fixtures for descentkit tests.

This module provides:
- A deterministic NumPy RNG fixture
- Shared test objectives (quadratic, scalar parabola, log-sum-exp)
"""

import os

import numpy as np
import pytest

from descentkit.optimize import Problem


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the legacy global numpy RNG for every test."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


def _quadratic_problem(Q: np.ndarray) -> Problem:
    Q = np.asarray(Q, dtype=float)
    return Problem(
        fun=lambda x: float(0.5 * x @ Q @ x),
        grad=lambda x: Q @ x,
        hess=lambda x: Q,
        dim=Q.shape[0],
    )


@pytest.fixture
def parabola() -> Problem:
    """f(x) = x^2 - 2x - 5, minimized at x = 1 with f = -6."""
    return Problem(
        fun=lambda x: float(x[0] ** 2 - 2 * x[0] - 5),
        grad=lambda x: np.array([2 * x[0] - 2]),
        hess=lambda x: np.array([[2.0]]),
        dim=1,
    )


@pytest.fixture
def ill_conditioned() -> Problem:
    """f(x) = 0.5 (x1^2 + 10 x2^2)."""
    return _quadratic_problem(np.diag([1.0, 10.0]))


@pytest.fixture
def exp_problem() -> Problem:
    """Strictly convex, non-quadratic objective with a closed-form minimizer.

    f(x) = exp(x1 + 3 x2 - 0.1) + exp(x1 - 3 x2 - 0.1) + exp(-x1 - 0.1),
    minimized at (-ln(2) / 2, 0).
    """
    A = np.array([[1.0, 3.0], [1.0, -3.0], [-1.0, 0.0]])

    def fun(x: np.ndarray) -> float:
        return float(np.sum(np.exp(A @ x - 0.1)))

    def grad(x: np.ndarray) -> np.ndarray:
        return A.T @ np.exp(A @ x - 0.1)

    def hess(x: np.ndarray) -> np.ndarray:
        w = np.exp(A @ x - 0.1)
        return A.T @ (w[:, None] * A)

    return Problem(fun=fun, grad=grad, hess=hess, dim=2)


@pytest.fixture
def exp_minimizer() -> np.ndarray:
    return np.array([-0.5 * np.log(2.0), 0.0])


@pytest.fixture
def make_quadratic():
    """Factory for f(x) = 0.5 x^T Q x problems."""
    return _quadratic_problem
