"""Unconstrained descent methods for smooth convex objectives.

Example
-------
>>> import numpy as np
>>> from descentkit.optimize import Problem, newton_method
>>> Q = np.diag([1.0, 10.0])
>>> problem = Problem(
...     fun=lambda x: 0.5 * x @ Q @ x,
...     grad=lambda x: Q @ x,
...     hess=lambda x: Q,
... )
>>> res = newton_method(problem, np.array([10.0, 1.0]))
>>> res.nit
1
"""

from .config import SolverConfig, minimize
from .coordinate import coordinate_descent, coordinate_direction
from .core import (
    LineSearchError,
    OptimizeResult,
    PreconditionError,
    Problem,
    SingularHessianError,
    Status,
)
from .gradient import gradient_descent
from .line_search import backtracking_line_search
from .monitor import ConvergenceMonitor, StepRecorder
from .newton import newton_method, newton_step

__all__ = [
    "ConvergenceMonitor",
    "LineSearchError",
    "OptimizeResult",
    "PreconditionError",
    "Problem",
    "SingularHessianError",
    "SolverConfig",
    "Status",
    "StepRecorder",
    "backtracking_line_search",
    "coordinate_descent",
    "coordinate_direction",
    "gradient_descent",
    "minimize",
    "newton_method",
    "newton_step",
]
