"""descentkit - backtracking descent solvers for unconstrained convex problems."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Solvers
from .optimize import (
    ConvergenceMonitor,
    LineSearchError,
    OptimizeResult,
    PreconditionError,
    Problem,
    SingularHessianError,
    SolverConfig,
    Status,
    StepRecorder,
    backtracking_line_search,
    coordinate_descent,
    coordinate_direction,
    gradient_descent,
    minimize,
    newton_method,
    newton_step,
)

__all__ = [
    # Version
    "__version__",
    # Solvers
    "Problem",
    "OptimizeResult",
    "Status",
    "SolverConfig",
    "minimize",
    "backtracking_line_search",
    "gradient_descent",
    "coordinate_descent",
    "coordinate_direction",
    "newton_method",
    "newton_step",
    "ConvergenceMonitor",
    "StepRecorder",
    # Errors
    "PreconditionError",
    "LineSearchError",
    "SingularHessianError",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
