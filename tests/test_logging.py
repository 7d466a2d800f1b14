"""Tests for logging utilities."""

import logging
from io import StringIO

import numpy as np
import pytest

from descentkit.logging import configure_logging, get_logger, set_log_level
from descentkit.optimize import Problem, newton_method


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure_logging(level=logging.WARNING)


def test_get_logger_returns_namespaced_logger():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "descentkit.test_module"


def test_get_logger_keeps_package_names():
    logger = get_logger("descentkit.optimize.newton")
    assert logger.name == "descentkit.optimize.newton"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_default_name():
    assert get_logger().name == "descentkit"


def test_package_logger_owns_the_handler():
    package = get_logger()
    assert package.propagate is False
    assert len(package.handlers) == 1
    child = get_logger("test_module")
    assert child.handlers == []
    assert child.propagate is True


def test_set_log_level_accepts_int_and_string():
    logger = get_logger("test_module")
    set_log_level(logging.INFO)
    assert logger.getEffectiveLevel() == logging.INFO
    set_log_level("DEBUG")
    assert logger.getEffectiveLevel() == logging.DEBUG
    set_log_level("ERROR")
    assert logger.getEffectiveLevel() == logging.ERROR


def test_configure_logging_redirects_output():
    logger = get_logger("test_module")
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    logger.debug("Debug message")
    assert "Debug message" in stream.getvalue()
    assert "[DEBUG] descentkit.test_module" in stream.getvalue()


def test_configuration_applies_to_loggers_created_later():
    stream = StringIO()
    configure_logging(stream=stream, format_string="CFG %(message)s")
    get_logger("created_after_configure").warning("hello")
    assert "CFG hello" in stream.getvalue()


def test_set_log_level_keeps_configured_stream():
    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    set_log_level("INFO")
    get_logger("test_module").info("Info message")
    assert "Info message" in stream.getvalue()


def test_unknown_level_name_rejected():
    with pytest.raises(ValueError, match="Unknown logging level"):
        set_log_level("LOUD")


def test_solver_logs_iterations_at_debug_level():
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    Q = np.diag([1.0, 10.0])
    problem = Problem(fun=lambda x: 0.5 * x @ Q @ x, grad=lambda x: Q @ x, hess=lambda x: Q)
    newton_method(problem, np.array([10.0, 1.0]))
    output = stream.getvalue()
    assert "newton_method iter 1" in output
    assert "Stopping tolerance satisfied" in output


def test_solver_quiet_at_default_level():
    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    Q = np.eye(2)
    problem = Problem(fun=lambda x: 0.5 * x @ Q @ x, grad=lambda x: Q @ x, hess=lambda x: Q)
    newton_method(problem, np.ones(2))
    assert stream.getvalue() == ""


def test_line_search_budget_warning():
    from descentkit.optimize import LineSearchError, backtracking_line_search

    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    with pytest.raises(LineSearchError):
        backtracking_line_search(
            lambda x: float(x @ x),
            np.array([1.0]),
            np.array([1.0]),
            lambda x: -2 * x,
            max_iter=3,
        )
    assert "exhausted 3 trials" in stream.getvalue()
