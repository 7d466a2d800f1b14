"""Diagnostics and debugging utilities for descentkit."""

from .core import (
    DEBUG_ENV_VAR,
    assert_symmetric,
    check_accepted_step,
    debug_context,
    is_debug_enabled,
    is_symmetric,
    set_debug_enabled,
)

__all__ = [
    "DEBUG_ENV_VAR",
    "is_symmetric",
    "assert_symmetric",
    "check_accepted_step",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
