"""Logging utilities for descentkit.

All solver modules log below the ``descentkit`` package logger. Only the
package logger owns a handler; module loggers carry no level or handler of
their own and propagate into it. The stream, format and level chosen with
:func:`configure_logging` are kept at module level, so they apply to every
``descentkit`` logger whether it was created before or after the call.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER = "descentkit"

_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Active configuration, applied by _install_handler.
_level: int = logging.WARNING
_stream: Optional[IO[str]] = None
_formatter = logging.Formatter(_DEFAULT_FORMAT)
_handler: Optional[logging.Handler] = None


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown logging level {level!r}")
        return value
    return int(level)


def _install_handler() -> logging.Logger:
    """Attach a handler built from the active configuration to the package logger."""
    global _handler
    package = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package.removeHandler(_handler)
        _handler.close()
    _handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
    _handler.setFormatter(_formatter)
    _handler.setLevel(_level)
    package.addHandler(_handler)
    package.setLevel(_level)
    package.propagate = False
    return package


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger in the ``descentkit`` namespace.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.
            Names outside the package are prefixed with ``descentkit.``.
            If None, the package logger itself is returned.

    Example:
        >>> from descentkit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Starting Newton iterations")
    """
    if _handler is None:
        _install_handler()
    if name is None or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """Set the threshold for all descentkit output.

    Args:
        level: Logging level (``logging.DEBUG``, ``logging.INFO``, etc.) or
            a level name such as ``"DEBUG"``.
    """
    global _level
    _level = _coerce_level(level)
    _install_handler()


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure where and how descentkit writes its log records.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: the current ``sys.stderr``).

    Example:
        >>> import logging
        >>> from descentkit.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG)
    """
    global _level, _stream, _formatter
    _level = _coerce_level(level)
    _stream = stream
    _formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)
    _install_handler()


__all__ = ["PACKAGE_LOGGER", "get_logger", "set_log_level", "configure_logging"]
