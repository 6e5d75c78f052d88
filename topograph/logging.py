"""Centralized logging configuration for TopoGraph.

All package modules obtain loggers through :func:`get_logger`. Loggers are
children of the ``topograph`` root logger, which owns the only handler.
Records go to standard error so that command output on standard output
(for example ``topograph analyze --json``) stays machine-readable. The
initial level can be overridden with the ``TOPOGRAPH_LOG_LEVEL`` environment
variable (e.g. ``DEBUG`` or ``WARNING``).
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "topograph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time.

    Test harnesses and callers that swap ``sys.stderr`` after import still
    receive the records.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def _level_from_env(default: int) -> int:
    name = os.environ.get("TOPOGRAPH_LOG_LEVEL")
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``topograph`` root logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Logging level used when ``TOPOGRAPH_LOG_LEVEL`` is unset.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_level_from_env(level))
    root_logger.handlers.clear()

    if handler is None:
        handler = StderrHandler()
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``topograph`` root configuration.

    Args:
        name: Logger name, usually ``__name__`` of the calling module.

    Returns:
        Logger instance with level NOTSET so the root level applies.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the root logger and its handlers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.WARNING).
    """
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO level logging."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and allow reconfiguration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
