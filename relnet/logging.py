"""Centralized logging configuration for relnet.

All package loggers hang off the ``relnet`` logger. What they emit:

* ``relnet.graph.site_graph`` logs one INFO line per constructed graph.
* ``relnet.algorithms.safest_path`` logs one INFO line per solver run.
* ``relnet.algorithms.max_flow`` logs the flow value at INFO, and each
  augmenting path and min-cut summary at DEBUG.

Call ``enable_debug_logging()`` to see the augmentation trace as it runs.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "relnet"

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``relnet`` logger.

    Repeated calls are no-ops until ``reset_logging()`` is called.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stdout).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees solver records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``relnet`` hierarchy.

    Names already under ``relnet`` are used as given. Any other name, such
    as ``__main__`` from a script driving the solvers, is nested under
    ``relnet`` so its records share the package handler and level.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        Logger whose level is inherited from ``relnet``.
    """
    setup_root_logger()

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``relnet`` logger and its handlers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show per-augmentation and min-cut DEBUG records."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO, one summary line per graph build or solver run."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler so the next setup call starts clean."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
