"""Logging setup shared by every flightplan module.

All loggers live under the ``flightplan`` namespace and defer their level to
it, so one call changes verbosity for the graph reader, the search and the
CLI together. The CLI maps ``--verbose`` to DEBUG and ``--quiet`` to WARNING;
library users get INFO on stdout until they call `set_global_log_level`.

Usage:
    from flightplan.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("Search summaries are emitted at DEBUG")
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "flightplan"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# True once the namespace logger has its handler installed
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single handler on the ``flightplan`` namespace logger.

    Later calls do nothing until `reset_logging` runs, so modules can call
    this freely at import time.

    Args:
        level: Initial level for the namespace.
        format_string: Record format; `DEFAULT_FORMAT` when None.
        handler: Destination; a stdout StreamHandler when None. Tests pass a
            handler over a StringIO to inspect output.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    namespace = logging.getLogger(ROOT_LOGGER_NAME)
    namespace.setLevel(level)
    namespace.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    namespace.addHandler(handler)

    # Keep propagation on so pytest's caplog sees planner records
    namespace.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a flightplan module.

    Its own level stays NOTSET, so `set_global_log_level` governs it.

    Args:
        name: Usually ``__name__`` of the caller, e.g. ``flightplan.search``.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the level of the whole ``flightplan`` namespace and its handler."""
    setup_root_logger()

    namespace = logging.getLogger(ROOT_LOGGER_NAME)
    namespace.setLevel(level)
    for handler in namespace.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show per-search summaries and file-reading details."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO: load counts, report location and timings only."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the namespace handler and level so the next setup starts clean.

    Intended for tests.
    """
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    namespace = logging.getLogger(ROOT_LOGGER_NAME)
    namespace.handlers.clear()
    namespace.setLevel(logging.NOTSET)


setup_root_logger()
