"""Verbosity-levelled logging for the planner."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

CHANGES_LEVEL = 25  # allocations, start times
CHECKS_LEVEL = 15  # skipped days

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

# Index is the -v count
_VERBOSITY_LEVELS = (logging.ERROR, CHANGES_LEVEL, CHECKS_LEVEL, logging.DEBUG)


class PlanLogger(logging.Logger):
    """Logger with one method per planner verbosity step.

    - changes(): -v, each task's start instant and duration
    - checks(): -vv, days the cursor skips and why
    - debug(): -vvv, cursor and capacity on every allocation step
    """

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


class _PlanFormatter(logging.Formatter):
    """Plain messages, with warnings and errors labelled."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno >= logging.WARNING:
            return f"{record.levelname.lower()}: {message}"
        return message


def get_logger() -> PlanLogger:
    """Return the shared ``taskplan`` logger."""
    logging.setLoggerClass(PlanLogger)
    logger = logging.getLogger("taskplan")
    assert isinstance(logger, PlanLogger)
    if not logger.handlers:
        # Library use stays silent until setup_logger() installs a real handler
        logger.addHandler(logging.NullHandler())
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Send planner logs at the given verbosity to stream (stderr by default).

    Verbosity 0 shows errors only; 1 adds allocations and plan warnings, 2 adds
    skipped days, 3 adds per-step cursor detail. Values above 3 act as 3.
    Calling again replaces the previous handler.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_VERBOSITY_LEVELS[max(0, min(verbosity, len(_VERBOSITY_LEVELS) - 1))])

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(_PlanFormatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Back to the silent library default (used between tests)."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)
    logger.addHandler(logging.NullHandler())
    logger.propagate = True


def debug_enabled() -> bool:
    """Check if per-step cursor detail (verbosity 3) is being logged."""
    return get_logger().isEnabledFor(logging.DEBUG)
