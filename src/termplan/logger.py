"""Logging setup for termplan with verbosity levels."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Custom levels sit between the standard ones
CHANGES_LEVEL = 25  # INFO < x < WARNING, verbosity 1
CHECKS_LEVEL = 15  # DEBUG < x < INFO, verbosity 2

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

# Verbosity 0..3; anything higher is treated as 3
_LEVELS = (logging.ERROR, CHANGES_LEVEL, CHECKS_LEVEL, logging.DEBUG)


class TermplanLogger(logging.Logger):
    """Logger with one method per verbosity level.

    - changes(): level 1, semesters opened and courses placed
    - checks(): level 2, capacity checks and skipped courses
    - debug(): level 3, eligibility lists and ordering
    """

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> TermplanLogger:
    """Return the shared ``termplan`` logger.

    The logger class is registered before lookup so the first caller gets a
    TermplanLogger; configure it with setup_logger().
    """
    logging.setLoggerClass(TermplanLogger)
    logger = logging.getLogger("termplan")
    assert isinstance(logger, TermplanLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the termplan logger.

    Safe to call repeatedly; previous handlers are dropped.

    Args:
        verbosity: 0=errors and warnings only, 1=placements, 2=checks, 3=debug
        stream: Output stream, defaults to sys.stderr
    """
    logger = get_logger()
    logger.handlers.clear()

    level = _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]
    # Stranded-course warnings stay visible even when silent
    logger.setLevel(min(level, logging.WARNING))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and return to the quiet default."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)
    logger.propagate = True


def debug_enabled() -> bool:
    """True when verbosity >= 3."""
    return get_logger().isEnabledFor(logging.DEBUG)
