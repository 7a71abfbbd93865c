from __future__ import annotations

import logging
import sys
from typing import Optional


_LEVELS_BY_VERBOSE = {
    0: logging.WARNING,  # default
    1: logging.INFO,
    2: logging.DEBUG,
}


def setup_logging(verbose_count: int = 0, logger_name: Optional[str] = "filetop") -> logging.Logger:
    """
    Configure the package logger from the -v count.

    Diagnostics always go to stderr so stdout keeps one line per result.
    Calling it again only adjusts the level.
    """
    level = _LEVELS_BY_VERBOSE.get(verbose_count, logging.DEBUG)
    logger = logging.getLogger(logger_name or "")
    logger.setLevel(level)

    already_configured = any(getattr(h, "_filetop_handler", False) for h in logger.handlers)
    if not already_configured:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler._filetop_handler = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(fmt="%(levelname)s | %(name)s | %(message)s"))
        logger.addHandler(handler)

    return logger
