"""Pytest configuration for filetop."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest


def _ensure_repo_on_path() -> None:
    """Make the repository importable without an editable install."""
    repo_root = Path(__file__).resolve().parent.parent
    path_str = str(repo_root)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def _reset_filetop_logging():
    # setup_logging binds its handler to the sys.stderr of the test that ran main()
    yield
    logger = logging.getLogger("filetop")
    for h in list(logger.handlers):
        if getattr(h, "_filetop_handler", False):
            logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
