from __future__ import annotations
import logging
import os
import stat as statmod
from enum import Enum
from typing import Callable, Iterable, Optional

from .models import Entry, base_name
from .ordering import OrderingPolicy
from .selector import DEFAULT_COUNT, TopKSelector

logger = logging.getLogger(__name__)


class WalkAction(Enum):
    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"
    ABORT = "abort"


# (path, name, lstat result or None, error or None) -> what to do next
Visitor = Callable[[str, str, Optional[os.stat_result], Optional[OSError]], WalkAction]


def is_hidden(name: str) -> bool:
    # "" is the base name of "/", "." and ".." are path references, not dotfiles
    if name in ("", ".", ".."):
        return False
    return name[0] == "."


def _walk_node(path: str, name: str, st: os.stat_result, visit: Visitor) -> WalkAction:
    action = visit(path, name, st, None)
    if action is WalkAction.ABORT:
        return WalkAction.ABORT
    if action is WalkAction.SKIP_SUBTREE or not statmod.S_ISDIR(st.st_mode):
        return WalkAction.CONTINUE

    try:
        with os.scandir(path) as it:
            for entry in it:
                try:
                    est = entry.stat(follow_symlinks=False)
                except OSError as e:
                    if visit(entry.path, entry.name, None, e) is WalkAction.ABORT:
                        return WalkAction.ABORT
                    continue

                if _walk_node(entry.path, entry.name, est, visit) is WalkAction.ABORT:
                    return WalkAction.ABORT
    except OSError as e:
        # каталог не открылся или сломался посреди чтения
        if visit(path, name, None, e) is WalkAction.ABORT:
            return WalkAction.ABORT
    return WalkAction.CONTINUE


def walk_tree(top: str, visit: Visitor) -> WalkAction:
    """Pre-order walk of `top` without following symlinks.

    `visit` sees every node once with its lstat result. Failures are passed to
    `visit` with `st=None` and the OSError; a directory that cannot be listed
    is reported a second time that way after its successful lstat visit.
    Returns ABORT if the visitor aborted, CONTINUE otherwise.
    """
    name = base_name(top)
    try:
        st = os.lstat(top)
    except OSError as e:
        if visit(top, name, None, e) is WalkAction.ABORT:
            return WalkAction.ABORT
        return WalkAction.CONTINUE
    return _walk_node(top, name, st, visit)


class Traverser:
    """Feeds every accepted leaf entry under the given roots into a selector."""

    def __init__(self, selector: TopKSelector, ignore_hidden: bool = False):
        self.selector = selector
        self.ignore_hidden = ignore_hidden

    def _visit(self, path: str, name: str, st: Optional[os.stat_result],
               err: Optional[OSError]) -> WalkAction:
        if err is not None:
            logger.warning("%s: %s", path, err.strerror or err)
            return WalkAction.SKIP_SUBTREE

        if self.ignore_hidden and is_hidden(name):
            logger.debug("hidden, skipped: %s", path)
            return WalkAction.SKIP_SUBTREE

        if statmod.S_ISDIR(st.st_mode):
            return WalkAction.CONTINUE

        self.selector.insert(Entry.from_stat(path, st, name))
        return WalkAction.CONTINUE

    def walk(self, root: str):
        logger.info("scanning %s", root)
        walk_tree(root, self._visit)

    def walk_all(self, roots: Iterable[str]):
        for root in roots:
            self.walk(root)


def scan_paths(paths: Iterable[str],
               policy: Optional[OrderingPolicy] = None,
               count: int = DEFAULT_COUNT,
               ignore_hidden: bool = False) -> TopKSelector:
    selector = TopKSelector(policy or OrderingPolicy(), count)
    Traverser(selector, ignore_hidden=ignore_hidden).walk_all(paths)
    return selector
