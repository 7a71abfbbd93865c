from __future__ import annotations
import logging
import os
from typing import List

import psutil

logger = logging.getLogger(__name__)


def _is_under(path: str, parent: str) -> bool:
    if path == parent:
        return True
    return path.startswith(parent.rstrip("\\/") + os.sep)


def list_drives() -> List[str]:
    """Mountpoints of local partitions that answer disk_usage, sorted."""
    drives = []
    seen = set()
    for p in psutil.disk_partitions(all=False):
        mp = p.mountpoint
        if not mp:
            continue
        mp_norm = os.path.abspath(mp)
        if mp_norm in seen:
            continue
        seen.add(mp_norm)
        try:
            psutil.disk_usage(mp_norm)
        except OSError as e:
            logger.debug("drive %s unavailable: %s", mp_norm, e)
            continue
        drives.append(mp_norm)
    drives.sort(key=str.lower)
    return drives


def drive_roots() -> List[str]:
    # /boot лежит под /, его файлы и так попадут в обход корня
    roots: List[str] = []
    for mp in sorted(list_drives(), key=len):
        if any(_is_under(mp, r) for r in roots):
            logger.debug("nested mount %s skipped", mp)
            continue
        roots.append(mp)
    roots.sort(key=str.lower)
    return roots
