from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional


def base_name(path: str) -> str:
    # normpath убирает хвостовые разделители, но не трогает "\" в имени на POSIX
    return os.path.basename(os.path.normpath(path)) if path else ""


@dataclass(frozen=True)
class Entry:
    path: str
    size: int = 0
    modified_at: float = 0.0
    name: str = ""
    modified_ns: int = 0

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result, name: Optional[str] = None) -> "Entry":
        return cls(
            path=path,
            size=int(getattr(st, "st_size", 0) or 0),
            modified_at=float(st.st_mtime),
            name=base_name(path) if name is None else name,
            modified_ns=int(st.st_mtime_ns),
        )


@dataclass
class Totals:
    num_entries: int = 0
    sum_size: int = 0

    def add(self, entry: Entry):
        self.num_entries += 1
        self.sum_size += entry.size
