from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict

from .models import Entry


class ConfigError(ValueError):
    """Bad user configuration, reported before any scanning starts."""


class ValueType(Enum):
    SIZE = "size"
    DATE = "date"
    NAME = "name"


VALUE_CHOICES = tuple(v.value for v in ValueType)


def parse_value_type(s: str) -> ValueType:
    text = (s or "").strip().lower()
    for v in ValueType:
        if v.value == text:
            return v
    raise ConfigError(f"unknown value: {s!r} (expected one of: {', '.join(VALUE_CHOICES)})")


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


# <0 when a ranks before b, 0 on tie
_BASE_COMPARE: Dict[ValueType, Callable[[Entry, Entry], int]] = {
    ValueType.SIZE: lambda a, b: _cmp(b.size, a.size),
    # nanoseconds first, the float only matters for entries built without stat
    ValueType.DATE: lambda a, b: _cmp((b.modified_ns, b.modified_at), (a.modified_ns, a.modified_at)),
    ValueType.NAME: lambda a, b: _cmp(a.name, b.name),
}


@dataclass(frozen=True)
class OrderingPolicy:
    """Total order over entries: a base value type, optionally inverted.

    Reverse negates the three-way result, so equal entries stay equal and keep
    their encounter order in either direction.
    """
    value: ValueType = ValueType.SIZE
    reverse: bool = False

    def compare(self, a: Entry, b: Entry) -> int:
        c = _BASE_COMPARE[self.value](a, b)
        return -c if self.reverse else c

    def ranks_before(self, a: Entry, b: Entry) -> bool:
        return self.compare(a, b) < 0

