"""Run configuration and its validation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .ordering import ConfigError, OrderingPolicy, ValueType, parse_value_type
from .selector import DEFAULT_COUNT

DEFAULT_VALUE = "size"


@dataclass
class ListerConfig:
    count: int = DEFAULT_COUNT
    reverse: bool = False
    ignore_hidden: bool = False
    value: ValueType = ValueType.SIZE
    paths: List[str] = field(default_factory=list)
    all_drives: bool = False
    verbose: int = 0

    @property
    def policy(self) -> OrderingPolicy:
        return OrderingPolicy(self.value, self.reverse)


def build_config(ns) -> ListerConfig:
    """Validate parsed CLI arguments. Raises ConfigError before any scanning."""
    value = parse_value_type(getattr(ns, "value", DEFAULT_VALUE))

    count = getattr(ns, "count", DEFAULT_COUNT)
    if count < 0:
        raise ConfigError(f"count must be >= 0, got {count}")

    all_drives = bool(getattr(ns, "all_drives", False))
    paths = list(getattr(ns, "paths", None) or [])
    if not paths and not all_drives:
        paths = ["."]

    return ListerConfig(
        count=count,
        reverse=bool(getattr(ns, "reverse", False)),
        ignore_hidden=bool(getattr(ns, "ignore_hidden", False)),
        value=value,
        paths=paths,
        all_drives=all_drives,
        verbose=int(getattr(ns, "verbose", 0) or 0),
    )
