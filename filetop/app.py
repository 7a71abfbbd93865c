from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

from . import __version__
from .config import DEFAULT_VALUE, ListerConfig, build_config
from .drives import drive_roots
from .logging_utils import setup_logging
from .models import Entry
from .ordering import VALUE_CHOICES, ConfigError, ValueType
from .scanner import Traverser
from .selector import DEFAULT_COUNT, TopKSelector
from .utils import format_bytes, format_count, format_timestamp

APP_NAME = "filetop"

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="List the top files under the given paths by size, date or name.",
    )
    p.add_argument("paths", nargs="*", help="files or directories to scan (default: .)")
    p.add_argument("-n", "--count", type=int, default=DEFAULT_COUNT,
                   help=f"file list size (default: {DEFAULT_COUNT})")
    p.add_argument("-r", "--reverse", action="store_true", help="sort in reverse order")
    p.add_argument("-f", "--ignore-hidden", action="store_true",
                   help="ignore hidden files and directories")
    # без choices: неизвестное значение проверяется в build_config
    p.add_argument("-V", "--value", default=DEFAULT_VALUE,
                   help=f"value type ({', '.join(VALUE_CHOICES)}; default: {DEFAULT_VALUE})")
    p.add_argument("-a", "--all-drives", action="store_true",
                   help="scan every mounted drive in addition to the given paths")
    p.add_argument("-v", "--verbose", action="count", default=0,
                   help="more diagnostics on stderr (-vv for debug)")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def format_entry(entry: Entry, value: ValueType) -> str:
    if value is ValueType.SIZE:
        return f"{format_bytes(entry.size):>10} {entry.path}"
    if value is ValueType.DATE:
        return f"{format_timestamp(entry.modified_at)}  {entry.path}"
    return f"{entry.name:>20} {entry.path}"


def format_summary(num_entries: int, sum_size: int) -> str:
    return f"{format_count(num_entries)} files ({format_bytes(sum_size)})"


def collect_roots(cfg: ListerConfig) -> List[str]:
    roots = list(cfg.paths)
    if cfg.all_drives:
        roots.extend(drive_roots())
    return [os.path.abspath(r) for r in roots]


def render(selector: TopKSelector, value: ValueType, out: TextIO):
    for entry in selector.results():
        print(format_entry(entry, value), file=out)
    print(format_summary(*selector.totals_snapshot()), file=out)


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)

    try:
        cfg = build_config(ns)
    except ConfigError as e:
        print(f"{APP_NAME}: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2

    setup_logging(cfg.verbose)

    selector = TopKSelector(cfg.policy, cfg.count)
    traverser = Traverser(selector, ignore_hidden=cfg.ignore_hidden)
    roots = collect_roots(cfg)
    log.info("roots: %s", ", ".join(roots))
    traverser.walk_all(roots)

    render(selector, cfg.value, out or sys.stdout)
    return 0


def run():
    sys.exit(main())
