"""Command-line front door for fsnav.

Parses CLI options, opens a navigator on the configured root, applies the
requested path, sort and window, and prints the visible listing.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import TextIO

from .config import load_navigator_config
from .directory_model import SortMode
from .errors import NavigatorError, NotFoundError
from .log import setup_logging
from .navigator import Navigator
from .persistence import MemoryBlobStore

SORT_CHOICES = {mode.name.lower(): mode for mode in SortMode}


def _non_negative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    parsed = _non_negative_int(value)
    if parsed == 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def format_entry(navigator: Navigator, index: int) -> str:
    """Render one visible entry, fetching lazy metadata first."""
    try:
        entry = navigator.ensure_meta(index)
    except NavigatorError:
        entry = navigator.entries()[index]
    if entry.is_dir:
        return f"d {entry.name}/"
    stamp = time.strftime("%Y-%m-%d %H:%M", time.localtime(entry.modified)) if entry.modified else "-"
    return f"f {entry.name}  {entry.size_bytes}  {stamp}"


def print_listing(navigator: Navigator, out: TextIO) -> None:
    """Write the current path, mode line and visible entries to ``out``."""
    out.write(f"{navigator.current_path()}\n")
    direction = "asc" if navigator.is_sort_ascending() else "desc"
    if navigator.is_sort_enabled():
        mode = f"sorted by {navigator.get_sort().name.lower()} {direction}"
    else:
        mode = "unsorted window"
    visible = navigator.entries()
    first = navigator.window_start()
    last = first + len(visible)
    out.write(f"[{mode}; items {first}-{last} of {navigator.total_items()}]\n")
    for index in range(len(visible)):
        out.write(format_entry(navigator, index) + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse a directory tree confined to a root.")
    parser.add_argument("root", nargs="?", default=None, help="Root directory (defaults to the configured root).")
    parser.add_argument("--path", default=None, help="Relative path to open below the root.")
    parser.add_argument("--sort", choices=sorted(SORT_CHOICES), default=None, help="Sort files by name, date or size.")
    parser.add_argument("--descending", action="store_true", help="Reverse the sort direction.")
    parser.add_argument("--max-items", type=_non_negative_int, default=None, help="Sort only directories up to N items (0 = no cap).")
    parser.add_argument("--window-size", type=_positive_int, default=None, help="Number of entries shown per page.")
    parser.add_argument("--window-start", type=_non_negative_int, default=0, help="Index of the first entry shown.")
    parser.add_argument("--state-dir", default=None, help="Directory holding persisted navigator state.")
    parser.add_argument("--no-state", action="store_true", help="Do not read or write persisted state.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...).")
    return parser


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Parse CLI arguments and print one directory listing.

    Returns the process exit code; unrecoverable setup errors raise
    ``SystemExit`` with a message.
    """
    args = build_parser().parse_args(argv)
    out = out if out is not None else sys.stdout
    setup_logging(args.log_level)

    config = load_navigator_config(
        args.root,
        max_items=args.max_items,
        window_size=args.window_size,
        state_dir=Path(args.state_dir) if args.state_dir else None,
    )
    root = Path(config.root_path)
    if not root.is_dir():
        raise SystemExit(f"Path not found: {root}")

    store = MemoryBlobStore() if args.no_state else None
    try:
        navigator = Navigator.from_config(config, store)
    except NotFoundError as exc:
        raise SystemExit(f"Path not found: {exc}") from exc
    except NavigatorError as exc:
        raise SystemExit(f"Cannot open {root}: {exc}") from exc

    try:
        if args.path is not None:
            _open_relative(navigator, args.path)
        if args.sort is not None or args.descending:
            mode = SORT_CHOICES[args.sort] if args.sort is not None else navigator.get_sort()
            navigator.set_sort(mode, not args.descending)
        if args.window_start:
            navigator.set_window(args.window_start, navigator.window_size())
    except NavigatorError as exc:
        sys.stderr.write(f"fsnav: {exc}\n")
        return 1

    print_listing(navigator, out)
    return 0


def _find_visible(navigator: Navigator, name: str) -> int | None:
    """Page through the listing until ``name`` is visible; return its index."""
    size = navigator.window_size()
    start = 0
    while start < max(1, navigator.total_items()):
        navigator.set_window(start, size)
        names = [entry.name for entry in navigator.entries()]
        if name in names:
            return names.index(name)
        start += size
    return None


def _open_relative(navigator: Navigator, relative: str) -> None:
    """Walk from root to ``relative`` one segment at a time through ``enter``."""
    while navigator.can_go_parent():
        navigator.go_parent()
    for segment in [part for part in relative.split("/") if part]:
        index = _find_visible(navigator, segment)
        if index is None:
            raise NotFoundError(f"{segment!r} not found in {navigator.current_path()}")
        navigator.enter(index)


if __name__ == "__main__":
    raise SystemExit(main())
