"""Bounded windows over oversized directories.

When a directory holds more than ``max_items`` children the navigator never
keeps the full listing. Each window change re-opens the directory stream,
skips to the requested offset, and keeps only ``size`` unsorted entries whose
metadata is fetched on first access.
"""

from __future__ import annotations

from itertools import islice

from ..errors import InvalidArgumentError, OutOfMemoryError
from .listing import iter_directory_children
from .state import NavigatorState
from .types import Entry


def _check_window(start: int, size: int) -> None:
    if start < 0:
        raise InvalidArgumentError(f"window start must be >= 0, got {start}")
    if size <= 0:
        raise InvalidArgumentError(f"window size must be > 0, got {size}")


def read_window(directory: str, start: int, size: int) -> list[Entry]:
    """Read up to ``size`` entries beginning at the ``start``-th child.

    Entries carry only the directory-stream type hint and ``needs_stat=True``.
    A ``start`` past the end yields an empty list.
    """
    _check_window(start, size)
    window: list[Entry] = []
    try:
        for name, is_dir_hint in islice(iter_directory_children(directory), start, start + size):
            window.append(Entry(name=name, is_dir=is_dir_hint, needs_stat=True))
    except MemoryError as exc:
        raise OutOfMemoryError(f"out of memory loading window of {directory!r}") from exc
    return window


def load_window(state: NavigatorState, start: int, size: int) -> None:
    """Replace ``state.entries`` with the ``[start, start + size)`` window.

    The previous window is kept when reading fails.
    """
    window = read_window(state.current, start, size)
    state.entries = window
    state.window_start = start
    state.window_size = size


def set_window(state: NavigatorState, start: int, size: int) -> None:
    """Move the visible window.

    Oversized directories reload the window from disk. Fully loaded (sorted)
    directories only record the new view offset.
    """
    _check_window(start, size)
    if state.sort_enabled:
        state.window_start = start
        state.window_size = size
        return
    load_window(state, start, size)


def visible_entries(state: NavigatorState) -> list[Entry]:
    """Return the entries currently in view.

    The list is a borrow: it is invalid after the next refresh, window or sort
    change.
    """
    if state.sort_enabled:
        return state.entries[state.window_start : state.window_start + state.window_size]
    return state.entries


__all__ = [
    "read_window",
    "load_window",
    "set_window",
    "visible_entries",
]
