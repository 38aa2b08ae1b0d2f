"""Directories-first ordering for fully loaded directory listings."""

from __future__ import annotations

from collections.abc import Callable

from .types import Entry, SortMode


def _name_key(entry: Entry) -> str:
    return entry.name.lower()


def entry_sort_key(mode: SortMode) -> Callable[[Entry], tuple]:
    """Return the within-group key for files under ``mode``.

    Date and size ties fall back to case-insensitive name.
    """
    if mode == SortMode.DATE:
        return lambda entry: (entry.modified, _name_key(entry))
    if mode == SortMode.SIZE:
        return lambda entry: (entry.size_bytes, _name_key(entry))
    return lambda entry: (_name_key(entry),)


def sort_entries(entries: list[Entry] | None, mode: SortMode, ascending: bool) -> None:
    """Sort ``entries`` in place.

    Directories always precede files and always order by name; files order by
    ``mode``. Descending flips the order inside each group only. The sort is
    stable, so re-sorting an already sorted list leaves it unchanged.
    """
    if entries is None or len(entries) < 2:
        return

    reverse = not ascending
    directories = sorted(
        (entry for entry in entries if entry.is_dir),
        key=entry_sort_key(SortMode.NAME),
        reverse=reverse,
    )
    files = sorted(
        (entry for entry in entries if not entry.is_dir),
        key=entry_sort_key(mode),
        reverse=reverse,
    )
    entries[:] = directories + files


__all__ = [
    "entry_sort_key",
    "sort_entries",
]
