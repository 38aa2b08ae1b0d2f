"""Mutable navigator state shared by scanner, window manager and persistence."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import Entry, SortMode

DEFAULT_MAX_ITEMS = 512
DEFAULT_WINDOW_SIZE = 32


@dataclass
class NavigatorState:
    """Everything one navigator instance knows about its current directory.

    ``root`` is fixed after init. ``current`` is always derived from ``root``
    and ``relative`` through ``paths.set_relative``; never assign it directly.
    """

    root: str = "/"
    relative: str = ""
    current: str = "/"
    entries: list[Entry] = field(default_factory=list)
    max_items: int = DEFAULT_MAX_ITEMS
    total_items: int = 0
    window_start: int = 0
    window_size: int = DEFAULT_WINDOW_SIZE
    sort_mode: SortMode = SortMode.NAME
    ascending: bool = True
    sort_enabled: bool = True

    def fits_all(self, total: int) -> bool:
        """Return whether ``total`` children can be fully loaded and sorted."""
        return self.max_items == 0 or total <= self.max_items

    def clear_entries(self) -> None:
        """Drop the listing and reset counters to an empty, sortable view."""
        self.entries = []
        self.total_items = 0
        self.window_start = 0
        self.sort_enabled = self.fits_all(0)


__all__ = [
    "DEFAULT_MAX_ITEMS",
    "DEFAULT_WINDOW_SIZE",
    "NavigatorState",
]
