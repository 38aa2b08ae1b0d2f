"""Domain model for one navigable directory view.

This package contains the non-UI navigator primitives:
- entry datatypes, sort modes and the path buffer bound
- root-relative path validation and composition
- single-entry metadata loading
- directories-first sorting
- full scans and bounded windows over oversized directories
"""

from __future__ import annotations

from .types import MAX_PATH, Entry, SortMode
from .state import DEFAULT_MAX_ITEMS, DEFAULT_WINDOW_SIZE, NavigatorState
from .paths import (
    encoded_length,
    fits_path_buffer,
    is_valid_relative,
    join_path,
    parent_relative,
    set_relative,
    strip_leading_slashes,
    trim_root,
)
from .metadata import populate_metadata
from .sorting import entry_sort_key, sort_entries
from .listing import iter_directory_children
from .window import load_window, read_window, set_window, visible_entries
from .scanner import refresh

__all__ = [
    "MAX_PATH",
    "Entry",
    "SortMode",
    "DEFAULT_MAX_ITEMS",
    "DEFAULT_WINDOW_SIZE",
    "NavigatorState",
    "encoded_length",
    "fits_path_buffer",
    "is_valid_relative",
    "join_path",
    "parent_relative",
    "set_relative",
    "strip_leading_slashes",
    "trim_root",
    "populate_metadata",
    "entry_sort_key",
    "sort_entries",
    "iter_directory_children",
    "load_window",
    "read_window",
    "set_window",
    "visible_entries",
    "refresh",
]
