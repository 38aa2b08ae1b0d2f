"""Navigator facade: the public surface consumed by a browser UI.

A ``Navigator`` is confined to one root directory. It keeps one directory
view loaded at a time, either fully sorted (small directories) or as an
unsorted window (directories above ``max_items``), and persists the current
relative path plus sort settings after every state change.

The navigator is synchronous and not reentrant. Lists returned by
``entries()`` are borrows that become stale after the next refresh, window
change, sort change, entry operation or ``deinit``.
"""

from __future__ import annotations

import logging
import os

from . import entry_ops
from .config import NavigatorConfig
from .directory_model import (
    DEFAULT_MAX_ITEMS,
    DEFAULT_WINDOW_SIZE,
    MAX_PATH,
    Entry,
    NavigatorState,
    SortMode,
    fits_path_buffer,
    join_path,
    parent_relative,
    populate_metadata,
    refresh,
    set_relative,
    set_window,
    sort_entries,
    trim_root,
    visible_entries,
)
from .errors import (
    InvalidArgumentError,
    InvalidStateError,
    NavigatorError,
    NavigatorIOError,
    NotFoundError,
    SizeExceededError,
)
from .persistence import BlobStore, DirectoryBlobStore, MemoryBlobStore, load_state, store_state

logger = logging.getLogger(__name__)


class Navigator:
    """Sorted/windowed directory browser confined to a root."""

    def __init__(self, store: BlobStore | None = None) -> None:
        self.store: BlobStore = store if store is not None else MemoryBlobStore()
        self.state = NavigatorState()
        self.state_load_error: NavigatorError | None = None
        self._initialized = False

    @classmethod
    def from_config(cls, config: NavigatorConfig, store: BlobStore | None = None) -> Navigator:
        """Build and initialize a navigator from ``config``.

        Without an explicit ``store`` preferences live in a
        ``DirectoryBlobStore`` under ``config.state_dir``.
        """
        navigator = cls(store if store is not None else DirectoryBlobStore(config.state_dir))
        navigator.init(config.root_path, config.max_items, window_size=config.window_size)
        return navigator

    # lifecycle

    def init(
        self,
        root_path: str,
        max_items: int = DEFAULT_MAX_ITEMS,
        *,
        window_size: int = DEFAULT_WINDOW_SIZE,
    ) -> None:
        """Confine the navigator to ``root_path`` and load the first listing.

        Persisted preferences are restored best effort: any failure is logged,
        kept in ``state_load_error``, and the navigator starts at root with
        default sorting. Raises ``InvalidArgumentError`` for a bad config,
        ``NotFoundError`` when the root is not a directory, and any error from
        the initial refresh.
        """
        root_text = os.fspath(root_path) if root_path is not None else ""
        if not root_text or not fits_path_buffer(root_text):
            raise InvalidArgumentError(f"invalid root path: {root_path!r}")
        if max_items < 0:
            raise InvalidArgumentError(f"max_items must be >= 0, got {max_items}")
        if window_size <= 0:
            raise InvalidArgumentError(f"window_size must be > 0, got {window_size}")
        root = trim_root(root_text)
        if not root.startswith("/"):
            raise InvalidArgumentError(f"root path must be absolute: {root_path!r}")

        state = NavigatorState(root=root, current=root, max_items=max_items, window_size=window_size)
        set_relative(state, "")
        if not os.path.isdir(state.current):
            logger.error('Root path "%s" not accessible', state.current)
            raise NotFoundError(f"root path {state.current!r} is not an accessible directory")

        self.state = state
        self.state_load_error = None
        self._initialized = True
        try:
            load_state(state, self.store)
        except NavigatorError as exc:
            logger.warning("Using default navigator state (%s: %s)", type(exc).__name__, exc)
            self.state_load_error = exc

        try:
            refresh(state)
        except NavigatorError as exc:
            logger.error("Initial refresh failed (%s)", exc)
            raise

    def deinit(self) -> None:
        """Drop the entry buffer; the navigator must be re-initialized to be used."""
        self.state.entries = []
        self.state.total_items = 0
        self._initialized = False

    def _require_init(self) -> NavigatorState:
        if not self._initialized:
            raise InvalidStateError("navigator is not initialized")
        return self.state

    # views

    def refresh(self) -> None:
        refresh(self._require_init())

    def entries(self) -> list[Entry]:
        """Return the visible entries (borrowed until the next mutating call)."""
        if not self._initialized:
            return []
        return visible_entries(self.state)

    def current_path(self) -> str:
        return self.state.current

    def relative_path(self) -> str:
        return self.state.relative

    def can_go_parent(self) -> bool:
        return self._initialized and self.state.relative != ""

    def get_sort(self) -> SortMode:
        return self.state.sort_mode

    def is_sort_ascending(self) -> bool:
        return self.state.ascending

    def is_sort_enabled(self) -> bool:
        return self.state.sort_enabled

    def total_items(self) -> int:
        return self.state.total_items

    def window_start(self) -> int:
        return self.state.window_start

    def window_size(self) -> int:
        return self.state.window_size

    def _visible_entry(self, index: int) -> Entry:
        visible = self.entries()
        if not 0 <= index < len(visible):
            raise InvalidArgumentError(f"index {index} outside visible entries (0..{len(visible) - 1})")
        return visible[index]

    def ensure_meta(self, index: int) -> Entry:
        """Stat the visible entry at ``index`` if it has not been stat-ed yet.

        Raises ``NavigatorIOError`` when stat fails; the entry keeps its
        directory-stream type hint and is not retried.
        """
        state = self._require_init()
        entry = self._visible_entry(index)
        if entry.needs_stat and not populate_metadata(entry, join_path(state.current, entry.name)):
            raise NavigatorIOError(f"cannot stat {entry.name!r} in {state.current!r}")
        return entry

    def compose_path(self, name: str, capacity: int = MAX_PATH) -> str:
        """Return the absolute path of child ``name`` in the current directory.

        ``capacity`` is the size of the caller's path buffer, terminator
        included.
        """
        state = self._require_init()
        if not name or "/" in name or name in (".", ".."):
            raise InvalidArgumentError(f"invalid entry name: {name!r}")
        path = join_path(state.current, name)
        if not fits_path_buffer(path, capacity):
            raise SizeExceededError(f"path {path!r} does not fit {capacity} bytes")
        return path

    # navigation

    def _persist_after_navigation(self) -> None:
        try:
            store_state(self.state, self.store)
        except NavigatorError as exc:
            logger.warning("Could not persist navigator state (%s)", exc)

    def _navigate(self, relative: str) -> None:
        state = self.state
        previous = state.relative
        set_relative(state, relative)
        try:
            refresh(state)
        except NavigatorError:
            set_relative(state, previous)
            raise
        self._persist_after_navigation()

    def enter(self, index: int) -> None:
        """Descend into the visible directory entry at ``index``."""
        state = self._require_init()
        entry = self._visible_entry(index)
        if entry.needs_stat:
            populate_metadata(entry, join_path(state.current, entry.name))
        if not entry.is_dir:
            raise InvalidStateError(f"{entry.name!r} is not a directory")
        next_relative = f"{state.relative}/{entry.name}" if state.relative else entry.name
        self._navigate(next_relative)

    def go_parent(self) -> None:
        self._require_init()
        if not self.can_go_parent():
            raise InvalidStateError("already at root")
        self._navigate(parent_relative(self.state.relative))

    def set_sort(self, mode: SortMode | int, ascending: bool) -> None:
        """Change sort settings, re-sort a fully loaded listing, and persist.

        Windowed listings stay in enumeration order. Store failures propagate.
        """
        state = self._require_init()
        try:
            sort_mode = SortMode(mode)
        except ValueError as exc:
            raise InvalidArgumentError(f"invalid sort mode: {mode!r}") from exc
        state.sort_mode = sort_mode
        state.ascending = bool(ascending)
        if state.sort_enabled:
            sort_entries(state.entries, state.sort_mode, state.ascending)
        store_state(state, self.store)

    def set_window(self, start: int, size: int) -> None:
        set_window(self._require_init(), start, size)

    # entry operations

    def create_folder(self, name: str) -> str:
        """Create child directory ``name`` and refresh; returns its path."""
        path = self.compose_path(entry_ops.require_entry_name(name))
        entry_ops.create_folder(path)
        self.refresh()
        return path

    def rename(self, index: int, new_name: str) -> str:
        """Rename the visible entry at ``index`` and refresh; returns the new path."""
        self._require_init()
        entry = self._visible_entry(index)
        target = entry_ops.require_entry_name(new_name)
        new_path = self.compose_path(target)
        if target == entry.name:
            return new_path
        entry_ops.rename_path(self.compose_path(entry.name), new_path)
        self.refresh()
        return new_path

    def delete(self, index: int) -> None:
        """Delete the visible entry at ``index`` (recursively for directories) and refresh."""
        self._require_init()
        entry = self._visible_entry(index)
        entry_ops.delete_path(self.compose_path(entry.name))
        self.refresh()


__all__ = ["Navigator"]
