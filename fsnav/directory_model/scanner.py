"""Directory scanning and the sort-or-window decision.

One pass over the directory stream counts every child. While the count stays
within ``max_items`` entries are buffered; as soon as it exceeds the cap the
buffer is dropped and the directory is served through windows instead.
"""

from __future__ import annotations

import logging

from ..errors import NavigatorIOError, OutOfMemoryError
from .listing import iter_directory_children
from .metadata import populate_metadata
from .paths import join_path
from .sorting import sort_entries
from .state import NavigatorState
from .types import Entry
from .window import read_window

logger = logging.getLogger(__name__)


def refresh(state: NavigatorState) -> None:
    """Re-read ``state.current`` and rebuild the entry buffer.

    Afterwards ``state.sort_enabled`` holds exactly when the directory fits
    ``max_items`` (or ``max_items`` is 0). Raises ``NavigatorIOError`` with the
    entries cleared and an empty sortable view when the directory cannot be
    read, and
    ``OutOfMemoryError`` with the previous state intact when buffering fails.
    """
    directory = state.current
    buffered: list[Entry] | None = []
    total = 0
    try:
        for name, is_dir_hint in iter_directory_children(directory):
            total += 1
            if buffered is None:
                continue
            if not state.fits_all(total):
                logger.debug("%s exceeds %d entries; switching to windowed mode", directory, state.max_items)
                buffered = None
                continue
            buffered.append(Entry(name=name, is_dir=is_dir_hint))

        window = None if buffered is not None else read_window(directory, 0, state.window_size)
    except NavigatorIOError:
        state.clear_entries()
        raise
    except MemoryError as exc:
        logger.error("Out of memory while listing %s", directory)
        raise OutOfMemoryError(f"out of memory listing {directory!r}") from exc

    state.total_items = total
    state.window_start = 0
    if buffered is None:
        state.sort_enabled = False
        state.entries = window
        return

    for entry in buffered:
        populate_metadata(entry, join_path(directory, entry.name))
    sort_entries(buffered, state.sort_mode, state.ascending)
    state.entries = buffered
    state.sort_enabled = True


__all__ = ["refresh"]
