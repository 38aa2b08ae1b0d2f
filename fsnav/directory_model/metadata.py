"""Single-entry stat loading for eager scans and lazy window access."""

from __future__ import annotations

import logging
import os
import stat as stat_module

from .types import Entry

logger = logging.getLogger(__name__)


def populate_metadata(entry: Entry, path: str) -> bool:
    """Fill ``entry`` from ``os.stat(path)`` and clear ``needs_stat``.

    On stat failure the directory hint already carried by ``entry`` (taken
    from the directory stream) is kept and size/modified are zeroed. Returns
    whether ``stat`` succeeded.
    """
    try:
        st = os.stat(path)
    except OSError as exc:
        logger.debug("stat(%s) failed: %s", path, exc)
        entry.size_bytes = 0
        entry.modified = 0
        entry.needs_stat = False
        return False

    entry.is_dir = stat_module.S_ISDIR(st.st_mode)
    entry.size_bytes = 0 if entry.is_dir else int(st.st_size)
    entry.modified = int(st.st_mtime)
    entry.needs_stat = False
    return True


__all__ = ["populate_metadata"]
