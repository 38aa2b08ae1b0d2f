"""Raw directory-stream enumeration shared by full scans and window loads."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from ..errors import NavigatorIOError
from .paths import fits_path_buffer, join_path

logger = logging.getLogger(__name__)


def iter_directory_children(directory: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(name, is_dir_hint)`` for children of ``directory``.

    Order is the raw OS enumeration order. ``.``/``..`` never appear; names
    whose composed path overflows ``MAX_PATH`` are skipped with a warning so
    one bad entry never aborts a listing.
    Raises ``NavigatorIOError`` when the directory cannot be opened or read.
    """
    try:
        with os.scandir(directory) as stream:
            for child in stream:
                name = child.name
                if name in (".", ".."):
                    continue
                if not fits_path_buffer(join_path(directory, name)):
                    logger.warning("Skipping overly long path entry in %s: %r", directory, name)
                    continue
                try:
                    is_dir_hint = child.is_dir()
                except OSError:
                    is_dir_hint = False
                yield name, is_dir_hint
    except OSError as exc:
        logger.error("opendir(%s) failed: %s", directory, exc)
        raise NavigatorIOError(f"cannot read directory {directory!r}: {exc}") from exc


__all__ = ["iter_directory_children"]
