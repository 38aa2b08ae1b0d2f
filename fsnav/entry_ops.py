"""Directory-level entry operations: create folder, rename, recursive delete.

These act on absolute paths composed by the navigator. File *contents* are
not handled here.
"""

from __future__ import annotations

import logging
import os
import stat as stat_module

from .directory_model.paths import fits_path_buffer, join_path
from .errors import InvalidArgumentError, InvalidStateError, NavigatorIOError, SizeExceededError

logger = logging.getLogger(__name__)

FORBIDDEN_NAME_CHARS = frozenset('\\/:*?"<>|')
_TRIM_CHARS = " \t\r\n"


def normalize_entry_name(name: str) -> str:
    """Strip surrounding spaces, tabs and line breaks from a user-typed name."""
    return name.strip(_TRIM_CHARS)


def is_valid_entry_name(name: str) -> bool:
    """Return whether ``name`` is usable as a single child name on FAT-like volumes."""
    if not name or name in (".", ".."):
        return False
    return not any(char in FORBIDDEN_NAME_CHARS for char in name)


def require_entry_name(name: str) -> str:
    """Normalize ``name`` and raise ``InvalidArgumentError`` if it is unusable."""
    normalized = normalize_entry_name(name)
    if not is_valid_entry_name(normalized):
        raise InvalidArgumentError(f"invalid entry name: {name!r}")
    return normalized


def create_folder(path: str) -> None:
    """Create one directory; an existing target raises ``InvalidStateError``."""
    try:
        os.mkdir(path, 0o775)
    except FileExistsError as exc:
        raise InvalidStateError(f"{path!r} already exists") from exc
    except OSError as exc:
        logger.error("mkdir(%s) failed: %s", path, exc)
        raise NavigatorIOError(f"cannot create {path!r}: {exc}") from exc


def rename_path(old_path: str, new_path: str) -> None:
    """Rename ``old_path`` to ``new_path`` without replacing an existing target."""
    if os.path.lexists(new_path):
        raise InvalidStateError(f"{new_path!r} already exists")
    try:
        os.rename(old_path, new_path)
    except FileExistsError as exc:
        raise InvalidStateError(f"{new_path!r} already exists") from exc
    except OSError as exc:
        logger.error("rename(%s -> %s) failed: %s", old_path, new_path, exc)
        raise NavigatorIOError(f"cannot rename {old_path!r}: {exc}") from exc


def delete_path(path: str) -> None:
    """Delete a file, or a directory and everything below it.

    A path that is already gone counts as deleted. Children whose composed
    path would overflow ``MAX_PATH`` abort with ``SizeExceededError``.
    """
    try:
        st = os.lstat(path)
    except FileNotFoundError:
        return
    except OSError as exc:
        logger.error("stat(%s) failed: %s", path, exc)
        raise NavigatorIOError(f"cannot stat {path!r}: {exc}") from exc

    if not stat_module.S_ISDIR(st.st_mode):
        try:
            os.remove(path)
        except OSError as exc:
            logger.error("remove(%s) failed: %s", path, exc)
            raise NavigatorIOError(f"cannot remove {path!r}: {exc}") from exc
        return

    try:
        with os.scandir(path) as stream:
            names = [child.name for child in stream]
    except OSError as exc:
        logger.error("opendir(%s) failed: %s", path, exc)
        raise NavigatorIOError(f"cannot read {path!r}: {exc}") from exc

    for name in names:
        child = join_path(path, name)
        if not fits_path_buffer(child):
            raise SizeExceededError(f"path too long: {child!r}")
        delete_path(child)

    try:
        os.rmdir(path)
    except OSError as exc:
        logger.error("rmdir(%s) failed: %s", path, exc)
        raise NavigatorIOError(f"cannot remove directory {path!r}: {exc}") from exc


__all__ = [
    "FORBIDDEN_NAME_CHARS",
    "normalize_entry_name",
    "is_valid_entry_name",
    "require_entry_name",
    "create_folder",
    "rename_path",
    "delete_path",
]
