"""Root-relative path validation and composition.

``set_relative`` is the only writer of ``NavigatorState.relative`` and the
sole guard keeping navigation inside the configured root. Paths are measured
in filesystem-encoded bytes against fixed capacities; anything that would not
fit raises ``SizeExceededError`` instead of being truncated.
"""

from __future__ import annotations

import os

from ..errors import InvalidArgumentError, SizeExceededError
from .state import NavigatorState
from .types import MAX_PATH


def encoded_length(text: str) -> int:
    """Return the byte length of ``text`` in filesystem encoding."""
    return len(os.fsencode(text))


def fits_path_buffer(path: str, capacity: int = MAX_PATH) -> bool:
    """Return whether ``path`` fits a NUL-terminated buffer of ``capacity`` bytes."""
    return encoded_length(path) < capacity


def is_valid_relative(path: str) -> bool:
    """Return whether ``path`` is a safe root-relative location.

    The empty string means the root itself. Otherwise every ``/``-separated
    segment must be non-empty and must not be ``.`` or ``..``.
    """
    if not path:
        return True
    for segment in path.split("/"):
        if segment in ("", ".", ".."):
            return False
    return True


def strip_leading_slashes(path: str) -> str:
    return path.lstrip("/")


def trim_root(root: str) -> str:
    """Drop trailing slashes from ``root`` while keeping a lone ``/``."""
    trimmed = root.rstrip("/")
    return trimmed or ("/" if root.startswith("/") else "")


def join_path(base: str, name: str) -> str:
    """Join one child ``name`` onto an absolute ``base`` directory."""
    if not name:
        return base
    if base.endswith("/"):
        return f"{base}{name}"
    return f"{base}/{name}"


def parent_relative(relative: str) -> str:
    """Return ``relative`` truncated at its last ``/`` (or ``""`` for one segment)."""
    head, sep, _tail = relative.rpartition("/")
    return head if sep else ""


def set_relative(state: NavigatorState, candidate: str | None) -> None:
    """Validate ``candidate`` and make it the current relative path.

    Leading slashes are stripped first. Raises ``InvalidArgumentError`` for
    ``.``/``..``/empty segments and ``SizeExceededError`` when the relative or
    composed absolute path would overflow ``MAX_PATH``. ``state`` is left
    untouched on failure.
    """
    clean = strip_leading_slashes(candidate or "")
    if not is_valid_relative(clean):
        raise InvalidArgumentError(f"invalid relative path: {candidate!r}")
    if not fits_path_buffer(clean):
        raise SizeExceededError(f"relative path too long: {clean!r}")
    current = join_path(state.root, clean)
    if not fits_path_buffer(current):
        raise SizeExceededError(f"absolute path too long: {current!r}")
    state.relative = clean
    state.current = current


__all__ = [
    "encoded_length",
    "fits_path_buffer",
    "is_valid_relative",
    "strip_leading_slashes",
    "trim_root",
    "join_path",
    "parent_relative",
    "set_relative",
]
