"""Domain datatypes for navigator directory entries and sort settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MAX_PATH = 256


class SortMode(IntEnum):
    """Sort key applied to files; directories always sort by name."""

    NAME = 0
    DATE = 1
    SIZE = 2


@dataclass
class Entry:
    """One directory child.

    Mutated in place when lazy metadata is fetched; discarded on the next
    refresh or window reload.
    """

    name: str
    is_dir: bool = False
    needs_stat: bool = True
    size_bytes: int = 0
    modified: int = 0


__all__ = [
    "MAX_PATH",
    "SortMode",
    "Entry",
]
