"""Exception taxonomy shared by the navigator, its persistence and entry ops.

Every failure the navigator reports derives from ``NavigatorError`` so callers
can catch one base class and still branch on the concrete condition.
"""

from __future__ import annotations


class NavigatorError(Exception):
    """Base class for navigator failures."""


class InvalidArgumentError(NavigatorError):
    """Bad caller input: out-of-range index, invalid mode, zero window size."""


class InvalidStateError(NavigatorError):
    """Operation is not legal in the current state (go-parent at root, enter on a file)."""


class NotFoundError(NavigatorError):
    """Root, restored path, or persisted key is missing."""


class NavigatorIOError(NavigatorError):
    """Open/read/stat failure on the mounted filesystem or the blob store."""


class SizeExceededError(NavigatorError):
    """A composed path or name would overflow its fixed-size buffer."""


class OutOfMemoryError(NavigatorError):
    """Entry buffer growth failed."""


class StateDecodeError(NavigatorError):
    """Persisted state blob failed validation."""


class VersionMismatchError(StateDecodeError):
    """Blob magic number or version does not match this build."""


class CrcMismatchError(StateDecodeError):
    """Blob CRC32 does not match its contents."""


__all__ = [
    "NavigatorError",
    "InvalidArgumentError",
    "InvalidStateError",
    "NotFoundError",
    "NavigatorIOError",
    "SizeExceededError",
    "OutOfMemoryError",
    "StateDecodeError",
    "VersionMismatchError",
    "CrcMismatchError",
]
