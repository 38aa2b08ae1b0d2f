"""Namespaced key-value blob stores used for navigator preferences.

The navigator treats storage as opaque: open a namespace, get or set a blob
under a key, commit, close. Writes are staged until ``commit``.
"""

from __future__ import annotations

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from platformdirs import user_data_dir

from ..errors import InvalidArgumentError, InvalidStateError, NavigatorIOError, NotFoundError

logger = logging.getLogger(__name__)

APP_NAME = "fsnav"
DEFAULT_STATE_DIR = Path(user_data_dir(APP_NAME, appauthor=False))


def _check_name(kind: str, value: str) -> None:
    if not value or "/" in value or "\\" in value or value in (".", ".."):
        raise InvalidArgumentError(f"invalid {kind}: {value!r}")


class BlobNamespace(ABC):
    """Handle on one namespace; use as a context manager to close it."""

    def __init__(self, namespace: str, writable: bool) -> None:
        self.namespace = namespace
        self.writable = writable
        self._pending: dict[str, bytes] = {}
        self._closed = False

    def __enter__(self) -> BlobNamespace:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise InvalidStateError(f"namespace {self.namespace!r} is closed")

    def get_blob(self, key: str) -> bytes:
        """Return the committed blob for ``key``; raises ``NotFoundError`` when absent."""
        self._check_open()
        _check_name("key", key)
        return self._read(key)

    def set_blob(self, key: str, data: bytes) -> None:
        """Stage ``data`` under ``key`` until the next ``commit``."""
        self._check_open()
        _check_name("key", key)
        if not self.writable:
            raise InvalidStateError(f"namespace {self.namespace!r} is read-only")
        self._pending[key] = bytes(data)

    def commit(self) -> None:
        self._check_open()
        if not self.writable:
            raise InvalidStateError(f"namespace {self.namespace!r} is read-only")
        for key, data in list(self._pending.items()):
            self._write(key, data)
            del self._pending[key]

    def close(self) -> None:
        self._pending.clear()
        self._closed = True

    @abstractmethod
    def _read(self, key: str) -> bytes:
        """Return the committed blob for ``key`` or raise ``NotFoundError``."""

    @abstractmethod
    def _write(self, key: str, data: bytes) -> None:
        """Durably store ``data`` under ``key``."""


class BlobStore(ABC):
    """Factory for namespace handles."""

    @abstractmethod
    def open_namespace(self, namespace: str, writable: bool = False) -> BlobNamespace:
        """Open ``namespace``; read-only opens of a missing namespace raise ``NotFoundError``."""


class _MemoryNamespace(BlobNamespace):
    def __init__(self, namespace: str, writable: bool, committed: dict[str, bytes]) -> None:
        super().__init__(namespace, writable)
        self._committed = committed

    def _read(self, key: str) -> bytes:
        try:
            return self._committed[key]
        except KeyError:
            raise NotFoundError(f"key {key!r} not found in namespace {self.namespace!r}") from None

    def _write(self, key: str, data: bytes) -> None:
        self._committed[key] = data


class MemoryBlobStore(BlobStore):
    """Process-local blob store."""

    def __init__(self) -> None:
        self._namespaces: dict[str, dict[str, bytes]] = {}

    def open_namespace(self, namespace: str, writable: bool = False) -> BlobNamespace:
        _check_name("namespace", namespace)
        if namespace not in self._namespaces:
            if not writable:
                raise NotFoundError(f"namespace {namespace!r} not found")
            self._namespaces[namespace] = {}
        return _MemoryNamespace(namespace, writable, self._namespaces[namespace])


class _DirectoryNamespace(BlobNamespace):
    def __init__(self, namespace: str, writable: bool, directory: Path) -> None:
        super().__init__(namespace, writable)
        self._directory = directory

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.bin"

    def _read(self, key: str) -> bytes:
        path = self._path(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise NotFoundError(f"key {key!r} not found in namespace {self.namespace!r}") from None
        except OSError as exc:
            raise NavigatorIOError(f"cannot read {path}: {exc}") from exc

    def _write(self, key: str, data: bytes) -> None:
        path = self._path(key)
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(dir=self._directory, prefix=f".{key}.", suffix=".tmp", delete=False) as handle:
                tmp_name = handle.name
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error("Writing %s failed: %s", path, exc)
            raise NavigatorIOError(f"cannot write {path}: {exc}") from exc


class DirectoryBlobStore(BlobStore):
    """Blob store keeping one file per key under ``<state_dir>/<namespace>/``."""

    def __init__(self, state_dir: Path | str | None = None) -> None:
        self.state_dir = Path(state_dir) if state_dir is not None else DEFAULT_STATE_DIR

    def open_namespace(self, namespace: str, writable: bool = False) -> BlobNamespace:
        _check_name("namespace", namespace)
        directory = self.state_dir / namespace
        if writable:
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise NavigatorIOError(f"cannot create {directory}: {exc}") from exc
        elif not directory.is_dir():
            raise NotFoundError(f"namespace {namespace!r} not found under {self.state_dir}")
        return _DirectoryNamespace(namespace, writable, directory)


__all__ = [
    "APP_NAME",
    "DEFAULT_STATE_DIR",
    "BlobNamespace",
    "BlobStore",
    "MemoryBlobStore",
    "DirectoryBlobStore",
]
