"""Persistence for navigator preferences: blob codec, blob stores, state I/O."""

from __future__ import annotations

from .blob import BLOB_SIZE, STATE_MAGIC, STATE_VERSION, StateBlob, decode_state_blob, encode_state_blob, state_crc32
from .kv_store import DEFAULT_STATE_DIR, BlobNamespace, BlobStore, DirectoryBlobStore, MemoryBlobStore
from .state_store import STATE_KEY, STATE_NAMESPACE, load_state, store_state

__all__ = [
    "BLOB_SIZE",
    "STATE_MAGIC",
    "STATE_VERSION",
    "StateBlob",
    "decode_state_blob",
    "encode_state_blob",
    "state_crc32",
    "DEFAULT_STATE_DIR",
    "BlobNamespace",
    "BlobStore",
    "DirectoryBlobStore",
    "MemoryBlobStore",
    "STATE_KEY",
    "STATE_NAMESPACE",
    "load_state",
    "store_state",
]
