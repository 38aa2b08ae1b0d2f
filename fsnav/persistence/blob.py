"""Fixed-layout, CRC-protected encoding of navigator preferences.

Layout (little-endian, 276 bytes)::

    magic:u32 | version:u32 | relative:256 bytes NUL padded |
    sort_mode:u32 | ascending:u8 | reserved:3 | crc32:u32

The CRC is the standard CRC-32 over every byte before the CRC field. The
layout is defined field by field so it stays stable across rebuilds.
"""

from __future__ import annotations

import os
import struct
import zlib
from dataclasses import dataclass

from ..directory_model.types import MAX_PATH, SortMode
from ..errors import CrcMismatchError, SizeExceededError, StateDecodeError, VersionMismatchError

STATE_MAGIC = 0x464E4156
STATE_VERSION = 1

_BODY = struct.Struct(f"<II{MAX_PATH}sIB3x")
_CRC = struct.Struct("<I")
BLOB_SIZE = _BODY.size + _CRC.size


@dataclass(frozen=True)
class StateBlob:
    """Decoded persisted preferences.

    ``sort_mode`` stays a raw integer so out-of-range values survive decoding
    and can be rejected by the caller.
    """

    relative: str = ""
    sort_mode: int = int(SortMode.NAME)
    ascending: bool = True


def state_crc32(body: bytes) -> int:
    return zlib.crc32(body) & 0xFFFFFFFF


def encode_state_blob(blob: StateBlob) -> bytes:
    """Encode ``blob``; raises ``SizeExceededError`` if the path does not fit."""
    relative = os.fsencode(blob.relative)
    if len(relative) >= MAX_PATH:
        raise SizeExceededError(f"relative path too long to persist: {blob.relative!r}")
    body = _BODY.pack(
        STATE_MAGIC,
        STATE_VERSION,
        relative,
        int(blob.sort_mode),
        1 if blob.ascending else 0,
    )
    return body + _CRC.pack(state_crc32(body))


def decode_state_blob(data: bytes) -> StateBlob:
    """Validate and decode a persisted blob.

    Checks run in order: exact length, CRC, magic and version, then path
    termination. The CRC is checked before magic/version so any corrupted byte
    reports ``CrcMismatchError``.
    """
    if len(data) != BLOB_SIZE:
        raise StateDecodeError(f"state blob has {len(data)} bytes, expected {BLOB_SIZE}")

    body = data[: _BODY.size]
    (stored_crc,) = _CRC.unpack_from(data, _BODY.size)
    if state_crc32(body) != stored_crc:
        raise CrcMismatchError("state blob CRC mismatch")

    magic, version, raw_relative, sort_mode, ascending = _BODY.unpack(body)
    if magic != STATE_MAGIC or version != STATE_VERSION:
        raise VersionMismatchError(f"unsupported state blob (magic=0x{magic:08X}, version={version})")

    terminator = raw_relative.find(b"\0")
    if terminator < 0:
        raise StateDecodeError("state blob path is not NUL terminated")
    relative = os.fsdecode(raw_relative[:terminator])
    return StateBlob(relative=relative, sort_mode=sort_mode, ascending=ascending != 0)


__all__ = [
    "STATE_MAGIC",
    "STATE_VERSION",
    "BLOB_SIZE",
    "StateBlob",
    "state_crc32",
    "encode_state_blob",
    "decode_state_blob",
]
