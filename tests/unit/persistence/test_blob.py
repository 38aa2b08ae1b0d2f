"""Tests for the fixed-layout persisted state blob."""

from __future__ import annotations

import struct
import unittest
import zlib

from fsnav.directory_model import MAX_PATH, SortMode
from fsnav.errors import CrcMismatchError, SizeExceededError, StateDecodeError, VersionMismatchError
from fsnav.persistence import (
    BLOB_SIZE,
    STATE_MAGIC,
    STATE_VERSION,
    StateBlob,
    decode_state_blob,
    encode_state_blob,
)


def _with_crc(body: bytes) -> bytes:
    return body + struct.pack("<I", zlib.crc32(body) & 0xFFFFFFFF)


class StateBlobLayoutTests(unittest.TestCase):
    def test_layout_is_explicit_little_endian(self) -> None:
        data = encode_state_blob(StateBlob(relative="music/live", sort_mode=int(SortMode.SIZE), ascending=False))

        self.assertEqual(BLOB_SIZE, 4 + 4 + MAX_PATH + 4 + 1 + 3 + 4)
        self.assertEqual(len(data), BLOB_SIZE)
        self.assertEqual(struct.unpack_from("<II", data, 0), (STATE_MAGIC, STATE_VERSION))
        self.assertEqual(data[8:18], b"music/live")
        self.assertEqual(set(data[18 : 8 + MAX_PATH]), {0})
        self.assertEqual(struct.unpack_from("<I", data, 8 + MAX_PATH), (2,))
        self.assertEqual(data[12 + MAX_PATH], 0)
        self.assertEqual(data[13 + MAX_PATH : 16 + MAX_PATH], b"\0\0\0")
        self.assertEqual(struct.unpack_from("<I", data, 16 + MAX_PATH), (zlib.crc32(data[:-4]),))

    def test_round_trip_preserves_fields(self) -> None:
        blob = StateBlob(relative="a/b", sort_mode=int(SortMode.DATE), ascending=True)
        self.assertEqual(decode_state_blob(encode_state_blob(blob)), blob)

    def test_overlong_path_cannot_be_encoded(self) -> None:
        with self.assertRaises(SizeExceededError):
            encode_state_blob(StateBlob(relative="x" * MAX_PATH))


class StateBlobValidationTests(unittest.TestCase):
    def test_wrong_length_is_a_decode_error(self) -> None:
        data = encode_state_blob(StateBlob(relative="a"))
        for candidate in (data[:-1], data + b"\0", b""):
            with self.subTest(length=len(candidate)):
                with self.assertRaises(StateDecodeError):
                    decode_state_blob(candidate)

    def test_any_flipped_byte_reports_crc_mismatch(self) -> None:
        data = encode_state_blob(StateBlob(relative="docs", sort_mode=1, ascending=False))
        for offset in range(len(data)):
            corrupted = bytearray(data)
            corrupted[offset] ^= 0xFF
            with self.subTest(offset=offset):
                with self.assertRaises(CrcMismatchError):
                    decode_state_blob(bytes(corrupted))

    def test_valid_crc_with_foreign_version_is_rejected(self) -> None:
        body = struct.pack(f"<II{MAX_PATH}sIB3x", STATE_MAGIC, STATE_VERSION + 1, b"docs", 0, 1)
        with self.assertRaises(VersionMismatchError):
            decode_state_blob(_with_crc(body))

        body = struct.pack(f"<II{MAX_PATH}sIB3x", 0xDEADBEEF, STATE_VERSION, b"docs", 0, 1)
        with self.assertRaises(VersionMismatchError):
            decode_state_blob(_with_crc(body))

    def test_unterminated_path_is_rejected(self) -> None:
        body = struct.pack(f"<II{MAX_PATH}sIB3x", STATE_MAGIC, STATE_VERSION, b"p" * MAX_PATH, 0, 1)
        with self.assertRaises(StateDecodeError):
            decode_state_blob(_with_crc(body))

    def test_out_of_range_sort_mode_survives_decoding(self) -> None:
        body = struct.pack(f"<II{MAX_PATH}sIB3x", STATE_MAGIC, STATE_VERSION, b"", 7, 1)
        self.assertEqual(decode_state_blob(_with_crc(body)).sort_mode, 7)


if __name__ == "__main__":
    unittest.main()
