"""Little-endian primitive reads over a seekable binary stream.

Length-prefixed strings (FString serialization):
  int32 length L, then
    L > 0:  L bytes of UTF-8 (strict)
    L < 0:  -2 * L bytes, decoded leniently (invalid sequences replaced)
    L == 0: empty string
  Trailing NUL characters are stripped from the result in every case.
"""
from __future__ import annotations

from typing import BinaryIO

from locres.config import INT32, INT64, UINT32, UINT64
from locres.errors import InvalidOffsetError, StringDecodeError, TruncatedDataError


class BinaryReader:
    """Sequential cursor over a readable, seekable binary stream."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def tell(self) -> int:
        return self.stream.tell()

    def seek(self, offset: int) -> None:
        """Move the cursor to an absolute byte offset."""
        try:
            self.stream.seek(offset)
        except OverflowError:
            raise InvalidOffsetError(offset) from None

    def read_bytes(self, size: int) -> bytes:
        """Read exactly `size` bytes or raise TruncatedDataError."""
        offset = self.stream.tell()
        data = self.stream.read(size)
        if len(data) != size:
            raise TruncatedDataError(offset, size, len(data))
        return data

    def read_i32(self) -> int:
        return INT32.unpack(self.read_bytes(INT32.size))[0]

    def read_u32(self) -> int:
        return UINT32.unpack(self.read_bytes(UINT32.size))[0]

    def read_i64(self) -> int:
        return INT64.unpack(self.read_bytes(INT64.size))[0]

    def read_u64(self) -> int:
        return UINT64.unpack(self.read_bytes(UINT64.size))[0]

    def read_string(self) -> str:
        """Read a length-prefixed string (see module docstring)."""
        length = self.read_i32()

        if length > 0:
            offset = self.stream.tell()
            raw = self.read_bytes(length)
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise StringDecodeError(offset) from exc
        elif length < 0:
            raw = self.read_bytes(length * -2)
            text = raw.decode("utf-8", errors="replace")
        else:
            text = ""

        return text.rstrip("\x00")
