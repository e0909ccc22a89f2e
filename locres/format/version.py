"""Locres version detection from the optional magic header."""
from __future__ import annotations

from enum import IntEnum

from locres.config import MAGIC, MAGIC_SIZE, UINT8
from locres.errors import InvalidVersionError
from locres.format.primitives import BinaryReader


class Version(IntEnum):
    """Format generations. Each version reads a superset of the previous fields."""
    LEGACY = 0               # no header, inline values
    COMPACT = 1              # out-of-line deduplicated string table
    OPTIMIZED = 2            # + key hashes, ref counts, declared entry count
    OPTIMIZED_CITYHASH = 3   # same layout, CityHash key hashes

    @classmethod
    def from_byte(cls, value: int) -> Version:
        try:
            return cls(value)
        except ValueError:
            raise InvalidVersionError(value) from None


def detect_version(reader: BinaryReader) -> Version:
    """Read the magic header and version byte.

    If the first 16 bytes are not the magic signature they belong to Legacy
    content, so the cursor is moved back to where it started.
    """
    start = reader.tell()
    header = reader.read_bytes(MAGIC_SIZE)

    if header != MAGIC:
        reader.seek(start)
        return Version.LEGACY

    version_byte = UINT8.unpack(reader.read_bytes(UINT8.size))[0]
    return Version.from_byte(version_byte)
