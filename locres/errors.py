"""Decode failures raised while reading locres data.

Every error derives from LocresError, itself a ValueError, so callers can
either catch the whole family or branch on the specific cause.
"""
from __future__ import annotations


class LocresError(ValueError):
    """Base class for malformed locres data."""


class InvalidVersionError(LocresError):
    """Version byte after the magic signature is not a known version."""

    def __init__(self, version: int):
        self.version = version
        super().__init__(f"Invalid version {version}")


class InvalidLocalizedStringIndexError(LocresError):
    """Entry references a string table slot that does not exist."""

    def __init__(self, index: int, table_size: int):
        self.index = index
        self.table_size = table_size
        super().__init__(
            f"Invalid localized string index {index} (table has {table_size} entries)"
        )


class StringDecodeError(LocresError):
    """Length-prefixed string with a positive length is not valid UTF-8."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f"Failed to parse string at offset {offset}")


class TruncatedDataError(LocresError, EOFError):
    """Source ended before a fixed-width or length-prefixed read completed."""

    def __init__(self, offset: int, expected: int, received: int):
        self.offset = offset
        self.expected = expected
        self.received = received
        super().__init__(
            f"Unexpected end of data at offset {offset}: "
            f"wanted {expected} bytes, got {received}"
        )


class InvalidOffsetError(LocresError):
    """Stored offset cannot be addressed by the underlying stream."""

    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(f"Invalid offset {offset}")
