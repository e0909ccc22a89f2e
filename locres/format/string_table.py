"""Out-of-line string table (Compact and later).

Layout at the current position: uint64 absolute offset of the table.
Layout at that offset: int32 count, then count entries of
  (length-prefixed string [+ int32 reference count if Optimized+]).

Namespace data continues right after the offset field, so the cursor is
put back there once the table has been read.
"""
from __future__ import annotations

from locres.format.primitives import BinaryReader
from locres.format.records import LocalizedString
from locres.format.version import Version


def read_string_table(reader: BinaryReader, version: Version) -> list[LocalizedString]:
    """Decode the string table, or return an empty list for Legacy files."""
    if version < Version.COMPACT:
        return []

    table_offset = reader.read_u64()
    resume_at = reader.tell()

    reader.seek(table_offset)
    try:
        return _read_entries(reader, version)
    finally:
        reader.seek(resume_at)


def _read_entries(reader: BinaryReader, version: Version) -> list[LocalizedString]:
    count = reader.read_i32()
    has_ref_counts = version >= Version.OPTIMIZED

    strings = []
    for _ in range(count):
        text = reader.read_string()
        ref_count = reader.read_i32() if has_ref_counts else None
        strings.append(LocalizedString(text, ref_count))

    return strings
