"""Namespace section decoder.

Layout:
  uint32 namespace count, then per namespace:
    [int32 key hash]          Optimized+
    string name
    uint32 entry count, then per entry:
      [uint32 key hash]       Optimized+
      string key
      uint32 source text hash
      int32 string table index (Compact+) | inline string (Legacy)
"""
from __future__ import annotations

from typing import Sequence

from locres.errors import InvalidLocalizedStringIndexError
from locres.format.primitives import BinaryReader
from locres.format.records import LocalizedString, Namespace, NamespaceEntry
from locres.format.version import Version


def read_namespaces(
    reader: BinaryReader,
    strings: Sequence[LocalizedString],
    version: Version,
) -> dict[str, Namespace]:
    """Decode all namespaces. Duplicate names keep the last one read."""
    count = reader.read_u32()
    namespaces: dict[str, Namespace] = {}

    for _ in range(count):
        namespace = _read_namespace(reader, strings, version)
        namespaces[namespace.name] = namespace

    return namespaces


def _read_namespace(
    reader: BinaryReader,
    strings: Sequence[LocalizedString],
    version: Version,
) -> Namespace:
    key_hash = reader.read_i32() if version >= Version.OPTIMIZED else None
    name = reader.read_string()
    namespace = Namespace(name=name, key_hash=key_hash)

    entry_count = reader.read_u32()
    for _ in range(entry_count):
        namespace.add(_read_entry(reader, strings, version))

    return namespace


def _read_entry(
    reader: BinaryReader,
    strings: Sequence[LocalizedString],
    version: Version,
) -> NamespaceEntry:
    key_hash = reader.read_u32() if version >= Version.OPTIMIZED else None
    key = reader.read_string()
    source_text_hash = reader.read_u32()

    if version >= Version.COMPACT:
        value = resolve_string(strings, reader.read_i32())
    else:
        value = LocalizedString(reader.read_string())

    return NamespaceEntry(
        key=key,
        source_text_hash=source_text_hash,
        value=value,
        key_hash=key_hash,
    )


def resolve_string(strings: Sequence[LocalizedString], index: int) -> LocalizedString:
    """Look up a string table slot. Negative indices are never wrapped."""
    if not 0 <= index < len(strings):
        raise InvalidLocalizedStringIndexError(index, len(strings))
    return strings[index]
