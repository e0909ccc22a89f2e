"""Top-level locres decoder and lookup table."""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import BinaryIO, Iterator, Mapping, Optional

from locres.format.namespace import read_namespaces
from locres.format.primitives import BinaryReader
from locres.format.records import LocalizedString, Namespace, NamespaceEntry
from locres.format.string_table import read_string_table
from locres.format.version import Version, detect_version


@dataclass(frozen=True, slots=True)
class Localization:
    """Fully decoded locres file.

    strings is empty for Legacy files. entries_count is the total declared by
    Optimized+ headers; it is informational and never checked against the
    entries actually decoded. namespaces and each namespace's entries are
    read-only views once decoding finishes.
    """
    version: Version
    strings: tuple[LocalizedString, ...] = ()
    namespaces: Mapping[str, Namespace] = field(default_factory=lambda: MappingProxyType({}))
    entries_count: Optional[int] = None

    @classmethod
    def from_reader(cls, stream: BinaryIO) -> Localization:
        """Decode from a seekable binary stream positioned at the start of the data."""
        reader = BinaryReader(stream)

        version = detect_version(reader)
        strings = read_string_table(reader, version)
        entries_count = reader.read_u32() if version >= Version.OPTIMIZED else None
        namespaces = read_namespaces(reader, strings, version)
        for ns in namespaces.values():
            ns.entries = MappingProxyType(ns.entries)

        return cls(
            version=version,
            strings=tuple(strings),
            namespaces=MappingProxyType(namespaces),
            entries_count=entries_count,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Localization:
        return cls.from_reader(io.BytesIO(data))

    @classmethod
    def from_path(cls, path: Path) -> Localization:
        with open(path, "rb") as f:
            return cls.from_reader(f)

    def get(self, namespace: str, key: str) -> Optional[LocalizedString]:
        """Look up a string by namespace name and key."""
        ns = self.namespaces.get(namespace)
        if ns is None:
            return None
        return ns.get(key)

    def iter_entries(self) -> Iterator[tuple[str, NamespaceEntry]]:
        """Yield (namespace name, entry) pairs sorted by namespace, then key."""
        for name in sorted(self.namespaces):
            entries = self.namespaces[name].entries
            for key in sorted(entries):
                yield name, entries[key]

    def search(self, query: str) -> list[tuple[str, NamespaceEntry]]:
        """Find entries whose key or text contains the query (case-insensitive)."""
        query_lower = query.lower()
        return [
            (name, entry) for name, entry in self.iter_entries()
            if query_lower in entry.key.lower() or query_lower in entry.value.text.lower()
        ]

    @property
    def entry_total(self) -> int:
        """Number of entries actually decoded across all namespaces."""
        return sum(len(ns) for ns in self.namespaces.values())
