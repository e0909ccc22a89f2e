"""Dataclasses for decoded locres content."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional


@dataclass(frozen=True, slots=True)
class LocalizedString:
    """A localized text value.

    reference_count is only stored by Optimized+ string tables and is None
    (not zero) everywhere else.
    """
    text: str
    reference_count: Optional[int] = None

    def __str__(self) -> str:
        return self.text


@dataclass(slots=True)
class NamespaceEntry:
    """A single key within a namespace."""
    key: str
    source_text_hash: int                 # uint32, present in every version
    value: LocalizedString
    key_hash: Optional[int] = None        # uint32, Optimized+

    @property
    def source_text_hash_hex(self) -> str:
        return f"0x{self.source_text_hash:08X}"

    @property
    def key_hash_hex(self) -> Optional[str]:
        if self.key_hash is None:
            return None
        return f"0x{self.key_hash:08X}"


@dataclass(slots=True)
class Namespace:
    """Named group of localized entries, keyed by entry key."""
    name: str
    key_hash: Optional[int] = None        # int32, Optimized+
    entries: Mapping[str, NamespaceEntry] = field(default_factory=dict)

    def add(self, entry: NamespaceEntry) -> None:
        """Insert an entry; a later entry with the same key replaces the earlier one.

        Namespaces returned by Localization are read-only and raise TypeError.
        """
        self.entries[entry.key] = entry  # type: ignore[index]

    def get(self, key: str) -> Optional[LocalizedString]:
        entry = self.entries.get(key)
        return entry.value if entry is not None else None

    def items(self) -> Iterator[tuple[str, LocalizedString]]:
        """Iterate (key, value) pairs in decode order."""
        for key, entry in self.entries.items():
            yield key, entry.value

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)
