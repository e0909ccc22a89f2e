"""Export a decoded locres file as JSON."""
from __future__ import annotations

import json

from locres.localization import Localization


def export_json(loc: Localization) -> str:
    """Export all namespaces and entries as a JSON string."""
    namespaces: dict[str, dict] = {}
    for name, entry in loc.iter_entries():
        ns = namespaces.setdefault(name, {})
        ns[entry.key] = {
            "text": entry.value.text,
            "reference_count": entry.value.reference_count,
            "key_hash": entry.key_hash_hex,
            "source_text_hash": entry.source_text_hash_hex,
        }

    data = {
        "version": loc.version.name.lower(),
        "entries_count": loc.entries_count,
        "namespaces": namespaces,
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
