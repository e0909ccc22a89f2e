"""Export a decoded locres file as CSV."""
from __future__ import annotations

import csv
import io

from locres.localization import Localization


def export_csv(loc: Localization) -> str:
    """Export one row per entry as a CSV string."""
    output = io.StringIO()
    writer = csv.writer(output)

    # Header
    writer.writerow([
        "namespace", "key", "text", "reference_count",
        "key_hash", "source_text_hash",
    ])

    for name, entry in loc.iter_entries():
        writer.writerow([
            name,
            entry.key,
            entry.value.text,
            "" if entry.value.reference_count is None else entry.value.reference_count,
            entry.key_hash_hex or "",
            entry.source_text_hash_hex,
        ])

    return output.getvalue()
