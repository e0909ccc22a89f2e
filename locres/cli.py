"""Click CLI for inspecting locres localization files."""
from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Optional

import click

from locres.errors import LocresError
from locres.localization import Localization

_LOCRES_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


def _load(path: Path) -> Localization:
    """Decode a file, turning decode failures into a clean CLI error."""
    try:
        return Localization.from_path(path)
    except LocresError as exc:
        raise click.ClickException(f"{path.name}: {exc}") from exc


@click.group()
@click.version_option(package_name="locres")
def cli():
    """locres - Localization resource inspection tool.

    Decode .locres files of every format version and look up,
    search, or export their localized strings.
    """


@cli.command()
@click.argument("path", type=_LOCRES_PATH)
def info(path: Path):
    """Show version, table sizes and namespaces of a file."""
    click.echo(f"File: {path} ({path.stat().st_size / 1024:.1f} KB)")

    t0 = time.perf_counter()
    loc = _load(path)
    elapsed = time.perf_counter() - t0

    click.echo(f"Decoded in {elapsed:.3f}s\n")
    click.echo(f"  Version:        {loc.version.name} ({int(loc.version)})")
    click.echo(f"  String table:   {len(loc.strings):,} strings")
    declared = "(not stored)" if loc.entries_count is None else f"{loc.entries_count:,}"
    click.echo(f"  Declared total: {declared}")
    click.echo(f"  Decoded total:  {loc.entry_total:,} entries")
    click.echo(f"  Namespaces:     {len(loc.namespaces):,}")

    if not loc.namespaces:
        return

    click.echo(f"\n{'Namespace':<40}  {'Entries':>8}")
    click.echo("-" * 50)
    for name in sorted(loc.namespaces):
        display = name or "(empty)"
        click.echo(f"{display:<40}  {len(loc.namespaces[name]):>8,}")


@cli.command()
@click.argument("path", type=_LOCRES_PATH)
@click.argument("namespace")
@click.argument("key")
def get(path: Path, namespace: str, key: str):
    """Print the localized string for NAMESPACE and KEY."""
    loc = _load(path)

    value = loc.get(namespace, key)
    if value is None:
        click.echo(f"No entry '{key}' in namespace '{namespace}'.", err=True)
        sys.exit(1)

    click.echo(value.text)


@cli.command()
@click.argument("path", type=_LOCRES_PATH)
@click.argument("query")
@click.option("--namespace", "-n", default=None, help="Only search this namespace")
def search(path: Path, query: str, namespace: Optional[str]):
    """Search keys and localized text (case-insensitive)."""
    loc = _load(path)

    results = loc.search(query)
    if namespace is not None:
        results = [(name, entry) for name, entry in results if name == namespace]

    if not results:
        click.echo(f"No entries found matching '{query}'.")
        return

    click.echo(f"Found {len(results)} entries:\n")
    for name, entry in results:
        text = entry.value.text
        display = text[:100] + "..." if len(text) > 100 else text
        click.echo(f"  {name}/{entry.key}: {display}")


@cli.command()
@click.argument("path", type=_LOCRES_PATH)
@click.option("--format", "fmt", type=click.Choice(["csv", "json"]), required=True)
@click.option("--output", "-o", type=click.Path(), help="Output file path")
def export(path: Path, fmt: str, output: Optional[str]):
    """Export all entries as CSV or JSON."""
    loc = _load(path)

    if fmt == "csv":
        from locres.export.csv_export import export_csv
        data = export_csv(loc)
    else:
        from locres.export.json_export import export_json
        data = export_json(loc)

    if output:
        Path(output).write_text(data, encoding="utf-8")
        click.echo(f"Exported {loc.entry_total:,} entries to {output}")
    else:
        click.echo(data)
