"""``pkgmeta show PACKAGE``: display the metadata saved for a package."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pkgmeta.core.metadata import (
    CorruptMetadataFile,
    NoPackageMetadataFile,
    PackageMetadata,
)
from pkgmeta.core.package import Package
from pkgmeta.core.platform_version import UnknownPlatform, UnknownPlatformVersion

console = Console()

# Long values are summarized in the table view
_SUMMARIZED_KEYS = ("license_content", "version_manifest")


def _summarize(key: str, value: object) -> str:
    if key == "license_content":
        text = str(value or "")
        return f"[dim]{len(text)} characters[/dim]" if text else "[dim](empty)[/dim]"
    if key == "version_manifest" and isinstance(value, dict):
        software = value.get("software") or {}
        return f"[dim]{len(software)} components[/dim]"
    return str(value)


def show_cmd(
    package: str = typer.Argument(
        ...,
        help="Path to the built package (not the .metadata.json file).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the raw metadata JSON instead of a table.",
    ),
) -> None:
    """Show the metadata saved for a built package."""
    try:
        metadata = PackageMetadata.for_package(Package(package))
    except (
        NoPackageMetadataFile,
        CorruptMetadataFile,
        UnknownPlatform,
        UnknownPlatformVersion,
    ) as exc:
        console.print(f"[bold red]Cannot load metadata:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if as_json:
        console.print(metadata.to_json(), markup=False, highlight=False, emoji=False, soft_wrap=True)
        return

    table = Table(title=metadata.name)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in metadata.to_mapping().items():
        if key in _SUMMARIZED_KEYS:
            table.add_row(key, _summarize(key, value))
        elif isinstance(value, (dict, list)):
            table.add_row(key, escape(json.dumps(value)), style="dim")
        else:
            table.add_row(key, escape(str(value)))

    console.print(table)
