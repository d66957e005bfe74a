"""Main Typer application: imports and registers all CLI commands.

Entry point: ``pkgmeta`` (configured via pyproject.toml console_scripts).

Commands: generate, show, normalize, host.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from pkgmeta.cli.commands.generate import generate_cmd
from pkgmeta.cli.commands.show import show_cmd
from pkgmeta.config import config

app = typer.Typer(
    name="pkgmeta",
    help="pkgmeta: checksum, platform and provenance metadata for built packages.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

console = Console()

# Register subcommands
app.command(name="generate", help="Write the metadata sidecar for a package.")(generate_cmd)
app.command(name="show", help="Show the metadata saved for a package.")(show_cmd)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log at DEBUG level."
    ),
) -> None:
    """Configure logging for every subcommand."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command(name="normalize", help="Truncate a platform version to its marketing version.")
def normalize_cmd(
    platform: str = typer.Argument(..., help="Platform shortname (e.g. ubuntu, el, windows)."),
    version: str = typer.Argument(..., help="Raw platform version (e.g. 12.04.5, 6.3.9600)."),
) -> None:
    """Print the marketing version of PLATFORM VERSION."""
    from pkgmeta.core.platform_version import (
        UnknownPlatform,
        UnknownPlatformVersion,
        truncate_platform_version,
    )

    try:
        console.print(truncate_platform_version(version, platform), markup=False)
    except (UnknownPlatform, UnknownPlatformVersion) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


@app.command(name="host", help="Show the detected host facts.")
def host_cmd() -> None:
    """Show the host facts and the platform fields they produce."""
    from rich.table import Table

    from pkgmeta.core.host_facts import detect_host_facts
    from pkgmeta.core.metadata import arch, platform_shortname, platform_version
    from pkgmeta.core.platform_version import UnknownPlatform, UnknownPlatformVersion

    host = detect_host_facts()

    table = Table(title="Host Facts")
    table.add_column("Fact", style="cyan")
    table.add_column("Value")
    table.add_row("platform", host.platform)
    table.add_row("platform_family", host.platform_family)
    table.add_row("platform_version", host.platform_version)
    table.add_row("kernel_machine", host.kernel_machine)
    table.add_section()
    table.add_row("metadata platform", platform_shortname(host), style="green")
    table.add_row("metadata arch", arch(host), style="green")
    try:
        table.add_row("metadata platform_version", platform_version(host), style="green")
    except (UnknownPlatform, UnknownPlatformVersion) as e:
        table.add_row("metadata platform_version", f"[red]{e}[/red]")

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
