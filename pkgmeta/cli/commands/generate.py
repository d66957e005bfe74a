"""``pkgmeta generate PACKAGE``: write the metadata sidecar for a package.

Reads the project descriptor, detects the host platform, computes the
package checksums and writes ``<package>.metadata.json``.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from pkgmeta.core.host_facts import detect_host_facts
from pkgmeta.core.metadata import PackageMetadata
from pkgmeta.core.package import NoPackageFile
from pkgmeta.core.platform_version import UnknownPlatform, UnknownPlatformVersion
from pkgmeta.models.project import ProjectDescriptor, ProjectDescriptorError

console = Console()


def generate_cmd(
    package: str = typer.Argument(
        ...,
        help="Path to the built package.",
    ),
    project_file: str = typer.Option(
        "project.json",
        "--project",
        "-p",
        help="Path to the project descriptor (.json or .toml).",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Print only the metadata path.",
    ),
) -> None:
    """Generate the metadata sidecar for a built package.

    The metadata path is always printed last, on its own line, for scripting.
    """
    try:
        project = ProjectDescriptor.from_file(Path(project_file))
        host = detect_host_facts()
        metadata_path = PackageMetadata.generate(package, project, host_facts=host)
    except (
        ProjectDescriptorError,
        NoPackageFile,
        UnknownPlatform,
        UnknownPlatformVersion,
    ) as exc:
        console.print(f"[bold red]Metadata generation failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if not quiet:
        console.print()
        console.print(
            Panel(
                "\n".join([
                    "[bold green]Metadata written![/bold green]",
                    "",
                    f"[bold]Package:[/bold]   {package}",
                    f"[bold]Project:[/bold]   {project.name} {project.build_version}",
                    f"[bold]Iteration:[/bold] {project.build_iteration}",
                    f"[bold]Platform:[/bold]  {host.platform} {host.platform_version}",
                ]),
                title="[bold]pkgmeta[/bold]",
                border_style="green",
                padding=(1, 2),
            )
        )
        console.print()

    # Print the path plainly for scripting
    console.print(str(metadata_path), markup=False, highlight=False, emoji=False, soft_wrap=True)
