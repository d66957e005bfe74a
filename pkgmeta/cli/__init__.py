"""pkgmeta CLI: Typer-based command-line interface.

Provides the ``pkgmeta`` command with subcommands for generating and
inspecting package metadata, normalizing platform versions, and showing
the detected host facts.

All output uses Rich for formatted terminal display.
"""
