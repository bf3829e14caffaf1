"""Subcommand modules for reachctl.

Provides register_commands() which uses deferred imports to keep
``reachctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from reachctl.commands.generate import generate
    from reachctl.commands.graph import adjacency, matrix, path

    cli.add_command(adjacency)
    cli.add_command(matrix)
    cli.add_command(path)
    cli.add_command(generate)
