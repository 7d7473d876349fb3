"""Subcommand modules for minmax.

Provides register_commands() which uses deferred imports to keep
``minmax --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the min, max and clamp commands on the root CLI group."""
    from minmax.commands.compare import clamp_cmd, max_cmd, min_cmd

    cli.add_command(min_cmd)
    cli.add_command(max_cmd)
    cli.add_command(clamp_cmd)
