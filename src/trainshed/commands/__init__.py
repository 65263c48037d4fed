"""Subcommand modules for trainshed.

Provides register_commands() which attaches every command group to the
root CLI group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from trainshed.commands.collection import collection
    from trainshed.commands.value import value

    cli.add_command(value)
    cli.add_command(collection)
