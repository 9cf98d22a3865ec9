"""Subcommand modules for touban.

Provides register_commands(), which attaches every command to the root group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from touban.commands.assign import assign
    from touban.commands.create import create
    from touban.commands.member import add_member, remove_member
    from touban.commands.show import show

    cli.add_command(create)
    cli.add_command(show)
    cli.add_command(add_member)
    cli.add_command(remove_member)
    cli.add_command(assign)
