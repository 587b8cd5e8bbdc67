"""Subcommand modules for cfurl.

Provides register_commands(), which adds one command per dashboard
destination to the root group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every destination command on the root CLI group.

    Zone-scoped commands first, then account resources, then fixed pages,
    which is also the order ``cfurl --help`` lists them in.
    """
    from cfurl.commands.account import ACCOUNT_COMMANDS
    from cfurl.commands.resources import RESOURCE_COMMANDS
    from cfurl.commands.zone import ZONE_COMMANDS

    for command in (*ZONE_COMMANDS, *RESOURCE_COMMANDS, *ACCOUNT_COMMANDS):
        cli.add_command(command)
