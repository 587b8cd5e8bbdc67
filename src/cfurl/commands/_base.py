"""Custom Click base classes with ``--examples`` and alias support.

``CfCommand`` accepts ``examples`` (printed by an eager ``--examples`` flag)
and ``aliases`` (extra names the command answers to).  ``CfGroup`` records
those aliases when commands are added and resolves them on lookup.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class CfCommand(click.Command):
    """Click Command subclass with ``--examples`` and alias names."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        aliases: Sequence[str] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.aliases = tuple(aliases)
        if examples:
            _add_examples_option(self, examples)

    def get_short_help_str(self, limit: int = 45) -> str:
        text = super().get_short_help_str(limit)
        if self.aliases:
            text = f"{text} (alias: {', '.join(self.aliases)})"
        return text


class CfGroup(click.Group):
    """Click Group that resolves command aliases.

    Commands are listed in registration order. Aliases are not listed as
    separate commands in ``--help``; they show up next to their command.
    """

    command_class = CfCommand

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.aliases: dict[str, str] = {}

    def add_command(self, cmd: click.Command, name: str | None = None) -> None:
        super().add_command(cmd, name)
        target = name or cmd.name
        assert target is not None
        for alias in getattr(cmd, "aliases", ()):
            if alias in self.commands or alias in self.aliases:
                msg = f"Alias '{alias}' for '{target}' is already taken"
                raise ValueError(msg)
            self.aliases[alias] = target

    def list_commands(self, ctx: click.Context) -> list[str]:
        return list(self.commands)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        # Report the canonical name so usage lines say "dash", not "home".
        _name, cmd, rest = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, rest
