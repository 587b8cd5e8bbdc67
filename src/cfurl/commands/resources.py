"""Commands: account resources with an optional name (workers, r2, kv, ...)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cfurl.commands._base import CfCommand
from cfurl.domain.commands import Command
from cfurl.domain.types import Destination

if TYPE_CHECKING:
    from cfurl.commands._context import AppContext


def _resource_command(
    destination: Destination, summary: str, metavar: str, what: str
) -> click.Command:
    """Build a command taking one optional resource-name argument."""
    param = metavar.lower()

    @click.command(
        name=destination.value,
        cls=CfCommand,
        help=f"{summary}\n\n{metavar} is an optional {what}; without it the list opens.",
        examples=f"""\
  cfurl {destination}
  cfurl {destination} my-{param}""",
    )
    @click.argument(param, required=False)
    @click.pass_obj
    def command(app: AppContext, **kwargs: str | None) -> None:
        app.open(Command(destination=destination, name=kwargs[param]))

    return command


workers = _resource_command(Destination.WORKERS, "Open Workers & Pages.", "NAME", "worker name")
pages = _resource_command(Destination.PAGES, "Open Pages.", "NAME", "Pages project name")
r2 = _resource_command(Destination.R2, "Open R2 object storage.", "BUCKET", "bucket name")
d1 = _resource_command(Destination.D1, "Open D1 databases.", "DATABASE", "database name")
kv = _resource_command(Destination.KV, "Open KV namespaces.", "NAMESPACE", "namespace")

RESOURCE_COMMANDS: list[click.Command] = [workers, pages, r2, d1, kv]
