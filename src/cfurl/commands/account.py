"""Commands: fixed account-level pages that take no arguments."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import click

from cfurl.commands._base import CfCommand
from cfurl.domain.commands import Command
from cfurl.domain.types import Destination

if TYPE_CHECKING:
    from cfurl.commands._context import AppContext


def _fixed_command(
    destination: Destination, summary: str, *, aliases: Sequence[str] = ()
) -> click.Command:
    """Build an argument-less command."""
    example_lines = [f"  cfurl {name}" for name in (destination.value, *aliases)]

    @click.command(
        name=destination.value,
        cls=CfCommand,
        help=summary,
        aliases=aliases,
        examples="\n".join(example_lines),
    )
    @click.pass_obj
    def command(app: AppContext) -> None:
        app.open(Command(destination=destination))

    return command


ACCOUNT_COMMANDS: list[click.Command] = [
    _fixed_command(Destination.ZERO_TRUST, "Open the Zero Trust dashboard.", aliases=["zt"]),
    _fixed_command(Destination.ACCESS, "Open Access settings."),
    _fixed_command(Destination.TUNNELS, "Open Cloudflare Tunnels."),
    _fixed_command(Destination.STREAM, "Open Cloudflare Stream."),
    _fixed_command(Destination.IMAGES, "Open Cloudflare Images."),
    _fixed_command(Destination.QUEUES, "Open Queues."),
    _fixed_command(Destination.AI, "Open Workers AI."),
    _fixed_command(Destination.VECTORIZE, "Open Vectorize."),
    _fixed_command(Destination.HYPERDRIVE, "Open Hyperdrive."),
    _fixed_command(Destination.DURABLE_OBJECTS, "Open Durable Objects.", aliases=["do"]),
    _fixed_command(Destination.ACCOUNT, "Open account settings."),
    _fixed_command(Destination.BILLING, "Open the billing page."),
    _fixed_command(Destination.AUDIT_LOG, "Open the audit log.", aliases=["audit"]),
    _fixed_command(Destination.API_TOKENS, "Open the API tokens page.", aliases=["tokens"]),
    _fixed_command(Destination.REGISTRAR, "Open the domain registrar.", aliases=["domains"]),
    _fixed_command(Destination.TURNSTILE, "Open Turnstile (CAPTCHA)."),
    _fixed_command(Destination.WEB_ANALYTICS, "Open Web Analytics.", aliases=["wa"]),
    _fixed_command(Destination.DASH, "Open the main dashboard.", aliases=["home"]),
]
