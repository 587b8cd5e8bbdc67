"""Commands: zone-scoped dashboard pages (dns, ssl, security, logs, ...)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cfurl.commands._base import CfCommand
from cfurl.domain.commands import Command
from cfurl.domain.types import Destination, SecuritySection

if TYPE_CHECKING:
    from cfurl.commands._context import AppContext


def _zone_command(destination: Destination, summary: str) -> click.Command:
    """Build a command taking a single required ZONE argument."""

    @click.command(
        name=destination.value,
        cls=CfCommand,
        help=f"{summary}\n\nZONE is the zone/domain name (e.g. example.com).",
        examples=f"""\
  cfurl {destination} example.com
  cfurl --print {destination} example.com""",
    )
    @click.argument("zone")
    @click.pass_obj
    def command(app: AppContext, zone: str) -> None:
        app.open(Command(destination=destination, zone=zone))

    return command


dns = _zone_command(Destination.DNS, "Open DNS settings for a zone.")
analytics = _zone_command(Destination.ANALYTICS, "Open zone analytics.")
ssl = _zone_command(Destination.SSL, "Open SSL/TLS settings.")
caching = _zone_command(Destination.CACHING, "Open caching settings.")
rules = _zone_command(Destination.RULES, "Open rules settings (redirects, transforms, etc.).")
speed = _zone_command(Destination.SPEED, "Open speed/optimization settings.")
email = _zone_command(Destination.EMAIL, "Open email routing settings.")
spectrum = _zone_command(Destination.SPECTRUM, "Open Spectrum settings.")
network = _zone_command(Destination.NETWORK, "Open network settings.")
traffic = _zone_command(
    Destination.TRAFFIC, "Open traffic settings (load balancing, health checks)."
)
scrape = _zone_command(Destination.SCRAPE, "Open Scrape Shield settings.")
zaraz = _zone_command(Destination.ZARAZ, "Open Zaraz.")
zone = _zone_command(Destination.ZONE, "Open the zone overview.")


@click.command(
    name="security",
    cls=CfCommand,
    examples="""\
  cfurl security example.com
  cfurl security example.com --section waf
  cfurl security example.com -s bots""",
)
@click.argument("zone")
@click.option(
    "-s",
    "--section",
    default=None,
    metavar="SECTION",
    help=f"Specific section: {', '.join(SecuritySection)}. Others open the overview.",
)
@click.pass_obj
def security(app: AppContext, zone: str, section: str | None) -> None:
    """Open security settings (WAF, etc.).

    ZONE is the zone/domain name (e.g. example.com).
    """
    app.open(Command(destination=Destination.SECURITY, zone=zone, section=section))


@click.command(
    name="logs",
    cls=CfCommand,
    examples="""\
  # Account-level Logpush
  cfurl logs

  # Logs for one zone
  cfurl logs example.com""",
)
@click.argument("zone", required=False)
@click.pass_obj
def logs(app: AppContext, zone: str | None) -> None:
    """Open Logs (Logpush).

    ZONE is optional; without it the account-level page opens.
    """
    app.open(Command(destination=Destination.LOGS, zone=zone))


ZONE_COMMANDS: list[click.Command] = [
    dns,
    analytics,
    security,
    ssl,
    caching,
    rules,
    speed,
    email,
    spectrum,
    network,
    traffic,
    scrape,
    zaraz,
    logs,
    zone,
]
