"""Command resolver: maps a :class:`Command` to a dashboard URL.

Pure and total: every destination has a mapping, nothing here touches the
network or the terminal, and the same command always yields the same URL.

Zone paths use the dashboard's redirect query, ``?to=/:account/<zone>/...``,
which lets the dashboard substitute the signed-in account.  Names and zones
are interpolated verbatim (no escaping).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from cfurl.domain.types import Destination, SecuritySection

if TYPE_CHECKING:
    from cfurl.domain.commands import Command

DASH_BASE = "https://dash.cloudflare.com"

ZONE_PATHS: dict[Destination, str] = {
    Destination.DNS: "dns",
    Destination.ANALYTICS: "analytics",
    Destination.SSL: "ssl-tls",
    Destination.CACHING: "caching",
    Destination.RULES: "rules",
    Destination.SPEED: "speed",
    Destination.EMAIL: "email",
    Destination.SPECTRUM: "spectrum",
    Destination.NETWORK: "network",
    Destination.TRAFFIC: "traffic",
    Destination.SCRAPE: "content-protection",
    Destination.ZARAZ: "zaraz",
    Destination.ZONE: "",
}

# (index path, per-item template)
RESOURCE_PATHS: dict[Destination, tuple[str, str]] = {
    Destination.WORKERS: ("workers-and-pages", "workers/services/view/{name}"),
    Destination.PAGES: ("workers-and-pages", "pages/view/{name}"),
    Destination.R2: ("r2", "r2/default/buckets/{name}"),
    Destination.D1: ("workers/d1", "workers/d1/databases/{name}"),
    Destination.KV: ("workers/kv", "workers/kv/namespaces/{name}"),
}

ACCOUNT_PATHS: dict[Destination, str] = {
    Destination.ZERO_TRUST: "access",
    Destination.ACCESS: "access",
    Destination.TUNNELS: "access/tunnels",
    Destination.STREAM: "stream",
    Destination.IMAGES: "images",
    Destination.QUEUES: "queues",
    Destination.AI: "ai",
    Destination.VECTORIZE: "vectorize",
    Destination.HYPERDRIVE: "hyperdrive",
    Destination.DURABLE_OBJECTS: "workers/durable-objects",
    Destination.ACCOUNT: "",
    Destination.BILLING: "billing",
    Destination.AUDIT_LOG: "audit-log",
    Destination.REGISTRAR: "domains",
    Destination.TURNSTILE: "turnstile",
    Destination.WEB_ANALYTICS: "web-analytics",
}

API_TOKENS_URL = f"{DASH_BASE}/profile/api-tokens"


def zone_url(zone: str, path: str = "") -> str:
    """Build a zone-scoped redirect URL; an empty *path* opens the zone overview."""
    if not path:
        return f"{DASH_BASE}/?to=/:account/{zone}"
    return f"{DASH_BASE}/?to=/:account/{zone}/{path}"


def account_url(path: str = "") -> str:
    """Build an account-scoped redirect URL; an empty *path* opens the account home."""
    if not path:
        return f"{DASH_BASE}/?to=/:account"
    return f"{DASH_BASE}/?to=/:account/{path}"


def security_path(section: str | None) -> str:
    """Return the security sub-path for *section*.

    Unknown sections (and ``None``) fall back to the security landing page
    rather than erroring.
    """
    try:
        known = SecuritySection(section)
    except ValueError:
        return "security"
    return f"security/{known}"


def _zone_of(command: Command) -> str:
    if command.zone is None:
        raise ValueError(f"'{command.destination}' requires a zone")
    return command.zone


def resolve(command: Command) -> str:
    """Resolve *command* to its dashboard URL."""
    dest = command.destination

    match dest:
        case (
            Destination.DNS
            | Destination.ANALYTICS
            | Destination.SSL
            | Destination.CACHING
            | Destination.RULES
            | Destination.SPEED
            | Destination.EMAIL
            | Destination.SPECTRUM
            | Destination.NETWORK
            | Destination.TRAFFIC
            | Destination.SCRAPE
            | Destination.ZARAZ
            | Destination.ZONE
        ):
            return zone_url(_zone_of(command), ZONE_PATHS[dest])
        case Destination.SECURITY:
            return zone_url(_zone_of(command), security_path(command.section))
        case Destination.LOGS:
            if command.zone is not None:
                return zone_url(command.zone, "analytics/logs")
            return account_url("logs")
        case Destination.WORKERS | Destination.PAGES | Destination.R2 | Destination.D1 | Destination.KV:
            index_path, item_template = RESOURCE_PATHS[dest]
            if command.name is None:
                return account_url(index_path)
            return account_url(item_template.format(name=command.name))
        case (
            Destination.ZERO_TRUST
            | Destination.ACCESS
            | Destination.TUNNELS
            | Destination.STREAM
            | Destination.IMAGES
            | Destination.QUEUES
            | Destination.AI
            | Destination.VECTORIZE
            | Destination.HYPERDRIVE
            | Destination.DURABLE_OBJECTS
            | Destination.ACCOUNT
            | Destination.BILLING
            | Destination.AUDIT_LOG
            | Destination.REGISTRAR
            | Destination.TURNSTILE
            | Destination.WEB_ANALYTICS
        ):
            return account_url(ACCOUNT_PATHS[dest])
        case Destination.API_TOKENS:
            return API_TOKENS_URL
        case Destination.DASH:
            return DASH_BASE
        case _:
            assert_never(dest)

