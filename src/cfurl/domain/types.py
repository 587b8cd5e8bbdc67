"""Destination and classification enums.

Every dashboard page cfurl can open is a member of :class:`Destination`.
The frozensets below partition that enum by argument shape, which the
command model and the resolver both rely on.
"""

from __future__ import annotations

from enum import StrEnum


class Destination(StrEnum):
    """Closed set of dashboard destinations (one per CLI command)."""

    # Zone-scoped
    DNS = "dns"
    ANALYTICS = "analytics"
    SECURITY = "security"
    SSL = "ssl"
    CACHING = "caching"
    RULES = "rules"
    SPEED = "speed"
    EMAIL = "email"
    SPECTRUM = "spectrum"
    NETWORK = "network"
    TRAFFIC = "traffic"
    SCRAPE = "scrape"
    ZARAZ = "zaraz"
    ZONE = "zone"

    # Zone-scoped when a zone is given, account-scoped otherwise
    LOGS = "logs"

    # Account resources with an optional name
    WORKERS = "workers"
    PAGES = "pages"
    R2 = "r2"
    D1 = "d1"
    KV = "kv"

    # Argument-less
    ZERO_TRUST = "zero-trust"
    ACCESS = "access"
    TUNNELS = "tunnels"
    STREAM = "stream"
    IMAGES = "images"
    QUEUES = "queues"
    AI = "ai"
    VECTORIZE = "vectorize"
    HYPERDRIVE = "hyperdrive"
    DURABLE_OBJECTS = "durable-objects"
    ACCOUNT = "account"
    BILLING = "billing"
    AUDIT_LOG = "audit-log"
    API_TOKENS = "api-tokens"
    REGISTRAR = "registrar"
    TURNSTILE = "turnstile"
    WEB_ANALYTICS = "web-analytics"
    DASH = "dash"


class SecuritySection(StrEnum):
    """Recognized ``--section`` values for the security command."""

    WAF = "waf"
    EVENTS = "events"
    DDOS = "ddos"
    BOTS = "bots"


class Scope(StrEnum):
    """Where in the dashboard a resolved URL points."""

    ZONE = "zone"
    ACCOUNT = "account"
    FIXED = "fixed"


ZONE_DESTINATIONS: frozenset[Destination] = frozenset(
    {
        Destination.DNS,
        Destination.ANALYTICS,
        Destination.SECURITY,
        Destination.SSL,
        Destination.CACHING,
        Destination.RULES,
        Destination.SPEED,
        Destination.EMAIL,
        Destination.SPECTRUM,
        Destination.NETWORK,
        Destination.TRAFFIC,
        Destination.SCRAPE,
        Destination.ZARAZ,
        Destination.ZONE,
    }
)

RESOURCE_DESTINATIONS: frozenset[Destination] = frozenset(
    {
        Destination.WORKERS,
        Destination.PAGES,
        Destination.R2,
        Destination.D1,
        Destination.KV,
    }
)

OPTIONAL_ZONE_DESTINATIONS: frozenset[Destination] = frozenset({Destination.LOGS})

FIXED_DESTINATIONS: frozenset[Destination] = frozenset(
    set(Destination) - ZONE_DESTINATIONS - RESOURCE_DESTINATIONS - OPTIONAL_ZONE_DESTINATIONS
)


def scope_of(destination: Destination, *, zone: str | None = None) -> Scope:
    """Return the scope a destination resolves into.

    ``logs`` is the only destination whose scope depends on its argument.
    """
    if destination in ZONE_DESTINATIONS:
        return Scope.ZONE
    if destination in OPTIONAL_ZONE_DESTINATIONS:
        return Scope.ZONE if zone is not None else Scope.ACCOUNT
    if destination in (Destination.API_TOKENS, Destination.DASH):
        return Scope.FIXED
    return Scope.ACCOUNT
