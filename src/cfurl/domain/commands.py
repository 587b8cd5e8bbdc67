"""Command: one parsed CLI invocation, immutable once built."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from cfurl.domain.types import (
    FIXED_DESTINATIONS,
    RESOURCE_DESTINATIONS,
    ZONE_DESTINATIONS,
    Destination,
)


class Command(BaseModel):
    """A dashboard destination plus its optional arguments.

    Only the *shape* is validated: a zone-scoped destination needs a zone,
    argument-less destinations take nothing, and ``section`` belongs to
    ``security`` alone.  Argument contents are never inspected, so a name
    containing ``/`` or ``?`` is accepted as-is.

    Attributes:
        destination: Which dashboard page to open.
        zone: Zone/domain name (zone-scoped destinations and ``logs``).
        name: Resource name (workers, pages, r2, d1, kv).
        section: Security sub-page; unrecognized values fall back later.
    """

    model_config = {"frozen": True}

    destination: Destination
    zone: str | None = None
    name: str | None = None
    section: str | None = None

    @model_validator(mode="after")
    def _check_shape(self) -> Command:
        dest = self.destination
        if dest in ZONE_DESTINATIONS and self.zone is None:
            msg = f"'{dest}' requires a zone"
            raise ValueError(msg)
        if self.zone is not None and dest in RESOURCE_DESTINATIONS | FIXED_DESTINATIONS:
            msg = f"'{dest}' does not take a zone"
            raise ValueError(msg)
        if self.name is not None and dest not in RESOURCE_DESTINATIONS:
            msg = f"'{dest}' does not take a resource name"
            raise ValueError(msg)
        if self.section is not None and dest is not Destination.SECURITY:
            msg = f"'{dest}' does not take a section"
            raise ValueError(msg)
        return self
