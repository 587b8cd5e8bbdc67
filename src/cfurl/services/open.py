"""OpenService: resolve a command and hand the URL to the browser.

The straight-line pipeline is resolve -> spinner -> launch -> result.
Launch failures come back as ``ok=False`` results; nothing here exits
the process or prints.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import structlog

from cfurl.domain.types import scope_of
from cfurl.domain.urls import resolve
from cfurl.infrastructure.browser import LaunchError
from cfurl.output.spinner import HOLD_SECONDS, spinner
from cfurl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from cfurl.domain.commands import Command
    from cfurl.infrastructure.browser import BrowserLauncher

log = structlog.get_logger(__name__)


class OpenService:
    """Open dashboard destinations through a :class:`BrowserLauncher`.

    Args:
        launcher: Collaborator that performs the OS open call.
        show_spinner: Allow the progress indicator (still suppressed when
            stderr is not a terminal).
        hold_seconds: Pause after a successful launch while the spinner is
            visible, so the done-state is readable.
    """

    def __init__(
        self,
        launcher: BrowserLauncher,
        *,
        show_spinner: bool = True,
        hold_seconds: float = HOLD_SECONDS,
    ) -> None:
        self._launcher = launcher
        self._show_spinner = show_spinner
        self._hold_seconds = hold_seconds

    @staticmethod
    def resolve(command: Command) -> ServiceResult:
        """Resolve *command* without opening anything."""
        return ServiceResult(ok=True, op="resolve", data=_payload(command))

    def open(self, command: Command) -> ServiceResult:
        """Resolve *command* and ask the OS to open the URL exactly once."""
        data = _payload(command)
        url = data["url"]
        log.debug("launch.start", destination=data["destination"], url=url)

        with spinner(enabled=self._show_spinner) as active:
            try:
                self._launcher.launch(url)
            except LaunchError as exc:
                log.debug("launch.failed", url=url, reason=str(exc))
                return ServiceResult(
                    ok=False,
                    op="open",
                    error=ServiceError(
                        code="LAUNCH_FAILED",
                        message=str(exc) or type(exc).__name__,
                        detail={"url": url},
                    ),
                )
            if active:
                time.sleep(self._hold_seconds)

        log.debug("launch.done", url=url)
        return ServiceResult(ok=True, op="open", data=data)


def _payload(command: Command) -> dict[str, Any]:
    return {
        "destination": command.destination.value,
        "scope": scope_of(command.destination, zone=command.zone).value,
        "url": resolve(command),
    }
