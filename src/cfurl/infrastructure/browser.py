"""Browser launcher abstraction and the system implementation.

Services depend on :class:`BrowserLauncher` so tests can swap in a recording
fake instead of spawning a real browser.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod

import click

logger = logging.getLogger(__name__)

# click.launch reports 127 when ``start``/``cygstart`` cannot be spawned.
OPENER_NOT_FOUND = 127


class LaunchError(Exception):
    """The OS declined or failed to open a URL."""


class BrowserLauncher(ABC):
    """Abstract interface for opening URLs in the default browser."""

    @abstractmethod
    def launch(self, url: str) -> None:
        """Ask the OS to open *url*.

        Returns once the request has been handed off; it does not wait for
        the browser to load the page.

        Raises:
            LaunchError: The handler is missing or the request was rejected.
        """
        ...


def _wait_for_opener() -> bool:
    """Whether ``click.launch`` must be told to wait for the opener's status.

    On macOS and Windows click already waits for ``open``/``start`` and
    ``wait=True`` would block until the browser quits.  Everywhere else it
    spawns ``xdg-open`` and, unless told to wait, returns 0 without looking
    at its exit status.
    """
    return sys.platform not in ("darwin", "win32", "cygwin")


class SystemBrowserLauncher(BrowserLauncher):
    """Production launcher backed by :func:`click.launch`.

    ``click.launch`` picks the platform opener (``open``, ``start``,
    ``xdg-open``).  The opener exits once the request is handed to the
    browser, so waiting for it still returns before the page loads.
    """

    def launch(self, url: str) -> None:
        logger.debug("Requesting system open for %s", url)
        try:
            code = click.launch(url, wait=_wait_for_opener())
        except OSError as exc:
            raise LaunchError(str(exc)) from exc
        if code == OPENER_NOT_FOUND:
            msg = "no system URL opener found"
            raise LaunchError(msg)
        if code != 0:
            msg = f"system opener exited with status {code}"
            raise LaunchError(msg)
