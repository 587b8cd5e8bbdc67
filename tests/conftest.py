"""Shared pytest fixtures and test helpers for cfurl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import click
import pytest
from click.testing import CliRunner

from cfurl.infrastructure.browser import BrowserLauncher, LaunchError


class RecordingLauncher(BrowserLauncher):
    """Launcher fake that records URLs and optionally fails."""

    def __init__(self, error: LaunchError | None = None) -> None:
        self.urls: list[str] = []
        self.error = error

    def launch(self, url: str) -> None:
        self.urls.append(url)
        if self.error is not None:
            raise self.error


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from treating the test streams as a color terminal."""
    for var in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _no_system_open(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fail loudly if anything reaches the real system opener."""

    def forbidden(url: str, *args: object, **kwargs: object) -> int:
        raise AssertionError(f"click.launch called for {url}")

    monkeypatch.setattr(click, "launch", forbidden)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (AppContext reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    cfurl_logger = logging.getLogger("cfurl")
    cfurl_level = cfurl_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    cfurl_logger.setLevel(cfurl_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def launcher(monkeypatch: pytest.MonkeyPatch) -> RecordingLauncher:
    """Recording launcher wired into every AppContext the CLI creates."""
    recorder = RecordingLauncher()
    monkeypatch.setattr("cfurl.commands._context.SystemBrowserLauncher", lambda: recorder)
    return recorder


@pytest.fixture
def failing_launcher(monkeypatch: pytest.MonkeyPatch) -> RecordingLauncher:
    """Launcher that rejects every URL, wired into the CLI."""
    recorder = RecordingLauncher(error=LaunchError("no handler for https URLs"))
    monkeypatch.setattr("cfurl.commands._context.SystemBrowserLauncher", lambda: recorder)
    return recorder
