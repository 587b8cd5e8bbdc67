"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from cfurl.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("cfurl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("cfurl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("cfurl.test").debug("launch.start", url="https://x")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "launch.start"
        assert parsed["url"] == "https://x"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "cfurl.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("cfurl.infrastructure.browser").debug("Requesting system open")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Requesting system open"
        assert parsed["logger"] == "cfurl.infrastructure.browser"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("cfurl.test").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
