"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from cfurl.cli import cli
from tests.conftest import RecordingLauncher

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["dns", "--examples"], ["cfurl dns example.com", "cfurl --print dns"]),
    (["security", "--examples"], ["--section waf", "-s bots"]),
    (["logs", "--examples"], ["cfurl logs", "cfurl logs example.com"]),
    (["workers", "--examples"], ["cfurl workers", "cfurl workers my-name"]),
    (["r2", "--examples"], ["cfurl r2 my-bucket"]),
    (["zero-trust", "--examples"], ["cfurl zero-trust", "cfurl zt"]),
    (["zt", "--examples"], ["cfurl zt"]),
    (["dash", "--examples"], ["cfurl home"]),
]


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples_output(
    cli_runner: CliRunner, launcher: RecordingLauncher, args: list[str], keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
    assert launcher.urls == []
