"""Parametrized help tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from cfurl.cli import cli
from cfurl.domain.types import Destination

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["dns", "--help"], ["ZONE", "DNS settings"]),
    (["security", "--help"], ["ZONE", "--section", "ddos"]),
    (["logs", "--help"], ["[ZONE]", "account-level"]),
    (["workers", "--help"], ["[NAME]", "worker name"]),
    (["pages", "--help"], ["[NAME]"]),
    (["r2", "--help"], ["[BUCKET]"]),
    (["d1", "--help"], ["[DATABASE]"]),
    (["kv", "--help"], ["[NAMESPACE]"]),
    (["zero-trust", "--help"], ["Zero Trust"]),
    (["api-tokens", "--help"], ["API tokens"]),
    (["dash", "--help"], ["main dashboard"]),
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help_output(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    for keyword in keywords:
        assert keyword in result.output, f"{keyword!r} missing from {args}"


@pytest.mark.parametrize("command", [d.value for d in Destination])
def test_every_destination_has_help(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0, result.output
    assert "--examples" in result.output


def test_short_help_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["dns", "-h"])
    assert result.exit_code == 0
    assert "ZONE" in result.output
