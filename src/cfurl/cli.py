"""Root CLI group for cfurl with global flags and command registration."""

from __future__ import annotations

import click

from cfurl import __version__
from cfurl.commands import register_commands
from cfurl.commands._base import CfGroup
from cfurl.commands._context import AppContext
from cfurl.config.settings import CfurlSettings


@click.group(
    name="cfurl",
    cls=CfGroup,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="cfurl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and the resolved URL.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-spinner", is_flag=True, help="Never show the progress indicator.")
@click.option(
    "-p", "--print", "print_only", is_flag=True, help="Print the URL instead of opening it."
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_spinner: bool,
    print_only: bool,
) -> None:
    """Quick access to Cloudflare dashboard pages."""
    ctx.obj = AppContext(
        CfurlSettings.from_cli(
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            no_spinner=no_spinner,
            print_only=print_only,
        )
    )


register_commands(cli)


def main() -> None:
    """Console-script entry point."""
    cli()
