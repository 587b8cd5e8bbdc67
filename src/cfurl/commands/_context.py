"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the browser launcher and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cfurl.config.logging import configure_logging
from cfurl.infrastructure.browser import SystemBrowserLauncher
from cfurl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from cfurl.config.settings import CfurlSettings
    from cfurl.domain.commands import Command
    from cfurl.infrastructure.browser import BrowserLauncher
    from cfurl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The launcher is created
    lazily so ``--help``, ``--version`` and ``--print`` never touch it.
    """

    def __init__(self, settings: CfurlSettings) -> None:
        self.settings = settings
        self._launcher: BrowserLauncher | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def launcher(self) -> BrowserLauncher:
        """The browser launcher (created lazily on first access)."""
        if self._launcher is None:
            self._launcher = SystemBrowserLauncher()
        return self._launcher

    def open(self, command: Command) -> None:
        """Resolve *command*, open it (unless ``--print``), and emit the result."""
        from cfurl.services.open import OpenService

        if self.settings.print_only:
            # --print never constructs a launcher
            result = OpenService.resolve(command)
        else:
            service = OpenService(self.launcher, show_spinner=not self.settings.no_spinner)
            result = service.open(command)
        self.emit(result)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
