"""Human/JSON output helpers.

The CLI renders ServiceResult for humans (Rich markup, check/cross icons)
or machines (--json).  The formatter layer adapts ServiceResult to the
requested output mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from cfurl.output.console import create_console, get_output

if TYPE_CHECKING:
    from cfurl.services.result import ServiceResult

OK_MARK = "✓"
FAIL_MARK = "✗"


class OutputSettings(BaseModel):
    """Output-mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_error(result: ServiceResult) -> str:
    """One-line failure message for a failed result."""
    msg = result.error.message if result.error else "Unknown error"
    console = create_console()
    console.print(f"[cfurl.error]{FAIL_MARK}[/] Failed to open browser: ", end="")
    console.print(msg, markup=False)
    return get_output(console).rstrip("\n")



def _format_human(result: ServiceResult, *, verbose: bool) -> str:
    console = create_console()
    if result.op == "resolve":
        console.print(result.data["url"], markup=False)
    else:
        console.print(f"[cfurl.ok]{OK_MARK}[/] Opened")
        if verbose:
            console.print("  [cfurl.key]url:[/] ", end="")
            console.print(result.data["url"], style="cfurl.url", markup=False)
    return get_output(console).rstrip("\n")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Returns an empty string when there is nothing to print (quiet success).
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        return format_error(result)
    if settings.quiet:
        return result.data["url"] if result.op == "resolve" else ""
    return _format_human(result, verbose=settings.verbose)
