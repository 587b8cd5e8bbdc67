"""Transient progress indicator shown while the OS opener runs.

Purely cosmetic: it never affects control flow.  Rich drives the redraw
from its own refresh thread; leaving the context manager stops it and
clears the line before anything else is printed.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from cfurl.output.console import create_status_console

OPENING_MESSAGE = "Opening in your browser..."

# Rich's "dots" spinner: ⠋ ⠙ ⠹ ⠸ ⠼ ⠴ ⠦ ⠧ ⠇ ⠏ at 80ms per frame.
SPINNER_NAME = "dots"

HOLD_SECONDS = 1.0


@contextmanager
def spinner(message: str = OPENING_MESSAGE, *, enabled: bool = True) -> Generator[bool]:
    """Show a spinner on stderr for the duration of the block.

    Yields True when the spinner is actually on screen.  It stays hidden
    when *enabled* is False or stderr is not a terminal.
    """
    if not enabled:
        yield False
        return

    console = create_status_console()
    if not console.is_terminal:
        yield False
        return

    with console.status(
        f"[cfurl.message]{message}",
        spinner=SPINNER_NAME,
        spinner_style="cfurl.spinner",
    ):
        yield True
