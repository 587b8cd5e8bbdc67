"""Rich Console factory and theme for cfurl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CFURL_THEME = Theme(
    {
        "cfurl.ok": "bold green",
        "cfurl.error": "bold red",
        "cfurl.spinner": "cyan",
        "cfurl.message": "default",
        "cfurl.key": "dim",
        "cfurl.url": "underline blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=CFURL_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def create_status_console() -> Console:
    """Create a Console bound to the real stderr for live status display."""
    return Console(stderr=True, theme=CFURL_THEME, highlight=False)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
