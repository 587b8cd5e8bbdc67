"""Unified settings built from CLI flags.

cfurl reads no config files and no environment variables: the global
flags on the root group are the only source.  The frozen settings object
is stored in ``click.Context.obj`` (via :class:`AppContext`) at the CLI
root level.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class CfurlSettings(BaseModel):
    """Global CLI flags, frozen after construction.

    Attributes:
        json_output: Emit the serialized ServiceResult instead of text.
        quiet: Minimal output.
        verbose: Debug logging plus the URL in human output.
        log_json: Structured JSON log lines on stderr.
        no_spinner: Never show the progress indicator.
        print_only: Resolve and print the URL without opening a browser.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_spinner: bool = False
    print_only: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> CfurlSettings:
        """Construct settings from a CLI invocation.

        Flags passed as ``None`` (unset by Click) fall back to defaults.
        """
        return cls(**{k: v for k, v in cli_flags.items() if v is not None})
