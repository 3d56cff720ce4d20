from __future__ import annotations

import sys
from pathlib import Path

from linkshim.cli.output import cli_message


def cli_get_executable_program(
    *,
    override: str | None = None,
    warn_module_invocation: bool,
) -> str:
    """Name shim is invoked with, as build systems see it."""
    executable = override if override else Path(sys.argv[0]).name

    if warn_module_invocation and executable == "__main__.py":
        cli_message(
            "WARNING",
            "Invoked as `python -m linkshim`, build systems should point to installed `linkshim` executable instead",
        )

    return executable
