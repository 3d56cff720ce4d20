"""Diagnostics output for CLI.

Everything goes into stderr, as stdout belongs to dispatched linker.
"""

import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]


def cli_message(level: MessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit message to user, INFO messages are shown only in verbose mode."""
    if level == "INFO" and not verbose:
        return
    print(f"[linkshim] [{level}] {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error and terminate whole process with failure."""
    cli_message("ERROR", text)
    sys.exit(1)
