import sys
from collections.abc import Generator
from contextlib import contextmanager

from linkshim.cli.output import cli_fatal_abort, cli_message
from linkshim.exceptions import LinkShimError

# Conventional exit status for SIGINT (128 + 2)
INTERRUPTED_EXIT_CODE = 130


@contextmanager
def cli_linkshim_error_handler() -> Generator[None, None, None]:
    """Wrap shim run to properly emit its errors as diagnostics and exit with failure.

    Once linker is dispatched it owns signals and exit status, nothing is handled here.
    """
    try:
        yield
    except LinkShimError as le:
        cli_fatal_abort(repr(le))
    except KeyboardInterrupt:
        # Only reachable while resolving, before linker was dispatched
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        sys.exit(INTERRUPTED_EXIT_CODE)
