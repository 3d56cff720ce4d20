from __future__ import annotations

import os
import sys
from functools import partial

from linkshim.cli.errors import cli_linkshim_error_handler
from linkshim.cli.executable import cli_get_executable_program
from linkshim.cli.output import cli_message
from linkshim.cli.verbosity import cli_is_verbose
from linkshim.host import LocalFilesystemProbe, SubprocessRunner
from linkshim.resolver import run_linker_shim
from linkshim.toolchain import ToolchainLayout


def cli_entry_point(prog: str | None = None) -> None:
    """CLI main entry.

    Every argument is linker argument, nothing is parsed here.
    """
    verbose = cli_is_verbose(os.environ)
    prog = cli_get_executable_program(
        override=prog,
        warn_module_invocation=verbose,
    )

    with cli_linkshim_error_handler():
        exit_code = run_linker_shim(
            sys.argv[1:],
            layout=ToolchainLayout.default(),
            runner=SubprocessRunner(),
            filesystem=LocalFilesystemProbe(),
            on_trace=partial(cli_message, "INFO", verbose=verbose),
        )
        # Reached only when linker was not exec'ed (e.g Windows)
        cli_message("INFO", f"{prog}: linker exited with {exit_code}", verbose=verbose)
        sys.exit(exit_code)
