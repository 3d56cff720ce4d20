from __future__ import annotations

from typing import TYPE_CHECKING

from linkshim.resolver.errors import LinkerDispatchError

if TYPE_CHECKING:
    from linkshim.host import ProcessRunner
    from linkshim.resolver.invocation import LinkerInvocation


def dispatch_linker(invocation: LinkerInvocation, runner: ProcessRunner) -> int:
    """Hand over to resolved linker, returning its exit status (if runner returns at all).

    Exit status is not interpreted, linker failure is not an error of ours.
    :raises LinkerDispatchError: Linker exists but cannot be started
    """
    try:
        return runner.run_inheriting_streams(invocation.command)
    except OSError as e:
        raise LinkerDispatchError(
            invocation.linker_executable,
            reason=e.strerror or str(e),
        ) from e
