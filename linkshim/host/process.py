from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from subprocess import PIPE, CompletedProcess, Popen, run
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Sequence

# Windows reports exit status as unsigned 32-bit value (e.g NTSTATUS 0xC0000005)
_WINDOWS_EXIT_STATUS_BITS = 32

# Exit status for child terminated by signal N is 128 + N (shell convention)
SIGNAL_EXIT_CODE_BASE = 128


class ProcessRunner(ABC):
    @abstractmethod
    def capture_output(self, command: Sequence[str]) -> CompletedProcess[bytes]:
        """Run command to completion and capture its stdout.

        Stderr is left untouched (inherited), so diagnostics of called tool reach the user.

        :param command: Executable and its arguments
        :raises OSError: Executable cannot be spawned (e.g missing)
        """
        ...

    @abstractmethod
    def run_inheriting_streams(self, command: Sequence[str]) -> int:
        """Hand control over to command with standard streams of current process.

        May replace current process and never return, otherwise returns exit status to exit with.

        :param command: Executable (path) and its arguments
        :raises OSError: Executable cannot be spawned
        """
        ...


class SubprocessRunner(ProcessRunner):
    """Runs commands as real processes.

    On POSIX final command replaces current process (`exec`), so signals and exit status belong to it.
    Windows has no process replacement, there command runs as child and we wait for it.
    """

    def __init__(
        self,
        *,
        replace_process: bool = os.name != "nt",
        stdin: TextIO | int | None = None,
        stdout: TextIO | int | None = None,
        stderr: TextIO | int | None = None,
    ) -> None:
        self._replace_process = replace_process
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr

    def capture_output(self, command: Sequence[str]) -> CompletedProcess[bytes]:
        return run(
            list(command),
            check=False,
            stdout=PIPE,
            stderr=self._stderr,
            shell=False,
        )

    def run_inheriting_streams(self, command: Sequence[str]) -> int:
        if self._replace_process:
            # Anything buffered would be lost with our process image
            sys.stdout.flush()
            sys.stderr.flush()
            os.execv(command[0], list(command))

        with Popen(
            list(command),
            stdin=self._stdin,
            stdout=self._stdout,
            stderr=self._stderr,
            shell=False,
        ) as process:
            while True:
                try:
                    returncode = process.wait()
                    break
                except KeyboardInterrupt:
                    # Console delivers Ctrl+C to child too, its exit status decides
                    continue

        return exit_status_from_returncode(returncode, windows=os.name == "nt")


def exit_status_from_returncode(returncode: int, *, windows: bool) -> int:
    """Convert child return code into value that `sys.exit` reproduces exactly."""
    if windows:
        # `sys.exit` takes signed 32-bit value, same bits are reported to parent
        if returncode >= 1 << (_WINDOWS_EXIT_STATUS_BITS - 1):
            return returncode - (1 << _WINDOWS_EXIT_STATUS_BITS)
        return returncode
    if returncode < 0:
        # POSIX reports killed child as negative signal number
        return SIGNAL_EXIT_CODE_BASE - returncode
    return returncode
