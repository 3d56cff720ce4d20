from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from linkshim.resolver.errors import ToolchainDiscoveryError

if TYPE_CHECKING:
    from linkshim.host import ProcessRunner
    from linkshim.toolchain import ToolchainLayout


def discover_toolchain_root(layout: ToolchainLayout, runner: ProcessRunner) -> Path:
    """Ask toolchain itself where it is installed.

    Not retried, toolchain location is assumed to be stable during process lifetime.
    :raises ToolchainDiscoveryError: Command cannot be spawned, failed or printed nothing
    """
    command = layout.toolchain_introspection_command
    try:
        process = runner.capture_output(command)
    except OSError as e:
        raise ToolchainDiscoveryError(
            command,
            reason=f"cannot be executed ({e.strerror or e})",
        ) from e

    if process.returncode != 0:
        raise ToolchainDiscoveryError(
            command,
            reason=f"failed with exit code {process.returncode}",
        )

    root = (process.stdout or b"").decode(errors="surrogateescape").strip()
    if not root:
        raise ToolchainDiscoveryError(command, reason="printed empty installation root")
    return Path(root)
