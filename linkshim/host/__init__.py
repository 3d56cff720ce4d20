"""Host capabilities (processes, filesystem) the resolver talks to.

Resolver never touches `subprocess` or filesystem directly, so these may be replaced (e.g in tests).
"""

from .filesystem import FilesystemProbe, LocalFilesystemProbe
from .process import ProcessRunner, SubprocessRunner, exit_status_from_returncode

__all__ = [
    "FilesystemProbe",
    "LocalFilesystemProbe",
    "ProcessRunner",
    "SubprocessRunner",
    "exit_status_from_returncode",
]
