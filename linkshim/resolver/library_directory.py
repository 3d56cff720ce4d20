from __future__ import annotations

from typing import TYPE_CHECKING

from linkshim.resolver.errors import LibraryDirNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

    from linkshim.host import FilesystemProbe
    from linkshim.toolchain import ToolchainLayout


def validate_target_library_directory(
    toolchain_root: Path,
    layout: ToolchainLayout,
    filesystem: FilesystemProbe,
) -> Path:
    """Get target library directory inside toolchain root, ensuring it exists.

    Failing here gives actionable message instead of `library not found` deep inside linker.
    :raises LibraryDirNotFoundError: Directory is missing (target support is not installed)
    """
    library_directory = layout.target_library_directory(toolchain_root)
    if not filesystem.is_directory(library_directory):
        raise LibraryDirNotFoundError(library_directory, layout.target_triple)
    return library_directory
