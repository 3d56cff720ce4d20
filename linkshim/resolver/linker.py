from __future__ import annotations

from typing import TYPE_CHECKING

from linkshim.resolver.errors import LinkerNotFoundError

if TYPE_CHECKING:
    from pathlib import Path

    from linkshim.host import FilesystemProbe
    from linkshim.toolchain import ToolchainLayout


def resolve_linker_executable(
    layout: ToolchainLayout,
    filesystem: FilesystemProbe,
) -> Path:
    """Pick first existing linker executable from known candidates.

    Candidates after the first hit are never probed.
    :raises LinkerNotFoundError: None of candidates exist
    """
    for candidate in layout.linker_candidate_paths:
        if filesystem.is_file(candidate):
            return candidate
    raise LinkerNotFoundError(layout.linker_candidate_paths)
