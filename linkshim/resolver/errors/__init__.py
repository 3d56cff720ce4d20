"""Errors of resolution stages, each one is terminal."""

from .library_dir_not_found import LibraryDirNotFoundError
from .linker_dispatch import LinkerDispatchError
from .linker_not_found import LinkerNotFoundError
from .toolchain_discovery import ToolchainDiscoveryError

__all__ = [
    "LibraryDirNotFoundError",
    "LinkerDispatchError",
    "LinkerNotFoundError",
    "ToolchainDiscoveryError",
]
