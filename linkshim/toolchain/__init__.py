"""Compiled-in description of toolchain layout the shim resolves against."""

from .layout import (
    DEFAULT_LINKER_CANDIDATE_PATHS,
    LIBRARY_PATH_FLAG_PREFIX,
    TARGET_TRIPLE,
    TOOLCHAIN_INTROSPECTION_COMMAND,
    ToolchainLayout,
)

__all__ = [
    "DEFAULT_LINKER_CANDIDATE_PATHS",
    "LIBRARY_PATH_FLAG_PREFIX",
    "TARGET_TRIPLE",
    "TOOLCHAIN_INTROSPECTION_COMMAND",
    "ToolchainLayout",
]
