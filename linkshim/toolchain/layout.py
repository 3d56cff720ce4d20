from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

# Target which standard libraries are injected into linker search paths
TARGET_TRIPLE: Final[str] = "x86_64-pc-windows-msvc"

# Prints active toolchain installation root (sysroot) into stdout
TOOLCHAIN_INTROSPECTION_COMMAND: Final[tuple[str, ...]] = ("rustc", "--print", "sysroot")

# Ordered by priority, first existing one wins.
# Primary is modern LLVM packaging, rest are older or distribution-specific layouts
DEFAULT_LINKER_CANDIDATE_PATHS: Final[tuple[Path, ...]] = (
    Path("/usr/bin/lld-link"),
    Path("/usr/local/bin/lld-link"),
    Path("/usr/lib/llvm/bin/lld-link"),
)

# MSVC-style (`link.exe` / `lld-link`) library search path directive
LIBRARY_PATH_FLAG_PREFIX: Final[str] = "/LIBPATH:"


@dataclass(frozen=True)
class ToolchainLayout:
    """Where to look for target libraries and linker executable.

    Not configurable from environment or command line, resolution must be reproducible.
    """

    target_triple: str
    toolchain_introspection_command: tuple[str, ...]
    linker_candidate_paths: tuple[Path, ...]
    library_path_flag_prefix: str = LIBRARY_PATH_FLAG_PREFIX

    @staticmethod
    def default() -> ToolchainLayout:
        return ToolchainLayout(
            target_triple=TARGET_TRIPLE,
            toolchain_introspection_command=TOOLCHAIN_INTROSPECTION_COMMAND,
            linker_candidate_paths=DEFAULT_LINKER_CANDIDATE_PATHS,
        )

    def target_library_directory(self, toolchain_root: Path) -> Path:
        """Directory with target standard libraries inside given toolchain root."""
        return toolchain_root / "lib" / "rustlib" / self.target_triple / "lib"

    def library_path_flag(self, library_directory: Path) -> str:
        return f"{self.library_path_flag_prefix}{library_directory}"
