from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess

import pytest

from linkshim.host import FilesystemProbe, ProcessRunner
from linkshim.toolchain import ToolchainLayout

TOOLCHAIN_ROOT = Path("/opt/toolchain")
TARGET_TRIPLE = "x86_64-pc-windows-msvc"
LIBRARY_DIRECTORY = TOOLCHAIN_ROOT / "lib" / "rustlib" / TARGET_TRIPLE / "lib"
LINKER_CANDIDATES = (
    Path("/usr/bin/lld-link"),
    Path("/usr/local/bin/lld-link"),
    Path("/usr/lib/llvm/bin/lld-link"),
)


class FakeProcessRunner(ProcessRunner):
    """Records commands instead of spawning processes."""

    def __init__(self) -> None:
        self.discovery_stdout = f"{TOOLCHAIN_ROOT}\n".encode()
        self.discovery_returncode = 0
        self.discovery_error: OSError | None = None
        self.linker_exit_code = 0
        self.linker_spawn_error: OSError | None = None

        self.captured_commands: list[list[str]] = []
        self.dispatched_commands: list[list[str]] = []

    def capture_output(self, command: Sequence[str]) -> CompletedProcess[bytes]:
        self.captured_commands.append(list(command))
        if self.discovery_error is not None:
            raise self.discovery_error
        return CompletedProcess(
            args=list(command),
            returncode=self.discovery_returncode,
            stdout=self.discovery_stdout,
        )

    def run_inheriting_streams(self, command: Sequence[str]) -> int:
        self.dispatched_commands.append(list(command))
        if self.linker_spawn_error is not None:
            raise self.linker_spawn_error
        return self.linker_exit_code


class FakeFilesystemProbe(FilesystemProbe):
    def __init__(self, *, directories: set[Path], files: set[Path]) -> None:
        self.directories = directories
        self.files = files
        self.probed_files: list[Path] = []

    def is_directory(self, path: Path) -> bool:
        return path in self.directories

    def is_file(self, path: Path) -> bool:
        self.probed_files.append(path)
        return path in self.files


@pytest.fixture
def layout() -> ToolchainLayout:
    return ToolchainLayout(
        target_triple=TARGET_TRIPLE,
        toolchain_introspection_command=("rustc", "--print", "sysroot"),
        linker_candidate_paths=LINKER_CANDIDATES,
    )


@pytest.fixture
def runner() -> FakeProcessRunner:
    return FakeProcessRunner()


@pytest.fixture
def filesystem() -> FakeFilesystemProbe:
    """Healthy installation: target libraries and primary linker are present."""
    return FakeFilesystemProbe(
        directories={LIBRARY_DIRECTORY},
        files={LINKER_CANDIDATES[0]},
    )
