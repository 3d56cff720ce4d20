from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class LinkerInvocation:
    """Fully resolved linker call, ready to be dispatched."""

    linker_executable: Path
    library_path_flag: str

    # Opaque to us, never inspected or rewritten
    passthrough_args: tuple[str, ...]

    @property
    def arguments(self) -> list[str]:
        """Arguments passed to linker (without executable itself)."""
        return [self.library_path_flag, *self.passthrough_args]

    @property
    def command(self) -> list[str]:
        return [str(self.linker_executable), *self.arguments]
