from abc import ABC, abstractmethod
from pathlib import Path


class FilesystemProbe(ABC):
    """Read-only existence checks, no file contents are ever read."""

    @abstractmethod
    def is_directory(self, path: Path) -> bool: ...

    @abstractmethod
    def is_file(self, path: Path) -> bool: ...


class LocalFilesystemProbe(FilesystemProbe):
    """Anything that cannot be inspected (e.g no permissions) is treated as missing."""

    def is_directory(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False

    def is_file(self, path: Path) -> bool:
        try:
            return path.is_file()
        except OSError:
            return False
