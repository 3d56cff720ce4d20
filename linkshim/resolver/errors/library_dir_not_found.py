from pathlib import Path

from linkshim.exceptions import LinkShimError
from linkshim.resolver.stages import ResolverStage


class LibraryDirNotFoundError(LinkShimError):
    stage = ResolverStage.VALIDATING_LIBRARY_DIR

    def __init__(self, library_directory: Path, target_triple: str) -> None:
        self.library_directory = library_directory
        self.target_triple = target_triple

    def __repr__(self) -> str:
        return f"""Target libraries for `{self.target_triple}` not found!

Expected directory `{self.library_directory}` to exist, but it does not.
Linker would fail to find standard libraries without it.

Possible solutions: Install target support (e.g `rustup target add {self.target_triple}`)

{self.generic_error_name}"""
