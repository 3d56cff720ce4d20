from collections.abc import Iterable
from pathlib import Path

from linkshim.exceptions import LinkShimError
from linkshim.resolver.stages import ResolverStage


class LinkerNotFoundError(LinkShimError):
    stage = ResolverStage.RESOLVING_LINKER

    def __init__(self, probed_paths: Iterable[Path]) -> None:
        self.probed_paths = tuple(probed_paths)

    def __repr__(self) -> str:
        probed = "\n".join(f"\t{path}" for path in self.probed_paths)
        return f"""Unable to locate toolchain bundled linker!

None of known linker locations exist:
{probed}

Possible solutions: Install linker (e.g LLVM `lld-link`) into one of locations above

{self.generic_error_name}"""
