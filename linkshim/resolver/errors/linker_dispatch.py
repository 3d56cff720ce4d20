from pathlib import Path

from linkshim.exceptions import LinkShimError
from linkshim.resolver.stages import ResolverStage


class LinkerDispatchError(LinkShimError):
    stage = ResolverStage.DISPATCHING

    def __init__(self, linker_executable: Path, reason: str) -> None:
        self.linker_executable = linker_executable
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to execute linker `{self.linker_executable}`!

Linker was found but operating system refused to start it ({self.reason}).
Is it an executable file with execute permission?

{self.generic_error_name}"""
