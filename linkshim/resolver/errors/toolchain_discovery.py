from collections.abc import Sequence

from linkshim.exceptions import LinkShimError
from linkshim.resolver.stages import ResolverStage


class ToolchainDiscoveryError(LinkShimError):
    stage = ResolverStage.DISCOVERING_TOOLCHAIN

    def __init__(self, command: Sequence[str], reason: str) -> None:
        self.command = tuple(command)
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to discover toolchain installation root!

Command `{" ".join(self.command)}` {self.reason}.
Is toolchain installed and available in PATH?

{self.generic_error_name}"""
