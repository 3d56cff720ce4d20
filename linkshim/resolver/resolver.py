from __future__ import annotations

from typing import TYPE_CHECKING

from linkshim.resolver.discovery import discover_toolchain_root
from linkshim.resolver.dispatch import dispatch_linker
from linkshim.resolver.invocation import LinkerInvocation
from linkshim.resolver.library_directory import validate_target_library_directory
from linkshim.resolver.linker import resolve_linker_executable
from linkshim.resolver.stages import ResolverStage

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from linkshim.host import FilesystemProbe, ProcessRunner
    from linkshim.toolchain import ToolchainLayout


def resolve_linker_invocation(
    args: Sequence[str],
    *,
    layout: ToolchainLayout,
    runner: ProcessRunner,
    filesystem: FilesystemProbe,
    on_trace: Callable[[str], None] | None = None,
) -> LinkerInvocation:
    """Resolve everything required to call linker, failing fast on first problem.

    Nothing is cached, each call performs discovery and all validation again.
    :param on_trace: Receives human-readable progress of each stage (e.g for verbose output)
    :raises LinkShimError: Any of resolution stages failed, no linker is spawned then
    """
    trace = on_trace or _no_trace

    trace(_stage_trace(ResolverStage.DISCOVERING_TOOLCHAIN))
    toolchain_root = discover_toolchain_root(layout, runner)
    trace(f"Toolchain root: {toolchain_root}")

    trace(_stage_trace(ResolverStage.VALIDATING_LIBRARY_DIR))
    library_directory = validate_target_library_directory(
        toolchain_root,
        layout,
        filesystem,
    )
    trace(f"Target libraries: {library_directory}")

    trace(_stage_trace(ResolverStage.RESOLVING_LINKER))
    linker_executable = resolve_linker_executable(layout, filesystem)
    trace(f"Linker: {linker_executable}")

    return LinkerInvocation(
        linker_executable=linker_executable,
        library_path_flag=layout.library_path_flag(library_directory),
        passthrough_args=tuple(args),
    )


def run_linker_shim(
    args: Sequence[str],
    *,
    layout: ToolchainLayout,
    runner: ProcessRunner,
    filesystem: FilesystemProbe,
    on_trace: Callable[[str], None] | None = None,
) -> int:
    """Resolve linker and dispatch it.

    With process replacing runner this never returns, otherwise returns exit status of linker.
    """
    invocation = resolve_linker_invocation(
        args,
        layout=layout,
        runner=runner,
        filesystem=filesystem,
        on_trace=on_trace,
    )

    trace = on_trace or _no_trace
    trace(_stage_trace(ResolverStage.DISPATCHING))
    trace(f"Command: {' '.join(invocation.command)}")
    return dispatch_linker(invocation, runner)


def _stage_trace(stage: ResolverStage) -> str:
    return f"Stage: {stage.name.lower()}"


def _no_trace(_: str) -> None:
    return None
