from pathlib import Path

import pytest

from linkshim.resolver import LinkerInvocation, ResolverStage, dispatch_linker
from linkshim.resolver.errors import LinkerDispatchError


def _invocation(*args: str) -> LinkerInvocation:
    return LinkerInvocation(
        linker_executable=Path("/usr/bin/lld-link"),
        library_path_flag="/LIBPATH:/opt/toolchain/lib",
        passthrough_args=args,
    )


def test_invocation_command() -> None:
    invocation = _invocation("/OUT:a.exe", "main.obj")
    assert invocation.command == [
        "/usr/bin/lld-link",
        "/LIBPATH:/opt/toolchain/lib",
        "/OUT:a.exe",
        "main.obj",
    ]


def test_invocation_command_without_arguments() -> None:
    assert _invocation().command == ["/usr/bin/lld-link", "/LIBPATH:/opt/toolchain/lib"]


@pytest.mark.parametrize("exit_code", [0, 1, 2, 255])
def test_dispatch_propagates_exit_code(runner, exit_code) -> None:
    runner.linker_exit_code = exit_code
    assert dispatch_linker(_invocation("main.obj"), runner) == exit_code
    assert runner.dispatched_commands == [_invocation("main.obj").command]


def test_dispatch_unexecutable_linker(runner) -> None:
    runner.linker_spawn_error = PermissionError(13, "Permission denied", "/usr/bin/lld-link")
    with pytest.raises(LinkerDispatchError) as exc_info:
        dispatch_linker(_invocation(), runner)

    error = exc_info.value
    assert error.stage == ResolverStage.DISPATCHING
    assert error.linker_executable == Path("/usr/bin/lld-link")
    assert "Permission denied" in repr(error)
    assert "[linker-dispatch-error]" in repr(error)
