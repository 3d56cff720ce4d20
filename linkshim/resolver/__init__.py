"""Resolver-dispatcher: toolchain discovery, library/linker validation and linker dispatch.

Workflow: Discover toolchain root -> Validate target library directory -> Resolve linker -> Dispatch
"""

from .discovery import discover_toolchain_root
from .dispatch import dispatch_linker
from .invocation import LinkerInvocation
from .library_directory import validate_target_library_directory
from .linker import resolve_linker_executable
from .resolver import resolve_linker_invocation, run_linker_shim
from .stages import ResolverStage

__all__ = [
    "LinkerInvocation",
    "ResolverStage",
    "discover_toolchain_root",
    "dispatch_linker",
    "resolve_linker_executable",
    "resolve_linker_invocation",
    "run_linker_shim",
    "validate_target_library_directory",
]
