"""Linkshim, toolchain-resolving linker invocation shim.

Locates Rust target libraries and a linker executable, then runs that linker
with target library search path injected before caller arguments.
"""

from .resolver import resolve_linker_invocation, run_linker_shim
from .toolchain import ToolchainLayout

__all__ = [
    "ToolchainLayout",
    "resolve_linker_invocation",
    "run_linker_shim",
]
