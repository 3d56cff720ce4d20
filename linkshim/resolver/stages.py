from enum import Enum, auto


class ResolverStage(Enum):
    """Strictly sequential stages of single shim invocation.

    Any failure moves straight to termination, there is no going back or retrying.
    """

    DISCOVERING_TOOLCHAIN = auto()
    VALIDATING_LIBRARY_DIR = auto()
    RESOLVING_LINKER = auto()
    DISPATCHING = auto()
