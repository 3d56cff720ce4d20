from collections.abc import Mapping
from typing import Final

# Enables tracing of resolution stages into stderr. Has no impact on resolution itself.
VERBOSE_ENVIRONMENT_VARIABLE: Final[str] = "LINKSHIM_VERBOSE"

_TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


def cli_is_verbose(environ: Mapping[str, str]) -> bool:
    value = environ.get(VERBOSE_ENVIRONMENT_VARIABLE, "")
    return value.strip().lower() in _TRUTHY_VALUES
