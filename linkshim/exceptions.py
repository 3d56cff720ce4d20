import re
from abc import abstractmethod


def camel_to_kebab(s: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", s).lower()


class LinkShimError(Exception):
    """Base of every failure that stops linkshim before linker is dispatched."""

    @abstractmethod
    def __repr__(self) -> str:
        return f"Linker was not dispatched due to unexpected failure ({super().__repr__()})"

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(self.__class__.__name__)}]"
