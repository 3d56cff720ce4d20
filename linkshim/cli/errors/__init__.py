from .error_handler import cli_linkshim_error_handler

__all__ = ["cli_linkshim_error_handler"]
