"""Entry point for CLI.

Only for calling via `python -m linkshim`, build systems should call installed `linkshim` executable.
"""

from linkshim.cli.entry_point import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
