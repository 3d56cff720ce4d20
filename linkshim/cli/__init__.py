"""Command line interface, called by build systems in place of linker."""
