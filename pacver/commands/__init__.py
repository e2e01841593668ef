"""Subcommands of the ``pacver`` command line."""
