"""CLI commands for dirkit.

This package contains all subcommand implementations.
"""

from dirkit.cli.commands import config, copy, info, search, walk

__all__ = ["config", "copy", "info", "search", "walk"]
