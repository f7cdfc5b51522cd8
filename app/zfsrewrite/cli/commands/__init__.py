"""CLI commands for zfsrewrite.

This package contains all subcommand implementations.
"""

from zfsrewrite.cli.commands import config, run

__all__ = ["config", "run"]
