"""CLI package for zfsrewrite.

This package contains the Typer application and all subcommands.
"""

from zfsrewrite.cli.main import app

__all__ = ["app"]
