"""Utility modules for zfsrewrite.

This module exports commonly used utility functions.
"""

from zfsrewrite.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_path,
    print_success,
    print_warning,
    printable,
)
from zfsrewrite.utils.shell import command_exists, run_interactive

__all__ = [
    "command_exists",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_path",
    "print_success",
    "print_warning",
    "printable",
    "run_interactive",
]
