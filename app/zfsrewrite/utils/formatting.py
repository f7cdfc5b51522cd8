"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import os
import sys

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "#f53263",
        "info": "#0ec1c8",
        "path": "#c1ff62",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances. Status messages go to stderr so stdout only
# carries file paths (dry-run listing) and zfs output. Emoji codes are off
# because ":name:" is a legal part of a file name.
console = Console(theme=_THEME, color_system=_detect_color_system(), emoji=False)
err_console = Console(
    theme=_THEME, stderr=True, color_system=_detect_color_system(), emoji=False
)


def printable(message: str) -> str:
    """Replace undecodable file name bytes with backslash escapes.

    os.listdir() returns names that are not valid UTF-8 with surrogate
    escapes, which a text stream cannot encode. Each such byte is shown
    as ``\\xNN`` instead.
    """
    return message.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def print_path(path: str) -> None:
    """Print a bare file path to stdout, byte for byte.

    The path is written as the raw bytes the OS returned, so names that
    are not valid UTF-8 come out exactly as they are on disk and can be
    passed back to ``-c`` unchanged.
    """
    stream = console.file
    stream.flush()
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(printable(path) + "\n")
        return
    buffer.write(os.fsencode(path) + b"\n")
    buffer.flush()


def print_info(message: str) -> None:
    """Print an info message."""
    err_console.print(
        f"[info]INFO:[/] {escape(printable(message))}", highlight=False, soft_wrap=True
    )


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(
        f"[warning]WARNING:[/] {escape(printable(message))}", highlight=False, soft_wrap=True
    )


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(
        f"[error]ERROR:[/] {escape(printable(message))}", highlight=False, soft_wrap=True
    )


def print_success(message: str) -> None:
    """Print a success message."""
    err_console.print(
        f"[success]{escape(printable(message))}[/]", highlight=False, soft_wrap=True
    )
