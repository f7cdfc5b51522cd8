"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from zfsrewrite import __version__
from zfsrewrite.cli.commands import config, run
from zfsrewrite.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="zfs-rewrite-resume",
    help="A restartable, recursive wrapper for 'zfs rewrite'.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"zfs-rewrite-resume version {__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Log every traversal decision to stderr.",
        ),
    ] = False,
) -> None:
    """zfs-rewrite-resume - restartable, breadth-first zfs rewrite.

    Walks files in the same order as a recursive zfs rewrite so that an
    interrupted run can be resumed from the last file it reported.
    """
    _configure_logging(debug)


# Register commands
app.command(name="run")(run.run)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
