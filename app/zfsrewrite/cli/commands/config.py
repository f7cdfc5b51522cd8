"""Settings commands.

Provides commands to show the effective settings and to create a
settings file with default values.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from zfsrewrite.core.paths import get_settings_path
from zfsrewrite.core.settings import (
    RewriteSettings,
    SettingsError,
    load_settings,
    save_settings,
)
from zfsrewrite.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the settings file.",
    no_args_is_help=True,
)

SettingsPathOption = Annotated[
    Path | None,
    typer.Option(
        "--settings",
        help="Settings file to use instead of the default location.",
    ),
]


@app.command()
def show(settings_path: SettingsPathOption = None) -> None:
    """Show the effective settings."""
    path = settings_path or get_settings_path()
    try:
        settings = load_settings(path)
    except SettingsError as e:
        print_error(f"Failed to load settings: {e}")
        raise typer.Exit(code=1) from e

    if not path.exists():
        print_info(f"No settings file at {path}, showing defaults.")

    table = Table(
        title="Settings",
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Key", no_wrap=True)
    table.add_column("Value")

    for key, value in settings.model_dump().items():
        table.add_row(key, "-" if value is None else str(value))

    console.print(table)


@app.command()
def init(
    settings_path: SettingsPathOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with default values."""
    path = settings_path or get_settings_path()

    if path.exists() and not force:
        print_error(f"Settings file already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(RewriteSettings(), path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
