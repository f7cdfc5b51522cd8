"""Run command implementation.

Walks the given targets breadth-first and runs ``zfs rewrite`` on every
regular file, optionally resuming from a file reached by an earlier,
interrupted run.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from zfsrewrite.actions.rewrite import ZfsRewriteAction
from zfsrewrite.cli.display import ConsoleReporter, print_run_summary
from zfsrewrite.core.settings import RewriteSettings, SettingsError, load_settings
from zfsrewrite.models.action import RewriteOptions
from zfsrewrite.models.walk import WalkConfig
from zfsrewrite.utils.formatting import print_error, print_info, print_warning
from zfsrewrite.walker.errors import ResumeNotFoundError
from zfsrewrite.walker.session import RewriteSession

# Conventional exit status for SIGINT
_EXIT_INTERRUPTED = 130


def _load_settings_or_exit(path: Path | None) -> RewriteSettings:
    """Load settings, exiting with status 1 on failure."""
    try:
        return load_settings(path)
    except SettingsError as e:
        print_error(f"Failed to load settings: {e}")
        raise typer.Exit(code=1) from e


def _pick(flag: bool | None, default: bool) -> bool:
    """Use the command-line flag when given, else the settings value."""
    return default if flag is None else flag


def run(
    targets: Annotated[
        list[str],
        typer.Argument(
            help="Files or directories to rewrite.",
            show_default=False,
        ),
    ],
    length: Annotated[
        int | None,
        typer.Option(
            "--length",
            "-l",
            min=0,
            help="Rewrite at most this number of bytes (passed to zfs rewrite).",
        ),
    ] = None,
    offset: Annotated[
        int | None,
        typer.Option(
            "--offset",
            "-o",
            min=0,
            help="Start at this offset in bytes (passed to zfs rewrite).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Print names of rewritten files. In a dry run, print every visited file.",
        ),
    ] = False,
    one_file_system: Annotated[
        bool | None,
        typer.Option(
            "--one-file-system/--cross-file-system",
            "-x",
            help=(
                "Don't cross file system mount points when recursing. "
                "Default from settings, else cross them."
            ),
            show_default=False,
        ),
    ] = None,
    resume_from: Annotated[
        str | None,
        typer.Option(
            "--resume-from",
            "-c",
            help=(
                "Full path of the file to resume processing FROM, exactly as this "
                "tool prints it. Files before it in traversal order are skipped."
            ),
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Traverse without rewriting and exit successfully once the -c file is found.",
        ),
    ] = False,
    sort_entries: Annotated[
        bool | None,
        typer.Option(
            "--sorted/--listing-order",
            help=(
                "Visit directory entries in name order instead of listing order. "
                "Default from settings, else listing order."
            ),
            show_default=False,
        ),
    ] = None,
    zfs_command: Annotated[
        str | None,
        typer.Option(
            "--zfs-command",
            help="zfs executable to run (default from settings, else 'zfs').",
        ),
    ] = None,
    settings_path: Annotated[
        Path | None,
        typer.Option(
            "--settings",
            help="Settings file to use instead of the default location.",
        ),
    ] = None,
) -> None:
    """Rewrite files breadth-first, resuming from a given file if asked.

    Mimics the traversal order of a recursive zfs rewrite: all files of a
    directory are rewritten before any of its subdirectories is entered.
    When a run is interrupted, pass the last file it reported to -c to pick
    up from that file on the next run.

    Examples:
        zfs-rewrite-resume run -v /tank/data
        zfs-rewrite-resume run -n -v -c /tank/data/b/f.bin /tank/data
        zfs-rewrite-resume run -c /tank/data/b/f.bin /tank/data
    """
    settings = _load_settings_or_exit(settings_path)

    try:
        config = WalkConfig(
            roots=targets,
            resume_path=resume_from,
            one_file_system=_pick(one_file_system, settings.one_file_system),
            dry_run=dry_run,
            verbose=verbose,
            sort_entries=_pick(sort_entries, settings.sort_entries),
        )
    except ValidationError as e:
        print_error(f"Invalid arguments: {e}")
        raise typer.Exit(code=2) from e

    action = ZfsRewriteAction(
        RewriteOptions(length=length, offset=offset, verbose=verbose),
        command=zfs_command or settings.zfs_command,
        timeout=settings.action_timeout,
    )

    if not dry_run and not action.is_available():
        print_error(f"Command not found: {action.name}")
        raise typer.Exit(code=1)

    if resume_from is not None and not dry_run:
        print_info(f"Resume mode enabled. Will skip files until {resume_from} is found.")
    if dry_run:
        print_info("Dry run mode is active. Simulating traversal...")

    session = RewriteSession(config, action, reporter=ConsoleReporter())

    try:
        summary = session.run()
    except KeyboardInterrupt:
        last_path = session.summary.last_path
        print_warning("Interrupted.")
        if last_path is not None:
            print_info(f"To continue, re-run with: -c {last_path}")
        raise typer.Exit(code=_EXIT_INTERRUPTED) from None

    try:
        summary.raise_for_status()
    except ResumeNotFoundError as e:
        print_warning(str(e))
        raise typer.Exit(code=1) from e

    if dry_run:
        if summary.halted:
            print_info("Dry run successful. Found resume point and will now exit.")
        else:
            print_info(f"Dry run complete. {summary.files_seen} file(s) visited.")
        return

    print_run_summary(summary)
