"""Console reporting for traversal runs.

Provides the Rich-backed reporter the run command hands to a session,
plus the end-of-run summary printers.
"""

from rich.markup import escape
from rich.table import Table

from zfsrewrite.models.walk import WalkSummary
from zfsrewrite.utils.formatting import (
    err_console,
    print_error,
    print_info,
    print_path,
    print_success,
    print_warning,
    printable,
)
from zfsrewrite.walker.errors import ActionError, WalkerError
from zfsrewrite.walker.session import WalkReporter


class ConsoleReporter(WalkReporter):
    """Reports walk progress on the shared consoles.

    Errors and status messages go to stderr; the verbose dry-run listing
    goes to stdout so it can be piped.
    """

    def entry_failed(self, error: WalkerError) -> None:
        print_error(str(error))

    def file_previewed(self, path: str) -> None:
        print_path(path)

    def resume_point_found(self, path: str, *, dry_run: bool) -> None:
        if not dry_run:
            print_info(f"Found resume point. Resuming processing FROM: {path}")

    def action_failed(self, error: ActionError) -> None:
        print_error(str(error))


def create_issues_table(summary: WalkSummary) -> Table:
    """Create a Rich table listing every recovered error.

    Args:
        summary: Finished walk summary.

    Returns:
        Rich Table with Stage, Path and Message columns.
    """
    table = Table(
        title="Errors During Walk",
        show_header=True,
        header_style="header",
        border_style="border",
    )
    table.add_column("Stage", width=8)
    table.add_column("Path", style="path", overflow="fold")
    table.add_column("Message", style="muted")

    for issue in summary.issues:
        table.add_row(
            issue.kind.value,
            escape(printable(issue.path)),
            escape(printable(issue.message)),
        )

    return table


def print_run_summary(summary: WalkSummary) -> None:
    """Print the outcome of a finished real run.

    Shows counts of processed, failed and skipped files and, when any
    error was recovered during the walk, a table of them.

    Args:
        summary: Finished walk summary.
    """
    if summary.issues:
        err_console.print(create_issues_table(summary))

    parts = [f"{summary.files_processed} processed"]
    if summary.files_failed:
        parts.append(f"[error]{summary.files_failed} failed[/error]")
    if summary.files_skipped:
        parts.append(f"{summary.files_skipped} skipped before resume point")
    err_console.print(f"Summary: {', '.join(parts)}", highlight=False, soft_wrap=True)

    if summary.files_failed:
        print_warning(f"{summary.files_failed} file(s) could not be rewritten.")
    else:
        print_success("All processing complete.")
