"""Rich display helpers for the cleanup run.

Builds the status-line messages shown under the spinner, the table of
planned removals and the final summary.
"""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from cmvn.cleaner.models import RemovalStage, ScanResult
from cmvn.utils.formatting import console, format_path, print_info, print_success


def scan_status(entry: Path) -> str:
    """Spinner message for an entry being scanned."""
    return f"Loading... [muted]{escape(entry.name)}[/]"


def removal_status(path: Path, stage: RemovalStage) -> str:
    """Spinner message for a directory being removed."""
    if stage == RemovalStage.ATTEMPTING:
        return f"Prepare to remove {format_path(path)}"
    if stage == RemovalStage.DRY_RUN:
        return f"Would remove {format_path(path)}"
    return f"Removed {format_path(path)} [success]success[/]"


def create_candidates_table(result: ScanResult, dry_run: bool = False) -> Table:
    """Create a Rich table listing the directories to remove.

    Paths are shown relative to the scanned repository.

    Args:
        result: Scan result holding the candidates.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table configured for candidate display.
    """
    title = "Failed Packages (Dry Run)" if dry_run else "Failed Packages"

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", style="muted")
    table.add_column("Directory", style="path", overflow="fold")

    for index, path in enumerate(result.candidates, start=1):
        try:
            shown = path.relative_to(result.repository)
        except ValueError:
            shown = path
        table.add_row(str(index), escape(str(shown)))

    return table


def print_scan_summary(result: ScanResult) -> None:
    """Print how many entries were scanned and skipped."""
    message = f"Scanned {result.entries_visited} entries in {format_path(result.repository)}"
    if result.entries_skipped:
        message += f" [warning]({result.entries_skipped} unreadable, skipped)[/]"
    console.print(f"[muted]{message}[/]", soft_wrap=True)


def print_removal_summary(removed: int, dry_run: bool = False) -> None:
    """Print the final removed count."""
    if dry_run:
        print_info(f"Dry-run: {removed} failed package(s) would be removed.")
        return
    print_success(f"Successful count {removed} !")
