"""Main CLI application entry point.

Defines the Typer application and wires the cleanup steps together:
resolve the repository, scan it, confirm and remove.
"""

import sys
from typing import Annotated

import typer

from cmvn import PROJECT_URL, __version__
from cmvn.cleaner.errors import DeletionError, InputReadError, InvalidRepositoryError
from cmvn.cleaner.gate import confirm_removal
from cmvn.cleaner.remover import CandidateRemover
from cmvn.cleaner.resolver import resolve_repository
from cmvn.cleaner.scanner import MarkerScanner
from cmvn.cli.display import (
    create_candidates_table,
    print_removal_summary,
    print_scan_summary,
    removal_status,
    scan_status,
)
from cmvn.core.config import ConfigError, load_config
from cmvn.utils.formatting import console, format_path, print_error, print_warning
from cmvn.utils.log import configure_logging

app = typer.Typer(
    name="cmvn",
    help="Remove failed downloads from a local Maven repository.",
    no_args_is_help=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"cmvn version {__version__}")
        raise typer.Exit()


@app.command()
def clean(
    root: Annotated[
        str | None,
        typer.Argument(
            help="Maven root path (the directory holding 'repository'). "
            "Defaults to ~/.m2, or C:\\Users\\.m2 on Windows.",
            show_default=False,
        ),
    ] = None,
    silent: Annotated[
        bool,
        typer.Option("--silent", "-s", help="Do not wait for confirmation."),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
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
) -> None:
    """Scan the repository for *.lastUpdated markers and remove their directories.

    Counts are of directories: several markers in one directory count once.
    """
    configure_logging(verbose)

    try:
        config = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    silent = silent or config.silent
    console.print(f"[muted]the project is open-sourced on GitHub: {PROJECT_URL}[/]")

    try:
        repository = resolve_repository(root or config.root, platform_tag=sys.platform)
    except InvalidRepositoryError as e:
        print_error(f"This repository {format_path(e.path)} does not exist.")
        raise typer.Exit(code=1) from e

    with console.status("Loading...") as status:
        scanner = MarkerScanner(on_entry=lambda entry: status.update(scan_status(entry)))
        result = scanner.scan(repository)

    if verbose:
        print_scan_summary(result)

    if not result.is_empty and (not silent or dry_run):
        console.print(create_candidates_table(result, dry_run=dry_run))

    try:
        confirm_removal(result.candidates, silent=silent or dry_run)
    except InputReadError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    with console.status("Removing...") as status:
        remover = CandidateRemover(
            dry_run=dry_run,
            on_status=lambda path, stage: status.update(removal_status(path, stage)),
        )
        try:
            removed = remover.remove(result.candidates)
        except DeletionError as e:
            status.stop()
            print_error(f"Failed to remove {format_path(e.path)}: {e.reason}")
            print_warning(f"{e.removed_count} of {result.count} failed package(s) removed.")
            raise typer.Exit(code=1) from e

    print_removal_summary(removed, dry_run=dry_run)


if __name__ == "__main__":
    app()
