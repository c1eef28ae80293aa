"""Logging setup for the CLI.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
CLI decides where records go and at which level.
"""

import logging

from rich.logging import RichHandler

from cmvn.utils.formatting import err_console


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: If True, log at DEBUG level; otherwise only warnings and errors.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
