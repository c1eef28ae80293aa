"""Operator confirmation before destructive removal."""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from cmvn.cleaner.errors import InputReadError
from cmvn.utils.formatting import console

logger = logging.getLogger(__name__)

LineReader = Callable[[str], str]


def _read_line(prompt: str) -> str:
    return console.input(prompt)


def confirm_removal(
    candidates: Sequence[Path],
    silent: bool,
    *,
    read_line: LineReader | None = None,
) -> bool:
    """Block until the operator acknowledges the pending removal.

    Returns immediately when there is nothing to remove or when running
    silently. Otherwise waits for one line of input; its content is
    ignored, so undecodable bytes and a closed stdin both count as
    acknowledgement.

    Args:
        candidates: Directories about to be removed.
        silent: Skip the prompt entirely.
        read_line: Reader receiving the prompt markup. Defaults to the
            shared console.

    Returns:
        Always True; the gate only decides whether to wait.

    Raises:
        InputReadError: If reading from stdin fails.
    """
    if not candidates or silent:
        return True

    reader = read_line or _read_line
    prompt = (
        f"\n[warning]Found {len(candidates)} failed packages. "
        "Press Enter to continue...[/]"
    )

    try:
        reader(prompt)
    except EOFError:
        logger.debug("stdin closed at confirmation prompt, continuing")
    except UnicodeDecodeError:
        logger.debug("Undecodable input at confirmation prompt, continuing")
    except OSError as e:
        raise InputReadError(f"Failed to read confirmation: {e}") from e

    return True
