"""Exceptions raised by the repository cleaner.

Unreadable entries met during a scan are not represented here: the
scanner skips and counts them instead of raising.
"""

from pathlib import Path


class CleanerError(Exception):
    """Base exception for repository cleaner errors."""


class InvalidRepositoryError(CleanerError):
    """Raised when the resolved repository path is missing or not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"This repository {path} does not exist.")


class DeletionError(CleanerError):
    """Raised when a candidate directory cannot be removed.

    Attributes:
        path: Directory whose removal failed.
        removed_count: Candidates successfully removed before the failure.
        reason: Underlying OS error message.
    """

    def __init__(self, path: Path, removed_count: int, reason: str) -> None:
        self.path = path
        self.removed_count = removed_count
        self.reason = reason
        super().__init__(f"Failed to remove {path}: {reason}")


class InputReadError(CleanerError):
    """Raised when the confirmation prompt cannot read from stdin."""
