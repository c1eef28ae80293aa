"""Data structures produced while cleaning a repository."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class RemovalStage(str, Enum):
    """Progress stage reported for each candidate during removal.

    Attributes:
        ATTEMPTING: About to delete the directory.
        REMOVED: Directory and its contents are gone.
        DRY_RUN: Directory would have been deleted (nothing touched).
    """

    ATTEMPTING = "attempting"
    REMOVED = "removed"
    DRY_RUN = "dry_run"


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of scanning a repository for marker files.

    Attributes:
        repository: Repository directory that was scanned.
        candidates: Parent directories of every marker file, in discovery order.
        entries_visited: Number of filesystem entries walked.
        entries_skipped: Number of entries or directories that could not be read.
    """

    repository: Path
    candidates: tuple[Path, ...]
    entries_visited: int = 0
    entries_skipped: int = 0

    @property
    def count(self) -> int:
        """Number of candidate directories."""
        return len(self.candidates)

    @property
    def is_empty(self) -> bool:
        """True if no marker files were found."""
        return not self.candidates
