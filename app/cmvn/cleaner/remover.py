"""Removal of candidate directories.

Removal stops at the first directory that cannot be deleted. Directories
removed before the failure stay removed; there is no rollback.
"""

import logging
import shutil
from collections.abc import Callable, Sequence
from pathlib import Path

from cmvn.cleaner.errors import DeletionError
from cmvn.cleaner.models import RemovalStage

logger = logging.getLogger(__name__)

StatusCallback = Callable[[Path, RemovalStage], None]


class CandidateRemover:
    """Deletes candidate directories recursively, in order.

    Attributes:
        _dry_run: If True, report what would be removed without deleting.
    """

    def __init__(
        self,
        *,
        dry_run: bool = False,
        on_status: StatusCallback | None = None,
    ) -> None:
        """Initialize the CandidateRemover.

        Args:
            dry_run: If True, report what would be removed without deleting.
            on_status: Called before and after each directory is handled.
        """
        self._dry_run = dry_run
        self._on_status = on_status

    def remove(self, candidates: Sequence[Path]) -> int:
        """Remove every candidate directory with all of its contents.

        Args:
            candidates: Directories to delete, in order.

        Returns:
            Number of directories removed (or that would be, in dry-run).

        Raises:
            DeletionError: On the first directory that cannot be removed.
        """
        removed = 0

        for path in candidates:
            if self._dry_run:
                logger.info("Dry-run: would remove %s", path)
                self._notify(path, RemovalStage.DRY_RUN)
                removed += 1
                continue

            self._notify(path, RemovalStage.ATTEMPTING)
            try:
                shutil.rmtree(path)
            except OSError as e:
                logger.debug("Failed to remove %s: %s", path, e)
                raise DeletionError(path, removed, str(e)) from e

            removed += 1
            logger.info("Removed %s", path)
            self._notify(path, RemovalStage.REMOVED)

        return removed

    def _notify(self, path: Path, stage: RemovalStage) -> None:
        if self._on_status is not None:
            self._on_status(path, stage)
