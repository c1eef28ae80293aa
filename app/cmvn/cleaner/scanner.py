"""Repository scanner for failed download markers.

Maven leaves a ``*.lastUpdated`` file next to an artifact whose download
was interrupted or failed. The directory holding such a marker is
considered broken and becomes a removal candidate.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from cmvn.cleaner.models import ScanResult

logger = logging.getLogger(__name__)

MARKER_SUFFIX = ".lastUpdated"

EntryCallback = Callable[[Path], None]


def is_marker(name: str) -> bool:
    """Check whether a file name is a failed download marker."""
    return name.endswith(MARKER_SUFFIX)


class MarkerScanner:
    """Walks a repository and collects directories holding marker files.

    Args:
        on_entry: Called with every visited entry, for progress display.
    """

    def __init__(self, *, on_entry: EntryCallback | None = None) -> None:
        self._on_entry = on_entry
        self._skipped = 0

    def scan(self, root: Path) -> ScanResult:
        """Scan a repository and return the candidate directories.

        Every marker contributes its parent directory, in the order the
        first marker of that directory was found. A directory holding
        several markers (e.g. for both the .pom and the .jar) is listed once.

        Args:
            root: Repository directory to scan.

        Returns:
            ScanResult with candidates and walk statistics.
        """
        # dict keeps insertion order
        candidates: dict[Path, None] = {}
        visited = 0

        for entry in self.iter_entries(root):
            visited += 1
            if self._on_entry is not None:
                self._on_entry(entry)
            if is_marker(entry.name):
                logger.debug("Marker found: %s", entry)
                candidates.setdefault(entry.parent, None)

        logger.debug(
            "Scanned %d entries under %s (%d skipped, %d candidates)",
            visited,
            root,
            self._skipped,
            len(candidates),
        )
        return ScanResult(
            repository=root,
            candidates=tuple(candidates),
            entries_visited=visited,
            entries_skipped=self._skipped,
        )

    def iter_entries(self, root: Path) -> Iterator[Path]:
        """Yield every entry below root, depth-first.

        Children are visited in sorted order. Symlinked directories are
        yielded but not followed. Unreadable directories and entries are
        skipped.

        Args:
            root: Directory to walk.

        Yields:
            Paths of files and directories below root.
        """
        self._skipped = 0
        yield from self._walk(root)

    def _walk(self, directory: Path) -> Iterator[Path]:
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            self._skipped += 1
            return

        for entry in entries:
            try:
                descend = entry.is_dir() and not entry.is_symlink()
            except OSError as e:
                logger.debug("Skipping unreadable entry %s: %s", entry, e)
                self._skipped += 1
                continue

            yield entry
            if descend:
                yield from self._walk(entry)
