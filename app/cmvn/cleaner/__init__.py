"""Repository cleaning module.

This module locates the Maven repository, scans it for failed download
markers, confirms with the operator and removes the broken directories.
"""

from cmvn.cleaner.errors import (
    CleanerError,
    DeletionError,
    InputReadError,
    InvalidRepositoryError,
)
from cmvn.cleaner.gate import confirm_removal
from cmvn.cleaner.models import RemovalStage, ScanResult
from cmvn.cleaner.remover import CandidateRemover
from cmvn.cleaner.resolver import (
    DEFAULT_ROOTS,
    REPOSITORY_DIR,
    default_root,
    expand_home,
    resolve_repository,
)
from cmvn.cleaner.scanner import MARKER_SUFFIX, MarkerScanner, is_marker

__all__ = [
    "DEFAULT_ROOTS",
    "MARKER_SUFFIX",
    "REPOSITORY_DIR",
    "CandidateRemover",
    "CleanerError",
    "DeletionError",
    "InputReadError",
    "InvalidRepositoryError",
    "MarkerScanner",
    "RemovalStage",
    "ScanResult",
    "confirm_removal",
    "default_root",
    "expand_home",
    "is_marker",
    "resolve_repository",
]
