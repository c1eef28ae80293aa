"""Locate the Maven repository directory to clean.

The user points cmvn at a Maven root (``~/.m2`` by default); the artifacts
themselves live in its ``repository`` subdirectory.
"""

import logging
import os
import sys
from pathlib import Path

from cmvn.cleaner.errors import InvalidRepositoryError

logger = logging.getLogger(__name__)

# Subdirectory of the Maven root that holds downloaded artifacts
REPOSITORY_DIR = "repository"

_FALLBACK_ROOT = "~/.m2"

# Conventional Maven root per sys.platform tag
DEFAULT_ROOTS: dict[str, str] = {
    "darwin": "~/.m2",
    "linux": "~/.m2",
    "win32": "C:\\Users\\.m2",
}


def default_root(platform_tag: str) -> str:
    """Return the conventional Maven root for a platform.

    Args:
        platform_tag: A ``sys.platform`` value such as "darwin" or "win32".

    Returns:
        Root path string, possibly starting with "~".
    """
    return DEFAULT_ROOTS.get(platform_tag, _FALLBACK_ROOT)


def expand_home(path: str) -> Path:
    """Expand a leading "~" to the current user's home directory.

    Separators directly after the "~" are dropped before joining, so
    "~/.m2" and "~.m2" both land inside the home directory. If the home
    directory cannot be determined the path is returned unchanged.

    Args:
        path: Path string that may start with "~".

    Returns:
        Expanded path.
    """
    if not path.startswith("~"):
        return Path(path)

    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        logger.debug("Cannot determine home directory, using %s literally", path)
        return Path(path)

    remainder = path[1:].lstrip("/" + os.sep)
    return home / remainder


def resolve_repository(root: str | None = None, *, platform_tag: str = sys.platform) -> Path:
    """Resolve the repository directory below a Maven root.

    Args:
        root: Maven root path. If None, uses the platform default.
        platform_tag: Platform used to pick the default root.

    Returns:
        Path to the existing ``repository`` directory.

    Raises:
        InvalidRepositoryError: If the directory does not exist or is not a directory.
    """
    if root is None:
        root = default_root(platform_tag)

    repository = expand_home(root) / REPOSITORY_DIR
    if not repository.is_dir():
        raise InvalidRepositoryError(repository)

    logger.debug("Resolved repository %s", repository)
    return repository
