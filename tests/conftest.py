"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

MakeMarker = Callable[..., Path]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def maven_root(tmp_path: Path) -> Path:
    """A Maven root (.m2) with an empty repository directory."""
    root = tmp_path / ".m2"
    (root / "repository").mkdir(parents=True)
    return root


@pytest.fixture
def repository(maven_root: Path) -> Path:
    """The repository directory inside maven_root."""
    return maven_root / "repository"


@pytest.fixture
def make_marker(repository: Path) -> MakeMarker:
    """Factory creating an artifact directory with a .lastUpdated marker.

    Returns the artifact directory (the expected removal candidate).
    """

    def _make(
        relative_dir: str,
        name: str = "maven-metadata.xml.lastUpdated",
        with_jar: bool = True,
    ) -> Path:
        directory = repository / relative_dir
        directory.mkdir(parents=True, exist_ok=True)
        (directory / name).write_text("#NOTE: failed download\n")
        if with_jar:
            (directory / f"{directory.parent.name}-{directory.name}.pom").write_text("<project/>")
        return directory

    return _make
