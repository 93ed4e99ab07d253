"""Shared test fixtures for gittracker tests."""

import os
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the real user config, log directory and env."""
    for key in list(os.environ):
        if key.startswith("GITTRACKER_"):
            monkeypatch.delenv(key)

    state_dir = tmp_path / "_gittracker_state"
    monkeypatch.setattr(
        "gittracker.utils._paths.get_log_dir", lambda: state_dir / "logs"
    )
    monkeypatch.setattr(
        "gittracker.config._sources.get_config_dir", lambda: state_dir / "config"
    )


# ---------------------------------------------------------------------------
# Helper functions for creating test trees
# ---------------------------------------------------------------------------


def make_marker_dir(path: Path, *, marker: str = ".git") -> Path:
    """Create a directory holding a marker directory.

    Args:
        path: Directory to mark as a repository root.
        marker: Marker entry name.

    Returns:
        The repository root path.
    """
    (path / marker).mkdir(parents=True, exist_ok=True)
    return path


def make_marker_file(path: Path, *, marker: str = ".git") -> Path:
    """Create a directory holding a gitdir pointer file.

    Args:
        path: Directory to mark as a repository root.
        marker: Marker entry name.

    Returns:
        The repository root path.
    """
    path.mkdir(parents=True, exist_ok=True)
    (path / marker).write_text("gitdir: ../elsewhere/.git\n")
    return path


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
