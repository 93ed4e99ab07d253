import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest
from dulwich.repo import Repo


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def require_git() -> None:
    if shutil.which("git") is None:
        pytest.skip("git executable not available")


def git(path: Path, *args: str) -> str:
    """Run a git command in the given path and return its stdout."""
    result = subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=str(path),
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def init_git_repo(path: Path) -> None:
    """Initialize a minimal git repository in the given path."""
    path.mkdir(parents=True, exist_ok=True)
    _ = git(path, "init")
    _ = git(path, "config", "user.email", "test@example.com")
    _ = git(path, "config", "user.name", "Test User")


def commit_file(repo: Path, name: str, content: str = "content\n") -> None:
    """Write a file and commit it."""
    (repo / name).write_text(content)
    _ = git(repo, "add", name)
    _ = git(repo, "commit", "-m", f"Add {name}")


@dataclass(frozen=True, slots=True)
class TrackedRepo:
    """A working tree with a bare remote configured as its upstream."""

    root: Path
    remote: Path


@pytest.fixture
def scan_dir(tmp_path: Path) -> Path:
    path = tmp_path / "scan"
    path.mkdir()
    return path


@pytest.fixture
def make_tracked_repo(tmp_path: Path) -> Callable[[Path], TrackedRepo]:
    """Return a factory creating a committed repo pushed to a bare remote."""

    def _make(root: Path) -> TrackedRepo:
        remote = tmp_path / "remotes" / f"{root.name}.git"
        remote.mkdir(parents=True)
        _ = Repo.init_bare(str(remote))

        init_git_repo(root)
        commit_file(root, "README.md")
        _ = git(root, "remote", "add", "origin", str(remote))
        _ = git(root, "push", "-u", "origin", "HEAD")
        return TrackedRepo(root=root, remote=remote)

    return _make


def make_empty_repo(root: Path) -> Path:
    """Create a repository with no commits."""
    root.mkdir(parents=True, exist_ok=True)
    _ = Repo.init(str(root))
    return root
