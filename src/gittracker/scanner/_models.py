"""Scan result models.

This module defines the per-repository status record and the aggregate
produced by a single scan.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class RepoStatus:
    """Local change status for one discovered repository.

    A record whose status query failed keeps every count at zero, so it reads
    the same as a clean repository.

    Attributes:
        path: Working-tree root (the directory holding the marker), in the
            form discovery produced it.
        uncommitted_changes: Number of changed, renamed, unmerged and
            untracked entries.
        unpushed_commits: Commits ahead of the configured upstream, 0 when
            there is no upstream.
        has_upstream: True if the current branch has an upstream configured.
    """

    path: str
    uncommitted_changes: int = 0
    unpushed_commits: int = 0
    has_upstream: bool = False

    @property
    def is_dirty(self) -> bool:
        """Return True if there are uncommitted changes or unpushed commits."""
        return self.uncommitted_changes > 0 or self.unpushed_commits > 0

    def to_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Convert the record to a JSON-compatible dictionary.

        Returns:
            Dictionary with path, is_dirty, uncommitted_changes,
            unpushed_commits and has_upstream keys, in that order.
        """
        return {
            "path": self.path,
            "is_dirty": self.is_dirty,
            "uncommitted_changes": self.uncommitted_changes,
            "unpushed_commits": self.unpushed_commits,
            "has_upstream": self.has_upstream,
        }


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Ordered statuses of every repository found under a scan root.

    Attributes:
        repos: Repository statuses in discovery order.
    """

    repos: tuple[RepoStatus, ...] = ()

    @property
    def total(self) -> int:
        return len(self.repos)

    @property
    def dirty_count(self) -> int:
        return sum(1 for repo in self.repos if repo.is_dirty)

    @property
    def clean_count(self) -> int:
        return self.total - self.dirty_count

    @property
    def uncommitted_count(self) -> int:
        """Number of repositories with at least one uncommitted change."""
        return sum(1 for repo in self.repos if repo.uncommitted_changes > 0)

    @property
    def unpushed_count(self) -> int:
        """Number of repositories with at least one unpushed commit."""
        return sum(1 for repo in self.repos if repo.unpushed_commits > 0)

    @property
    def has_dirty(self) -> bool:
        return any(repo.is_dirty for repo in self.repos)

    def dirty(self) -> tuple[RepoStatus, ...]:
        return tuple(repo for repo in self.repos if repo.is_dirty)

    def clean(self) -> tuple[RepoStatus, ...]:
        return tuple(repo for repo in self.repos if not repo.is_dirty)

    def to_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Convert the result to a JSON-compatible dictionary.

        Returns:
            Dictionary with the repository count under "total" and the
            serialized records under "repos".
        """
        return {
            "total": self.total,
            "repos": [repo.to_dict() for repo in self.repos],
        }
