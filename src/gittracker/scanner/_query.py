"""Status query interface.

This module defines the boundary between status interpretation and the
external tool that produces porcelain output. ``GitStatusQuery`` shells out
to git; anything else satisfying ``StatusQuery`` (a native reader, a fake for
tests) can take its place without touching discovery or parsing.
"""

import os
from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable

from gittracker.utils._exec import (
    DEFAULT_TIMEOUT_MS,
    CommandConfig,
    CommandResult,
    run_command,
)

# Keeps git status from taking the index lock, so the query stays read-only
_READ_ONLY_ENV: Final = {"GIT_OPTIONAL_LOCKS": "0"}


@runtime_checkable
class StatusQuery(Protocol):
    """Protocol for read-only status queries against a working tree."""

    def __call__(self, repo_root: str | os.PathLike[str]) -> CommandResult:
        """Run the status query for a repository.

        Args:
            repo_root: Working-tree root to query.

        Returns:
            CommandResult whose stdout holds porcelain v2 output with branch
            headers when ``success`` is True.
        """
        ...


@dataclass(frozen=True, slots=True)
class GitStatusQuery:
    """Status query backed by the git executable.

    Attributes:
        git: Name or path of the git executable.
        timeout_ms: Per-query timeout in milliseconds. Zero waits forever.
    """

    git: str = "git"
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def command(self, repo_root: str | os.PathLike[str]) -> tuple[str, ...]:
        """Build the status command for a repository.

        Args:
            repo_root: Working-tree root to query.

        Returns:
            The git command line as a tuple of arguments.
        """
        return (
            self.git,
            "-C",
            os.fspath(repo_root),
            "status",
            "--porcelain=2",
            "--branch",
        )

    def __call__(self, repo_root: str | os.PathLike[str]) -> CommandResult:
        return run_command(
            CommandConfig(
                args=self.command(repo_root),
                env=_READ_ONLY_ENV,
                timeout_ms=self.timeout_ms,
            )
        )
