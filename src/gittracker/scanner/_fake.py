"""Fake status query for testing.

This module provides a FakeStatusQuery that satisfies StatusQuery without
invoking git, returning canned porcelain output per repository.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from gittracker.utils._exec import CommandResult


@dataclass(slots=True)
class FakeStatusQuery:
    """Fake status query for testing.

    Paths without canned output return an empty successful result, which
    reads as a clean repository. Paths listed in ``failures`` behave as if
    the tool could not be launched. Keys may be strings or ``Path`` objects;
    they are matched against the queried path's string form.

    Example:
        >>> query = FakeStatusQuery()
        >>> query.outputs["repo"] = "? new.txt\\n"
        >>> query("repo").stdout
        '? new.txt\\n'
    """

    outputs: dict[str | Path, str] = field(default_factory=dict)
    failures: set[str | Path] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)

    def __call__(self, repo_root: str | os.PathLike[str]) -> CommandResult:
        path = os.fspath(repo_root)
        self.calls.append(path)
        if path in {os.fspath(failure) for failure in self.failures}:
            return CommandResult(
                success=False,
                error=f"git: command not found ({path})",
                command_not_found=True,
            )
        outputs = {os.fspath(key): value for key, value in self.outputs.items()}
        return CommandResult(
            success=True,
            exit_code=0,
            stdout=outputs.get(path, ""),
        )
