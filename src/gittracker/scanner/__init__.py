"""Repository discovery and status interpretation.

This package finds git working trees under a directory and reports their
local changes.

Functions:
    scan_root: Discover repositories and collect their statuses.
    iter_repo_roots: Yield repository roots under a directory.
    find_repo_roots: List repository roots under a directory.
    interpret: Query one repository and build its status record.
    parse_porcelain_v2: Parse ``git status --porcelain=2 --branch`` output.

Classes:
    StatusQuery: Runtime-checkable protocol for status queries.
    GitStatusQuery: Status query backed by the git executable.
    FakeStatusQuery: Canned status query for tests.

Models:
    RepoStatus: Local change status for one repository.
    ScanResult: Ordered statuses from one scan.
    PorcelainSummary: Counts parsed from porcelain output.

Example:
    >>> from gittracker.scanner import scan_root
    >>> result = scan_root("/home/me/src")
    >>> [repo.path for repo in result.dirty()]
"""

from gittracker.scanner._fake import FakeStatusQuery
from gittracker.scanner._interpreter import interpret
from gittracker.scanner._locator import DEFAULT_MARKER, find_repo_roots, iter_repo_roots
from gittracker.scanner._models import RepoStatus, ScanResult
from gittracker.scanner._porcelain import PorcelainSummary, parse_porcelain_v2
from gittracker.scanner._query import GitStatusQuery, StatusQuery
from gittracker.scanner._scan import scan_root

__all__ = [
    "DEFAULT_MARKER",
    "FakeStatusQuery",
    "GitStatusQuery",
    "PorcelainSummary",
    "RepoStatus",
    "ScanResult",
    "StatusQuery",
    "find_repo_roots",
    "interpret",
    "iter_repo_roots",
    "parse_porcelain_v2",
    "scan_root",
]
