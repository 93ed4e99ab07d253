"""Scan orchestration.

This module ties discovery and interpretation together: every repository
root found under the scan root is queried once and the records are collected
in discovery order.
"""

import concurrent.futures
from functools import partial
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from gittracker.scanner._interpreter import interpret
from gittracker.scanner._locator import DEFAULT_MARKER, iter_repo_roots
from gittracker.scanner._models import RepoStatus, ScanResult
from gittracker.scanner._query import GitStatusQuery, StatusQuery


def scan_root(
    root: Path | str,
    *,
    query: StatusQuery | None = None,
    marker: str = DEFAULT_MARKER,
    jobs: int = 1,
    logger: FilteringBoundLogger | None = None,
) -> ScanResult:
    """Find every repository under a root and collect its status.

    With ``jobs`` of 1 the walk and the queries run sequentially. With more,
    repositories are discovered first and queried on a bounded thread pool;
    the result keeps discovery order either way.

    Args:
        root: Directory to scan.
        query: Status query to run per repository. Defaults to git.
        marker: Name of the entry that identifies a repository root.
        jobs: Maximum number of concurrent status queries.
        logger: Optional logger for scan progress and failures.

    Returns:
        ScanResult with one record per discovered repository.

    Raises:
        ValueError: If jobs is less than 1.
    """
    if jobs < 1:
        msg = f"jobs must be at least 1, got {jobs}"
        raise ValueError(msg)

    if query is None:
        query = GitStatusQuery()

    if logger is not None:
        logger.info("scan_started", root=str(root), jobs=jobs)

    roots = iter_repo_roots(root, marker=marker, logger=logger)
    run = partial(interpret, query=query, logger=logger)

    repos: tuple[RepoStatus, ...]
    if jobs == 1:
        repos = tuple(run(repo_root) for repo_root in roots)
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=jobs) as executor:
            # map() yields results in submission order
            repos = tuple(executor.map(run, list(roots)))

    result = ScanResult(repos=repos)
    if logger is not None:
        logger.info(
            "scan_finished",
            root=str(root),
            total=result.total,
            dirty=result.dirty_count,
            clean=result.clean_count,
        )
    return result
