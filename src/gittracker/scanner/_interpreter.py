"""Status interpretation for a single repository."""

import os

from structlog.typing import FilteringBoundLogger

from gittracker.scanner._models import RepoStatus
from gittracker.scanner._porcelain import parse_porcelain_v2
from gittracker.scanner._query import StatusQuery


def interpret(
    repo_root: str | os.PathLike[str],
    query: StatusQuery,
    *,
    logger: FilteringBoundLogger | None = None,
) -> RepoStatus:
    """Query a repository and build its status record.

    A query that cannot be launched or times out yields a record with all
    counts at zero rather than an error, so one bad repository never stops
    a scan. A non-zero exit status is not a failure: whatever the tool wrote
    to stdout is parsed.

    Args:
        repo_root: Working-tree root to query.
        query: Status query to run.
        logger: Optional logger for failed queries.

    Returns:
        RepoStatus for the repository.
    """
    path = os.fspath(repo_root)
    result = query(path)
    if not result.success:
        if logger is not None:
            logger.warning(
                "status_query_failed",
                path=path,
                error=result.error,
                timed_out=result.timed_out,
                command_not_found=result.command_not_found,
            )
        return RepoStatus(path=path)

    summary = parse_porcelain_v2(result.stdout)
    return RepoStatus(
        path=path,
        uncommitted_changes=summary.uncommitted_changes,
        unpushed_commits=summary.unpushed_commits,
        has_upstream=summary.has_upstream,
    )
