"""Repository discovery.

This module walks a directory tree depth-first and reports every directory
that holds a git marker entry. Symbolic links are never followed and marker
directories are never descended into, so repository internals are not
visited. Nested repositories in ordinary subdirectories are still found.
"""

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Final

from structlog.typing import FilteringBoundLogger

DEFAULT_MARKER: Final = ".git"


def _list_dir(
    path: str,
    logger: FilteringBoundLogger | None,
) -> list[os.DirEntry[str]] | None:
    """List a directory's entries sorted by name.

    Args:
        path: Directory to list.
        logger: Optional logger for skipped entries.

    Returns:
        Sorted entries, or None if the directory cannot be read.
    """
    try:
        with os.scandir(path) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        if logger is not None:
            logger.debug("walk_entry_skipped", path=path, error=str(e))
        return None


def _is_marker(entry: os.DirEntry[str], marker: str) -> bool:
    """Check whether an entry is a repository marker.

    Args:
        entry: Directory entry to check.
        marker: Marker entry name.

    Returns:
        True if the entry has the marker name and is a directory or a regular
        file. A symlink with the marker name is not a marker.
    """
    if entry.name != marker:
        return False
    return entry.is_dir(follow_symlinks=False) or entry.is_file(follow_symlinks=False)


def iter_repo_roots(
    root: Path | str,
    *,
    marker: str = DEFAULT_MARKER,
    logger: FilteringBoundLogger | None = None,
) -> Iterator[str]:
    """Yield repository roots found under a directory.

    The walk is depth-first with entries visited in name order. A directory
    is a repository root when its child named ``marker`` is a directory or a
    regular file (a gitdir pointer file). Unreadable entries are skipped.

    Roots are yielded as ``os.scandir`` builds its entry paths, by joining
    names onto ``root`` as given, so a root of ``./`` yields ``./a`` rather
    than ``a``.

    Args:
        root: Directory to scan. Paths keep the form this argument uses.
        marker: Name of the entry that identifies a repository root.
        logger: Optional logger for discovery and skipped entries.

    Yields:
        Repository root paths in discovery order, without duplicates.
    """
    root_str = os.fspath(root)

    if os.path.basename(os.path.normpath(root_str)) == marker:
        # The root is itself a marker: report its owner only
        if not os.path.islink(root_str) and (
            os.path.isdir(root_str) or os.path.isfile(root_str)
        ):
            yield os.path.dirname(os.path.normpath(root_str)) or os.curdir
        return

    entries = _list_dir(root_str, logger)
    if entries is None:
        return

    # Each frame holds a directory path and an iterator over its entries
    stack: list[tuple[str, Iterator[os.DirEntry[str]]]] = [(root_str, iter(entries))]

    while stack:
        dir_path, children = stack[-1]
        entry = next(children, None)
        if entry is None:
            _ = stack.pop()
            continue

        try:
            if _is_marker(entry, marker):
                if logger is not None:
                    logger.debug("repo_discovered", path=dir_path)
                yield dir_path
                # Marker directories are never descended into
                continue
            if not entry.is_dir(follow_symlinks=False):
                continue
        except OSError as e:
            if logger is not None:
                logger.debug("walk_entry_skipped", path=entry.path, error=str(e))
            continue

        sub_entries = _list_dir(entry.path, logger)
        if sub_entries is not None:
            stack.append((entry.path, iter(sub_entries)))


def find_repo_roots(
    root: Path | str,
    *,
    marker: str = DEFAULT_MARKER,
    logger: FilteringBoundLogger | None = None,
) -> list[str]:
    """Return every repository root found under a directory.

    Args:
        root: Directory to scan.
        marker: Name of the entry that identifies a repository root.
        logger: Optional logger for discovery and skipped entries.

    Returns:
        Repository root paths in discovery order.
    """
    return list(iter_repo_roots(root, marker=marker, logger=logger))
