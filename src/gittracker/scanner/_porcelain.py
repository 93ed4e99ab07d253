"""Porcelain v2 status parsing.

This module parses the output of ``git status --porcelain=2 --branch`` into
change and upstream counts. Parsing is lenient: unknown line kinds and
malformed numbers are ignored so that newer git versions never break a scan.
"""

import re
from dataclasses import dataclass
from typing import Final

# Header lines
UPSTREAM_HEADER: Final = "# branch.upstream "
AHEAD_BEHIND_HEADER: Final = "# branch.ab "

# Per-entry record prefixes: ordinary, renamed/copied, unmerged, untracked
ENTRY_PREFIXES: Final = ("1 ", "2 ", "u ", "? ")

_AHEAD_TOKEN: Final = re.compile(r"\+([0-9]+)")


@dataclass(frozen=True, slots=True)
class PorcelainSummary:
    """Counts extracted from porcelain v2 status output.

    Attributes:
        uncommitted_changes: Number of per-entry records.
        unpushed_commits: Ahead count from the last ``branch.ab`` header.
        has_upstream: True if a ``branch.upstream`` header was present.
    """

    uncommitted_changes: int = 0
    unpushed_commits: int = 0
    has_upstream: bool = False


def _parse_ahead(header: str, current: int) -> int:
    """Extract the ahead count from a ``branch.ab`` header.

    Args:
        header: Header text after the ``# branch.ab `` prefix.
        current: Value to keep if no valid ahead token is found.

    Returns:
        The last valid ahead count in the header, or ``current``.
    """
    ahead = current
    for token in header.split():
        match = _AHEAD_TOKEN.fullmatch(token)
        if match is not None:
            ahead = int(match.group(1))
    return ahead


def parse_porcelain_v2(output: str) -> PorcelainSummary:
    """Parse ``git status --porcelain=2 --branch`` output.

    Args:
        output: Decoded standard output of the status query.

    Returns:
        PorcelainSummary with entry count, ahead count and upstream flag.
    """
    uncommitted_changes = 0
    unpushed_commits = 0
    has_upstream = False

    for line in output.splitlines():
        if line.startswith(UPSTREAM_HEADER):
            has_upstream = True
        elif line.startswith(AHEAD_BEHIND_HEADER):
            unpushed_commits = _parse_ahead(
                line[len(AHEAD_BEHIND_HEADER) :], unpushed_commits
            )
        elif line.startswith(ENTRY_PREFIXES):
            uncommitted_changes += 1

    return PorcelainSummary(
        uncommitted_changes=uncommitted_changes,
        unpushed_commits=unpushed_commits,
        has_upstream=has_upstream,
    )
