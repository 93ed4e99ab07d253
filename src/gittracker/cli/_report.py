"""Scan report rendering.

Text reports list dirty repositories (and clean ones on request) followed by
summary counts. JSON reports are a single document with the total and every
record, and nothing else, so they can be piped into other tools.
"""

from rich.console import Console
from rich.markup import escape

from gittracker.scanner import RepoStatus, ScanResult

from ._shared import ExitCode, format_json

NO_CHANGES_MESSAGE = "no repositories with local changes found"


def format_dirty_line(repo: RepoStatus) -> str:
    """Format the plain-text report line for a dirty repository.

    Args:
        repo: Repository status to describe.

    Returns:
        Line such as ``dirty: src/app (uncommitted: 2 files, unpushed: 0 commits)``.
    """
    upstream_note = "" if repo.has_upstream else ", upstream: none"
    return (
        f"dirty: {repo.path} (uncommitted: {repo.uncommitted_changes} files, "
        f"unpushed: {repo.unpushed_commits} commits{upstream_note})"
    )


def summary_lines(result: ScanResult) -> list[str]:
    """Build the summary lines printed after a text report."""
    return [
        f"scanned {result.total} repositories",
        f"dirty: {result.dirty_count}, clean: {result.clean_count}",
        (
            f"repos with uncommitted changes: {result.uncommitted_count}, "
            f"unpushed commits: {result.unpushed_count}"
        ),
    ]


def _print(console: Console, text: str) -> None:
    # Report lines are never wrapped, so paths stay on one line
    console.print(text, soft_wrap=True, highlight=False)


def render_text(result: ScanResult, console: Console, *, show_clean: bool) -> None:
    """Print a human-readable report.

    Args:
        result: Scan result to report.
        console: Console to print to.
        show_clean: Also list repositories without local changes.
    """
    for repo in result.repos:
        if repo.is_dirty:
            _print(console, f"[yellow]{escape(format_dirty_line(repo))}[/yellow]")
        elif show_clean:
            _print(console, f"[green]clean:[/green] {escape(repo.path)}")

    if not show_clean and not result.has_dirty:
        _print(console, f"[dim]{NO_CHANGES_MESSAGE}[/dim]")

    for line in summary_lines(result):
        _print(console, escape(line))


def render_json(result: ScanResult) -> str:
    """Render a scan result as a pretty-printed JSON document."""
    return format_json(result.to_dict())


def exit_code_for(result: ScanResult) -> ExitCode:
    """Return DIRTY if any repository has local changes, else CLEAN."""
    return ExitCode.DIRTY if result.has_dirty else ExitCode.CLEAN
