"""The command-line interface for gittracker."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated, Any

from cyclopts import App, Parameter
from rich.console import Console
from rich.markup import escape
from structlog.typing import FilteringBoundLogger

from gittracker.config import Config, OutputFormat, safe_load_config
from gittracker.exceptions import ScanRootNotFoundError
from gittracker.scanner import GitStatusQuery, scan_root
from gittracker.utils import create_cli_logger

from ._report import exit_code_for, render_json, render_text
from ._shared import ExitCode, exit_with_error

_HELP = "Scan folders for git repositories with local changes."


def _build_overrides(
    *,
    as_json: bool,
    show_clean: bool,
    jobs: int | None,
    timeout_ms: int | None,
    verbose: bool,
) -> dict[str, Any] | None:  # pyright: ignore[reportExplicitAny]
    """Translate explicitly passed CLI flags into config overrides.

    Returns:
        Nested override dictionary, or None if no flag was passed.
    """
    scan: dict[str, object] = {}
    if show_clean:
        scan["show_clean"] = True
    if jobs is not None:
        scan["jobs"] = jobs
    if timeout_ms is not None:
        scan["timeout_ms"] = timeout_ms

    overrides: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]
    if scan:
        overrides["scan"] = scan
    if as_json:
        overrides["output"] = {"format": OutputFormat.JSON.value}
    if verbose:
        overrides["logging"] = {"level": "debug"}
    return overrides or None


def _create_logger(config: Config, error_console: Console) -> FilteringBoundLogger | None:
    """Create the CLI logger, or None if the log file cannot be opened."""
    try:
        return create_cli_logger(
            level=config.logging.level.value,
            log_format=config.logging.format.value,  # type: ignore[arg-type]
            log_file=config.logging.file,
            max_bytes=config.logging.max_bytes,
            backup_count=config.logging.backup_count,
            command="scan",
        )
    except OSError as e:
        error_console.print(
            f"[yellow]Warning:[/yellow] logging disabled: {escape(str(e))}"
        )
        return None


def run_scan(
    root: Path,
    *,
    config: Config,
    console: Console,
    error_console: Console,
) -> ExitCode:
    """Scan a root, print the report, and return the exit code.

    Args:
        root: Directory to scan.
        config: Loaded configuration (CLI overrides already applied).
        console: Console for the text report.
        error_console: Console for warnings and errors.

    Returns:
        ExitCode.DIRTY if any repository has local changes, else CLEAN.

    Raises:
        SystemExit: With ExitCode.NOT_FOUND if root is not a directory.
    """
    logger = _create_logger(config, error_console)

    if not root.is_dir():
        error = ScanRootNotFoundError(root)
        if logger is not None:
            logger.error("scan_root_not_found", root=str(root))
        exit_with_error(str(error), ExitCode.NOT_FOUND, console=error_console)

    query = GitStatusQuery(git=config.scan.git, timeout_ms=config.scan.timeout_ms)
    result = scan_root(
        root,
        query=query,
        marker=config.scan.marker,
        jobs=config.scan.jobs,
        logger=logger,
    )

    if config.output.format == OutputFormat.JSON:
        print(render_json(result))  # noqa: T201
    else:
        render_text(result, console, show_clean=config.scan.show_clean)

    return exit_code_for(result)


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="gittracker",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _scan(  # pyright: ignore[reportUnusedFunction]
        root: Annotated[Path, Parameter(help="Root folder to scan")] = Path("."),
        *,
        as_json: Annotated[
            bool,
            Parameter(name="--json", help="Output JSON instead of text lines"),
        ] = False,
        show_clean: Annotated[
            bool,
            Parameter(name="--show-clean", help="Include clean repositories"),
        ] = False,
        jobs: Annotated[
            int | None,
            Parameter(name=["--jobs", "-j"], help="Concurrent status queries"),
        ] = None,
        timeout_ms: Annotated[
            int | None,
            Parameter(
                name="--timeout-ms",
                help="Per-repository query timeout in milliseconds (0 disables)",
            ),
        ] = None,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
        verbose: Annotated[
            bool, Parameter(name=["--verbose", "-v"], help="Enable debug logging")
        ] = False,
    ) -> None:
        """Scan folders for git repositories with local changes.

        Exits with status 1 when any repository has uncommitted changes or
        unpushed commits.

        Args:
            root: Root folder to scan.
            as_json: Output a JSON document instead of text lines.
            show_clean: Include clean repositories in text output.
            jobs: Maximum number of concurrent status queries.
            timeout_ms: Per-repository status query timeout.
            config: Explicit path to config file.
            verbose: Enable debug logging.
        """
        overrides = _build_overrides(
            as_json=as_json,
            show_clean=show_clean,
            jobs=jobs,
            timeout_ms=timeout_ms,
            verbose=verbose,
        )
        loaded_config, _ = safe_load_config(
            config_path=config,
            search_from=root if root.is_dir() else None,
            cli_overrides=overrides,
        )
        raise SystemExit(
            run_scan(
                root,
                config=loaded_config,
                console=console,
                error_console=error_console,
            )
        )

    return app


def main() -> None:
    """Default entrypoint for the `gittracker` CLI."""
    app = create_app()
    app()


if __name__ == "__main__":
    main()
