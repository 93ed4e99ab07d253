"""Structured file logging.

Loggers built here are standalone: they write to their own file, never to
stdout or stderr, and leave the global structlog configuration untouched.
Report and JSON output therefore stay clean whatever the log level.
"""

import logging
from logging.handlers import RotatingFileHandler
from os import getenv
from pathlib import Path
from typing import Any, Literal, cast

import structlog
from structlog.typing import FilteringBoundLogger, Processor

from ._paths import get_cli_log_file

LogFormatType = Literal["json", "text"]

DEBUG_ENV = "GITTRACKER_DEBUG"
LOG_LEVEL_ENV = "GITTRACKER_LOG_LEVEL"


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name to a :mod:`logging` constant.

    ``GITTRACKER_DEBUG`` (any non-empty value) wins over everything. Without
    an explicit ``level``, ``GITTRACKER_LOG_LEVEL`` is consulted. Unknown
    names fall back to INFO.
    """
    if getenv(DEBUG_ENV):
        return logging.DEBUG
    name = level if level is not None else getenv(LOG_LEVEL_ENV, "info")
    return logging.getLevelNamesMapping().get(name.upper(), logging.INFO)


def _processors(log_format: LogFormatType) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def _rotating_sink(
    path: Path, level: int, max_bytes: int, backup_count: int
) -> logging.Logger:
    # One stdlib logger per file; reusing the name replaces the old handler
    sink = logging.getLogger(f"gittracker.file.{path}")
    for old in sink.handlers:
        old.close()
    sink.handlers.clear()
    sink.propagate = False
    sink.setLevel(level)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    handler.setFormatter(logging.Formatter("%(message)s"))
    sink.addHandler(handler)
    return sink


def create_file_logger(
    path: Path | str,
    *,
    level: int | None = None,
    log_format: LogFormatType = "json",
    max_bytes: int = 0,
    backup_count: int = 0,
) -> FilteringBoundLogger:
    """Create a structlog logger that appends to ``path``.

    Args:
        path: Log file. Missing parent directories are created.
        level: Minimum level as a :mod:`logging` constant. Defaults to the
            environment (see :func:`resolve_log_level`).
        log_format: ``json`` for one JSON object per line, ``text`` for
            ``timestamp [level] event key=value`` lines.
        max_bytes: Rotate once the file reaches this size. Rotation is on
            only when both ``max_bytes`` and ``backup_count`` are positive.
        backup_count: Number of rotated files to keep.

    Returns:
        A bound logger filtering below ``level``.

    Raises:
        OSError: If the directory or file cannot be created.
    """
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    effective_level = level if level is not None else resolve_log_level()

    raw: Any  # pyright: ignore[reportExplicitAny]
    if max_bytes > 0 and backup_count > 0:
        raw = _rotating_sink(log_path, effective_level, max_bytes, backup_count)
    else:
        raw = structlog.WriteLogger(file=log_path.open("a", encoding="utf-8"))

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            raw,
            processors=_processors(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(effective_level),
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
    log_file: str = "",
    max_bytes: int = 0,
    backup_count: int = 0,
    command: str = "",
) -> FilteringBoundLogger:
    """Create the logger used by a CLI run.

    Args:
        level: Level name from configuration. ``GITTRACKER_DEBUG`` overrides it.
        log_format: ``json`` or ``text``.
        log_file: Log file path; empty selects ``cli.log`` in the user log
            directory.
        max_bytes: See :func:`create_file_logger`.
        backup_count: See :func:`create_file_logger`.
        command: Command name bound to every entry, if given.
    """
    logger = create_file_logger(
        log_file or get_cli_log_file(),
        level=resolve_log_level(level),
        log_format=log_format,
        max_bytes=max_bytes,
        backup_count=backup_count,
    )
    return logger.bind(command=command) if command else logger
