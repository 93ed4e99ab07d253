"""Exit codes and output helpers shared by the CLI."""

from enum import IntEnum
from typing import Any, Never

import orjson
from rich.console import Console
from rich.markup import escape


class ExitCode(IntEnum):
    """Process exit status.

    CLEAN and DIRTY describe the scan outcome; everything from
    CONFIG_ERROR upward means the scan did not run to completion.
    """

    CLEAN = 0
    DIRTY = 1
    CONFIG_ERROR = 2
    NOT_FOUND = 3
    INTERNAL_ERROR = 5


def format_json(data: dict[str, Any], *, indent: bool = True) -> str:  # pyright: ignore[reportExplicitAny]
    """Serialize ``data`` with orjson, two-space indented unless ``indent`` is False."""
    return orjson.dumps(data, option=orjson.OPT_INDENT_2 if indent else None).decode()


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print ``Error: <message>`` and exit.

    Args:
        message: What went wrong. Printed as plain text; brackets in paths are
            not read as markup.
        code: Exit status.
        console: Where to print; a fresh stderr console by default.

    Raises:
        SystemExit: Always, with ``code``.
    """
    (console or Console(stderr=True)).print(
        f"[red]Error:[/red] {escape(message)}", highlight=False
    )
    raise SystemExit(code)
