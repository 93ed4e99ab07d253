"""gittracker exceptions.

Everything raised on purpose derives from :class:`GitTrackerError`. Problems
with a single repository during a scan are not exceptions; they become
zeroed status records and log entries.
"""

from pathlib import Path
from typing import Any


class GitTrackerError(Exception):
    """Base exception for gittracker errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(GitTrackerError):
    """A configuration source could not be used."""


class ConfigLoadError(ConfigError):
    """A config file exists but could not be parsed.

    Attributes:
        path: The offending file.
        line: 1-based line of the parse error, when the parser reports it.
        column: 1-based column of the parse error, when the parser reports it.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """A configuration value has the wrong type or is out of range.

    Attributes:
        key: Dotted key, e.g. ``scan.jobs``.
        value: The rejected value.
        expected: What would have been accepted.
        source: File path or source name holding the value, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# Scanning
# =============================================================================


class ScanError(GitTrackerError):
    """A scan could not be started."""


class ScanRootNotFoundError(ScanError):
    """The scan root is missing or is not a directory."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Scan root is not a directory: {root}")
        self.root: Path = root
