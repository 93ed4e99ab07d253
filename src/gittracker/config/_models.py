"""Typed configuration sections.

Every section is a frozen pydantic model. Unknown keys are ignored so that a
config file written for a newer release still loads.
"""

from enum import StrEnum
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from gittracker.config._sources import ConfigLayer
from gittracker.utils._exec import DEFAULT_TIMEOUT_MS


class LogLevel(StrEnum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    JSON = "json"
    TEXT = "text"


class OutputFormat(StrEnum):
    """How scan results are printed."""

    TEXT = "text"
    JSON = "json"


class _Section(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")


class LoggingConfig(_Section):
    """The ``[logging]`` section.

    Attributes:
        level: Threshold for entries written to the log file.
        format: ``json`` for one object per line, ``text`` for key=value lines.
        file: Log file path. Empty selects ``cli.log`` in the user log dir.
        max_bytes: Size that triggers rotation. Rotation needs both this and
            backup_count above zero.
        backup_count: Rotated files to keep.
    """

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    file: str = ""
    max_bytes: int = Field(default=0, ge=0)
    backup_count: int = Field(default=0, ge=0)


class ScanConfig(_Section):
    """The ``[scan]`` section.

    Attributes:
        marker: Entry name that marks a working-tree root.
        git: git executable, by name or path.
        jobs: Upper bound on status queries running at once.
        timeout_ms: Limit for a single status query; 0 means no limit.
        show_clean: List repositories without local changes too.
    """

    marker: str = Field(default=".git", min_length=1)
    git: str = Field(default="git", min_length=1)
    jobs: int = Field(default=1, ge=1)
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, ge=0)
    show_clean: bool = False


class OutputConfig(_Section):
    """The ``[output]`` section."""

    format: OutputFormat = OutputFormat.TEXT


class Config(_Section):
    """Resolved gittracker configuration.

    Build instances with :func:`gittracker.config.load_config`, or with
    :meth:`from_layers` when the layers are already in hand. A bare
    ``Config()`` holds the built-in defaults.
    """

    logging: LoggingConfig = LoggingConfig()
    scan: ScanConfig = ScanConfig()
    output: OutputConfig = OutputConfig()

    _layers: tuple[ConfigLayer, ...] = PrivateAttr(default=())

    @classmethod
    def from_layers(
        cls,
        merged: dict[str, Any],  # pyright: ignore[reportExplicitAny]
        layers: tuple[ConfigLayer, ...],
    ) -> Self:
        """Validate merged values and remember the layers they came from.

        Raises:
            pydantic.ValidationError: If a value is out of range or mistyped.
        """
        config = cls.model_validate(merged)
        config._layers = layers
        return config

    @property
    def layers(self) -> tuple[ConfigLayer, ...]:
        """Layers that contributed values, lowest precedence first."""
        return self._layers

    def to_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        return self.model_dump(mode="json")
