# pyright: reportAny=false, reportExplicitAny=false
"""Configuration layers.

Values come from up to five layers. From lowest to highest precedence:

1. built-in defaults (the model defaults, no layer object)
2. the user file, ``config.toml`` in the platform config directory
3. the nearest ``.gittracker.toml`` at or above the scanned directory
4. ``GITTRACKER_<SECTION>__<KEY>`` environment variables
5. command-line flags

An explicit ``--config`` file takes the place of layers 2 and 3.
"""

import json
import os
import tomllib
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, Final

from gittracker.exceptions import ConfigLoadError
from gittracker.utils._paths import get_config_dir

ENV_PREFIX: Final = "GITTRACKER_"
PROJECT_CONFIG_NAME: Final = ".gittracker.toml"
USER_CONFIG_NAME: Final = "config.toml"


class LayerName(StrEnum):
    USER = "user"
    PROJECT = "project"
    FILE = "file"
    ENV = "env"
    CLI = "cli"


@dataclass(frozen=True, slots=True)
class ConfigLayer:
    """Raw values contributed by one source.

    Attributes:
        name: Which kind of source this is.
        values: Nested mapping of section name to key/value pairs.
        path: File the values were read from, for file layers.
    """

    name: LayerName
    values: dict[str, Any] = field(default_factory=dict)
    path: Path | None = None

    @property
    def label(self) -> str:
        """Human-readable origin, used in error messages."""
        return str(self.path) if self.path is not None else self.name.value


def read_toml_file(path: Path) -> dict[str, Any]:
    """Parse a TOML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML.
    """
    with path.open("rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Failed to parse TOML file {path}: {e}"
            raise ConfigLoadError(
                msg,
                path=path,
                line=getattr(e, "lineno", None),
                column=getattr(e, "colno", None),
            ) from e


def deep_merge(lower: dict[str, Any], higher: dict[str, Any]) -> dict[str, Any]:
    """Return a new mapping with ``higher`` laid over ``lower``.

    Nested tables merge key by key; any other value in ``higher`` replaces the
    one in ``lower`` outright. Neither argument is modified.
    """
    merged = dict(lower)
    for key, value in higher.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _coerce_env_value(raw: str) -> Any:
    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(raw)
    except ValueError:
        pass
    if "." in raw:
        try:
            return float(raw)
        except ValueError:
            pass
    if raw[:1] in ("[", "{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            pass
    return raw


def env_overrides(
    environ: dict[str, str] | None = None,
    prefix: str = ENV_PREFIX,
) -> dict[str, Any]:
    """Collect ``GITTRACKER_<SECTION>__<KEY>`` variables into nested values.

    Only names with a ``__`` separator are read, so flags such as
    ``GITTRACKER_DEBUG`` are left alone. Values are typed by inference:
    ``true``/``false``, integers, floats, then JSON arrays and objects.

    Example:
        >>> env_overrides({"GITTRACKER_SCAN__JOBS": "4"})
        {'scan': {'jobs': 4}}
    """
    source = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for name, raw in source.items():
        if not name.startswith(prefix):
            continue
        section, sep, key = name[len(prefix) :].partition("__")
        if not sep or not section or not key:
            continue
        values.setdefault(section.lower(), {})[key.lower()] = _coerce_env_value(raw)
    return values


def find_project_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``.gittracker.toml`` at or above ``start``.

    ``start`` defaults to the working directory. Directories named like the
    config file are skipped.
    """
    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / PROJECT_CONFIG_NAME
        try:
            if candidate.is_file():
                return candidate
        except OSError:
            continue
    return None


def user_config_path() -> Path:
    """Path of the per-user config file, whether or not it exists."""
    return get_config_dir() / USER_CONFIG_NAME


def _file_layer(name: LayerName, path: Path) -> ConfigLayer:
    return ConfigLayer(name=name, values=read_toml_file(path), path=path)


def collect_layers(
    *,
    config_path: Path | None = None,
    search_from: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
    include_env: bool = True,
) -> list[ConfigLayer]:
    """Read every configuration layer that is present.

    Args:
        config_path: Explicit config file, used instead of the user and
            project files.
        search_from: Directory the project file search starts at.
        cli_overrides: Values from command-line flags.
        include_env: Read ``GITTRACKER_*`` environment variables.

    Returns:
        Layers lowest precedence first. Absent sources are left out.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        ConfigLoadError: If a config file is not valid TOML.
    """
    layers: list[ConfigLayer] = []

    if config_path is not None:
        layers.append(_file_layer(LayerName.FILE, config_path))
    else:
        user_path = user_config_path()
        if user_path.is_file():
            layers.append(_file_layer(LayerName.USER, user_path))
        project_path = find_project_config(search_from)
        if project_path is not None:
            layers.append(_file_layer(LayerName.PROJECT, project_path))

    if include_env:
        env_values = env_overrides()
        if env_values:
            layers.append(ConfigLayer(name=LayerName.ENV, values=env_values))

    if cli_overrides:
        layers.append(ConfigLayer(name=LayerName.CLI, values=cli_overrides))

    return layers
