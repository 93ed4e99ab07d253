# pyright: reportAny=false, reportExplicitAny=false
"""Configuration loading."""

import os
import sys
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from gittracker.exceptions import ConfigError, ConfigValidationError

from ._models import Config
from ._sources import ConfigLayer, LayerName, collect_layers, deep_merge

STRICT_CONFIG_ENV: Final = "GITTRACKER_STRICT_CONFIG"


def _expected(ctx: dict[str, Any] | None, fallback: str) -> str:
    if not ctx:
        return fallback
    if "expected" in ctx:
        return str(ctx["expected"])
    if "ge" in ctx:
        return f">= {ctx['ge']}"
    if "min_length" in ctx:
        return f"at least {ctx['min_length']} character(s)"
    return fallback


def _validation_error(error: ValidationError, source: str | None) -> ConfigValidationError:
    """Turn the first pydantic error into a ConfigValidationError."""
    details = error.errors()[0]
    key = ".".join(str(part) for part in details["loc"])
    msg = f"Invalid configuration value for '{key}'"
    if source is not None:
        msg = f"{msg} in {source}"
    return ConfigValidationError(
        msg,
        key=key,
        value=details.get("input"),
        expected=_expected(details.get("ctx"), details["msg"]),
        source=source,
    )


def _check_layer(layer: ConfigLayer) -> None:
    try:
        _ = Config.model_validate(layer.values)
    except ValidationError as e:
        raise _validation_error(e, layer.label) from e


def load_config(
    *,
    config_path: Path | None = None,
    search_from: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
    include_env: bool = True,
) -> Config:
    """Load, merge and validate configuration from every layer.

    Each layer is validated on its own first, so an error names the file or
    source that holds the bad value.

    Args:
        config_path: Explicit config file, replacing the user and project files.
        search_from: Directory the project file search starts at. Defaults to
            the working directory.
        cli_overrides: Values from command-line flags.
        include_env: Read ``GITTRACKER_*`` environment variables.

    Returns:
        The resolved configuration.

    Raises:
        FileNotFoundError: If ``config_path`` does not exist.
        ConfigLoadError: If a config file is not valid TOML.
        ConfigValidationError: If any value is invalid.
    """
    layers = collect_layers(
        config_path=config_path,
        search_from=search_from,
        cli_overrides=cli_overrides,
        include_env=include_env,
    )

    merged: dict[str, Any] = {}
    for layer in layers:
        _check_layer(layer)
        merged = deep_merge(merged, layer.values)

    try:
        return Config.from_layers(merged, tuple(layers))
    except ValidationError as e:
        raise _validation_error(e, None) from e


def safe_load_config(
    *,
    config_path: Path | None = None,
    search_from: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration for the CLI without letting a bad file stop a scan.

    On a load or validation error a warning goes to stderr and the defaults
    (plus any CLI overrides that validate) are returned. With
    ``GITTRACKER_STRICT_CONFIG=1`` the error is fatal instead. A missing
    ``config_path`` is always fatal, since the user asked for it by name.

    Returns:
        Tuple of (config, error message or None).

    Raises:
        SystemExit: With status 2 when the error is fatal.
    """
    if config_path is not None and not config_path.is_file():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)  # noqa: T201
        sys.exit(2)

    try:
        config = load_config(
            config_path=config_path,
            search_from=search_from,
            cli_overrides=cli_overrides,
        )
    except (ConfigError, OSError) as e:
        error_msg = str(e)
        if os.environ.get(STRICT_CONFIG_ENV, "0") == "1":
            print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
            sys.exit(2)
        print(f"Warning: Failed to load config: {error_msg}", file=sys.stderr)  # noqa: T201
        return _fallback(cli_overrides), error_msg

    return config, None


def _fallback(cli_overrides: dict[str, Any] | None) -> Config:
    """Defaults with CLI overrides applied, or bare defaults if those are bad too."""
    if not cli_overrides:
        return Config()
    layer = ConfigLayer(name=LayerName.CLI, values=cli_overrides)
    try:
        return Config.from_layers(cli_overrides, (layer,))
    except ValidationError:
        return Config()
