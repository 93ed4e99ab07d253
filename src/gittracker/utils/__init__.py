"""Shared utilities for gittracker."""

from ._exec import DEFAULT_TIMEOUT_MS, CommandConfig, CommandResult, run_command
from ._logging import (
    LogFormatType,
    create_cli_logger,
    create_file_logger,
    resolve_log_level,
)
from ._paths import get_cli_log_file, get_config_dir, get_log_dir

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "CommandConfig",
    "CommandResult",
    "LogFormatType",
    "create_cli_logger",
    "create_file_logger",
    "get_cli_log_file",
    "get_config_dir",
    "get_log_dir",
    "resolve_log_level",
    "run_command",
]
