from pathlib import Path

import platformdirs

_APP_NAME = "gittracker"


def get_log_dir() -> Path:
    """Get the platform-specific log directory for gittracker."""
    return platformdirs.user_log_path(_APP_NAME)


def get_cli_log_file() -> Path:
    """Get the path to the CLI log file.

    Returns:
        Path to the CLI log file (may not exist yet).
    """
    return get_log_dir() / "cli.log"


def get_config_dir() -> Path:
    """Get the platform-specific user config directory for gittracker."""
    return platformdirs.user_config_path(_APP_NAME)

