"""gittracker configuration.

Settings are read from TOML files, environment variables and command-line
flags, merged by precedence and validated into frozen models.

Example:
    >>> from gittracker.config import load_config
    >>> load_config().scan.jobs
    1
"""

from gittracker.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

from ._load import STRICT_CONFIG_ENV, load_config, safe_load_config
from ._models import (
    Config,
    LogFormat,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
    ScanConfig,
)
from ._sources import (
    ENV_PREFIX,
    PROJECT_CONFIG_NAME,
    ConfigLayer,
    LayerName,
    collect_layers,
    deep_merge,
    env_overrides,
    find_project_config,
    read_toml_file,
    user_config_path,
)

__all__ = [
    "ENV_PREFIX",
    "PROJECT_CONFIG_NAME",
    "STRICT_CONFIG_ENV",
    "Config",
    "ConfigError",
    "ConfigLayer",
    "ConfigLoadError",
    "ConfigValidationError",
    "LayerName",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "ScanConfig",
    "collect_layers",
    "deep_merge",
    "env_overrides",
    "find_project_config",
    "load_config",
    "read_toml_file",
    "safe_load_config",
    "user_config_path",
]
