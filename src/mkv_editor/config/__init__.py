"""Configuration management for mkv-editor.

Configuration is loaded with the following precedence:
1. CLI flags (highest priority)
2. Environment variables (MKV_EDITOR_*)
3. Config file (~/.mkv-editor/config.toml)
4. Default values (lowest priority)
"""

from mkv_editor.config.env import EnvReader
from mkv_editor.config.exceptions import ConfigError
from mkv_editor.config.loader import (
    build_config,
    clear_config_cache,
    get_cache_dir,
    get_config,
    get_data_dir,
    get_default_config_path,
    load_config_file,
)
from mkv_editor.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
    verbosity_level,
)
from mkv_editor.config.models import (
    AppConfig,
    EditorConfig,
    LoggingConfig,
    ScanConfig,
    TimeoutsConfig,
    ToolPathsConfig,
)
from mkv_editor.config.scripts import parse_script_selection

__all__ = [
    # Models
    "AppConfig",
    "EditorConfig",
    "LoggingConfig",
    "ScanConfig",
    "TimeoutsConfig",
    "ToolPathsConfig",
    # Errors
    "ConfigError",
    # Loader
    "EnvReader",
    "build_config",
    "clear_config_cache",
    "get_cache_dir",
    "get_config",
    "get_data_dir",
    "get_default_config_path",
    "load_config_file",
    # Logging
    "build_logging_config",
    "configure_logging_from_cli",
    "verbosity_level",
    # Scripts
    "parse_script_selection",
]
