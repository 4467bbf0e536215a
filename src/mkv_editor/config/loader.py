"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (applied by the CLI on top of the returned config)
2. Environment variables (MKV_EDITOR_*)
3. Config file (~/.mkv-editor/config.toml)
4. Default values

Environment variables:
- MKV_EDITOR_DATA_DIR: Data directory (overrides ~/.mkv-editor/)
- MKV_EDITOR_CONFIG_PATH: Config file (overrides <data dir>/config.toml)
- MKV_EDITOR_MKVMERGE_PATH: Path to mkvmerge executable
- MKV_EDITOR_MKVPROPEDIT_PATH: Path to mkvpropedit executable
- MKV_EDITOR_MKVEXTRACT_PATH: Path to mkvextract executable
- MKV_EDITOR_EXTENSIONS: Comma separated extensions to process
- MKV_EDITOR_LOG_LEVEL: Log level
- MKV_EDITOR_LOG_FILE: Log file path
"""

from __future__ import annotations

import logging
import threading
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from mkv_editor.config.env import EnvReader
from mkv_editor.config.exceptions import ConfigError
from mkv_editor.config.models import (
    AppConfig,
    LoggingConfig,
    ScanConfig,
    TimeoutsConfig,
    ToolPathsConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR_NAME = ".mkv-editor"
CONFIG_FILE_NAME = "config.toml"
CONTENT_DIR_NAME = "content"

_config_cache: dict[Path, AppConfig] = {}
_config_cache_lock = threading.Lock()


def get_data_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the mkv-editor data directory.

    Holds config.toml and the debug snapshot cache. Can be overridden by
    the MKV_EDITOR_DATA_DIR environment variable.
    """
    reader = EnvReader(env)
    path = reader.get_path("MKV_EDITOR_DATA_DIR", must_exist=False)
    if path is not None:
        return path
    return Path.home() / DEFAULT_DATA_DIR_NAME


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the config file path, honouring MKV_EDITOR_CONFIG_PATH."""
    reader = EnvReader(env)
    path = reader.get_path("MKV_EDITOR_CONFIG_PATH", must_exist=False)
    if path is not None:
        return path
    return get_data_dir(env) / CONFIG_FILE_NAME


def get_cache_dir(env: Mapping[str, str] | None = None) -> Path:
    """Directory receiving debug snapshot dumps (created on demand)."""
    return get_data_dir(env) / CONTENT_DIR_NAME


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        path: Path to config file. If None, uses the default location.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist or
        cannot be parsed.
    """
    if path is None:
        path = get_default_config_path()

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def _optional_path(value: Any) -> Path | None:
    if value is None or value == "":
        return None
    return Path(str(value)).expanduser()


def _build_tools(section: dict[str, Any], reader: EnvReader) -> ToolPathsConfig:
    tools = ToolPathsConfig(
        mkvmerge=_optional_path(section.get("mkvmerge")),
        mkvpropedit=_optional_path(section.get("mkvpropedit")),
        mkvextract=_optional_path(section.get("mkvextract")),
    )
    for name in ("mkvmerge", "mkvpropedit", "mkvextract"):
        env_path = reader.get_path(f"MKV_EDITOR_{name.upper()}_PATH")
        if env_path is not None:
            setattr(tools, name, env_path)
    return tools


def _build_logging(section: dict[str, Any], reader: EnvReader) -> LoggingConfig:
    defaults = LoggingConfig()
    return LoggingConfig(
        level=reader.get_str(
            "MKV_EDITOR_LOG_LEVEL", section.get("level", defaults.level)
        ),
        file=reader.get_path("MKV_EDITOR_LOG_FILE", must_exist=False)
        or _optional_path(section.get("file")),
        format=section.get("format", defaults.format),
        include_stderr=bool(section.get("include_stderr", defaults.include_stderr)),
    )


def build_config(
    file_config: dict[str, Any], env: Mapping[str, str] | None = None
) -> AppConfig:
    """Build an AppConfig from parsed file content and the environment.

    Args:
        file_config: Content of config.toml (possibly empty).
        env: Environment mapping (None reads os.environ).

    Returns:
        The merged configuration.

    Raises:
        ConfigError: If a value is out of range or of the wrong type.
    """
    reader = EnvReader(env)
    try:
        timeouts_section = file_config.get("timeouts", {})
        scan_section = file_config.get("scan", {})
        extensions = reader.get_list("MKV_EDITOR_EXTENSIONS") or scan_section.get(
            "extensions", ["mkv"]
        )
        return AppConfig(
            tools=_build_tools(file_config.get("tools", {}), reader),
            timeouts=TimeoutsConfig(
                **{
                    key: int(value)
                    for key, value in timeouts_section.items()
                    if key in ("inspect_seconds", "edit_seconds", "remux_seconds")
                }
            ),
            scan=ScanConfig(extensions=list(extensions)),
            logging=_build_logging(file_config.get("logging", {}), reader),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def get_config(config_path: Path | None = None) -> AppConfig:
    """Get the effective configuration (cached per config file path).

    Args:
        config_path: Config file to read. None uses the default location.

    Returns:
        The merged configuration.
    """
    path = config_path or get_default_config_path()
    with _config_cache_lock:
        cached = _config_cache.get(path)
        if cached is not None:
            return cached
        config = build_config(load_config_file(path))
        _config_cache[path] = config
        return config


def clear_config_cache() -> None:
    """Forget cached configurations (used by tests and the CLI --config flag)."""
    with _config_cache_lock:
        _config_cache.clear()
