"""Unit tests for configuration loading and precedence."""

from pathlib import Path

import pytest

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


@pytest.fixture(autouse=True)
def clean_cache():
    clear_config_cache()
    yield
    clear_config_cache()


class TestPaths:
    """Tests for data directory resolution."""

    def test_default_data_dir(self) -> None:
        assert get_data_dir({}) == Path.home() / ".mkv-editor"

    def test_data_dir_override(self, temp_dir) -> None:
        env = {"MKV_EDITOR_DATA_DIR": str(temp_dir)}
        assert get_data_dir(env) == temp_dir
        assert get_default_config_path(env) == temp_dir / "config.toml"
        assert get_cache_dir(env) == temp_dir / "content"

    def test_config_path_override(self, temp_dir) -> None:
        env = {
            "MKV_EDITOR_DATA_DIR": str(temp_dir),
            "MKV_EDITOR_CONFIG_PATH": str(temp_dir / "other.toml"),
        }
        assert get_default_config_path(env) == temp_dir / "other.toml"


class TestLoadConfigFile:
    """Tests for load_config_file()."""

    def test_missing_file(self, temp_dir) -> None:
        assert load_config_file(temp_dir / "config.toml") == {}

    def test_valid_file(self, temp_dir) -> None:
        path = temp_dir / "config.toml"
        path.write_text('[scan]\nextensions = ["mkv", "mka"]\n')

        assert load_config_file(path) == {"scan": {"extensions": ["mkv", "mka"]}}

    def test_invalid_toml_ignored(self, temp_dir) -> None:
        path = temp_dir / "config.toml"
        path.write_text("[scan\n")

        assert load_config_file(path) == {}


class TestBuildConfig:
    """Tests for build_config() precedence."""

    def test_defaults(self) -> None:
        config = build_config({}, env={})

        assert config.tools.mkvmerge is None
        assert config.timeouts.remux_seconds == 1800
        assert config.scan.extensions == ["mkv"]
        assert config.logging.level == "warning"

    def test_file_values(self) -> None:
        config = build_config(
            {
                "tools": {"mkvmerge": "/opt/mkvtoolnix/mkvmerge"},
                "timeouts": {"edit_seconds": 30, "unknown": 5},
                "scan": {"extensions": ["mkv", "mka"]},
                "logging": {"level": "info", "format": "json"},
            },
            env={},
        )

        assert config.tools.mkvmerge == Path("/opt/mkvtoolnix/mkvmerge")
        assert config.timeouts.edit_seconds == 30
        assert config.scan.suffixes == (".mkv", ".mka")
        assert config.logging.level == "info"
        assert config.logging.format == "json"

    def test_env_overrides_file(self, temp_dir) -> None:
        tool = temp_dir / "mkvpropedit"
        tool.write_text("")
        env = {
            "MKV_EDITOR_MKVPROPEDIT_PATH": str(tool),
            "MKV_EDITOR_EXTENSIONS": "mkv, webm",
            "MKV_EDITOR_LOG_LEVEL": "debug",
            "MKV_EDITOR_LOG_FILE": str(temp_dir / "editor.log"),
        }

        config = build_config(
            {
                "tools": {"mkvpropedit": "/nowhere/mkvpropedit"},
                "scan": {"extensions": ["mka"]},
                "logging": {"level": "error"},
            },
            env=env,
        )

        assert config.tools.mkvpropedit == tool
        assert config.scan.extensions == ["mkv", "webm"]
        assert config.logging.level == "debug"
        assert config.logging.file == temp_dir / "editor.log"

    def test_env_tool_path_must_exist(self, temp_dir) -> None:
        env = {"MKV_EDITOR_MKVMERGE_PATH": str(temp_dir / "missing")}
        config = build_config({}, env=env)
        assert config.tools.mkvmerge is None

    def test_invalid_value(self) -> None:
        with pytest.raises(ConfigError, match="Invalid configuration"):
            build_config({"timeouts": {"edit_seconds": -5}}, env={})

    def test_invalid_type(self) -> None:
        with pytest.raises(ConfigError):
            build_config({"timeouts": {"edit_seconds": "soon"}}, env={})


class TestGetConfig:
    """Tests for get_config() caching."""

    def test_cached_per_path(self, temp_dir) -> None:
        path = temp_dir / "config.toml"
        path.write_text('[scan]\nextensions = ["mka"]\n')

        first = get_config(path)
        path.write_text('[scan]\nextensions = ["webm"]\n')

        assert get_config(path) is first
        clear_config_cache()
        assert get_config(path).scan.extensions == ["webm"]
