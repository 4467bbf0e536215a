"""Unit tests for logging config factory functions."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from mkv_editor.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
    verbosity_level,
)
from mkv_editor.config.models import AppConfig, LoggingConfig


class TestBuildLoggingConfig:
    """Tests for build_logging_config()."""

    def test_no_overrides(self) -> None:
        base = LoggingConfig(level="error", format="json", include_stderr=True)
        result = build_logging_config(base)
        assert result == base

    def test_overrides_win(self) -> None:
        base = LoggingConfig(level="error")
        result = build_logging_config(base, level="debug", file=Path("/tmp/x.log"))

        assert result.level == "debug"
        assert result.file == Path("/tmp/x.log")
        assert result.include_stderr is False
        assert result.format == "text"

    def test_invalid_override(self) -> None:
        with pytest.raises(ValueError):
            build_logging_config(LoggingConfig(), level="loud")


class TestVerbosityLevel:
    @pytest.mark.parametrize(
        ("verbose", "debug", "expected"),
        [
            (False, False, None),
            (True, False, "info"),
            (False, True, "debug"),
            (True, True, "debug"),
        ],
    )
    def test_mapping(self, verbose, debug, expected) -> None:
        assert verbosity_level(verbose, debug) == expected


class TestConfigureLoggingFromCli:
    @pytest.fixture(autouse=True)
    def reset_root_logger(self):
        root = logging.getLogger()
        original_handlers = root.handlers[:]
        original_level = root.level
        yield
        root.handlers[:] = original_handlers
        root.setLevel(original_level)

    @patch("mkv_editor.config.get_config")
    def test_applies_level(self, mock_get_config) -> None:
        mock_get_config.return_value = AppConfig()

        configure_logging_from_cli(level="info")

        assert logging.getLogger().level == logging.INFO
        mock_get_config.assert_called_once_with(config_path=None)
