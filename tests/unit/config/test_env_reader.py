"""Unit tests for EnvReader."""

from pathlib import Path

from mkv_editor.config.env import EnvReader


class TestEnvReader:
    """Tests for EnvReader type conversion."""

    def test_get_str(self) -> None:
        reader = EnvReader({"A": "value"})
        assert reader.get_str("A") == "value"
        assert reader.get_str("B", "fallback") == "fallback"

    def test_get_int(self) -> None:
        reader = EnvReader({"A": "42", "B": "nope"})
        assert reader.get_int("A") == 42
        assert reader.get_int("B", 7) == 7
        assert reader.get_int("C") is None

    def test_get_bool(self) -> None:
        reader = EnvReader({"A": "Yes", "B": "0"})
        assert reader.get_bool("A") is True
        assert reader.get_bool("B") is False
        assert reader.get_bool("C", True) is True

    def test_get_path_must_exist(self, temp_dir) -> None:
        reader = EnvReader({"A": str(temp_dir), "B": str(temp_dir / "missing")})
        assert reader.get_path("A") == temp_dir
        assert reader.get_path("B") is None
        assert reader.get_path("B", must_exist=False) == temp_dir / "missing"

    def test_get_path_expands_user(self) -> None:
        reader = EnvReader({"A": "~/x"})
        assert reader.get_path("A", must_exist=False) == Path.home() / "x"

    def test_get_list(self) -> None:
        reader = EnvReader({"A": "mkv, mka,,webm "})
        assert reader.get_list("A") == ["mkv", "mka", "webm"]
        assert reader.get_list("B") is None
