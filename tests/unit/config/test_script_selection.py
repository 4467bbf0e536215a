"""Unit tests for --scripts parsing."""

import pytest

from mkv_editor.config.exceptions import ConfigError
from mkv_editor.config.scripts import parse_script_selection
from mkv_editor.domain.enums import DEFAULT_SCRIPTS, EditorScript


class TestParseScriptSelection:
    """Tests for parse_script_selection()."""

    def test_all(self) -> None:
        assert parse_script_selection("all") == frozenset(EditorScript)

    @pytest.mark.parametrize("selection", ["default", None, ""])
    def test_default(self, selection) -> None:
        assert parse_script_selection(selection) == DEFAULT_SCRIPTS

    def test_default_set(self) -> None:
        assert DEFAULT_SCRIPTS == {
            EditorScript.ADD_MISSING_LANGUAGES,
            EditorScript.SET_DEFAULT_SUBTITLE,
            EditorScript.SANITIZE_TITLE,
        }

    def test_list(self) -> None:
        selected = parse_script_selection("sanitize-title, extract-subtitles")
        assert selected == {EditorScript.SANITIZE_TITLE, EditorScript.EXTRACT_SUBTITLES}

    def test_unknown(self) -> None:
        with pytest.raises(ConfigError, match="Unknown script\\(s\\): nope"):
            parse_script_selection("sanitize-title,nope")

    def test_empty_list(self) -> None:
        with pytest.raises(ConfigError, match="No script selected"):
            parse_script_selection(" , ")
