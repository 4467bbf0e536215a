"""Unit tests for ConsoleOperator."""

from unittest.mock import patch

import click
import pytest

from mkv_editor.operator.console import ConsoleOperator
from mkv_editor.operator.interface import AskKind, is_confirmed


class TestAsk:
    """Tests for ConsoleOperator.ask()."""

    @patch("mkv_editor.operator.console.click.prompt")
    def test_free_text_stripped(self, mock_prompt) -> None:
        mock_prompt.return_value = "  eng "

        answer = ConsoleOperator().ask("Language :", AskKind.FREE_TEXT)

        assert answer == "eng"
        mock_prompt.assert_called_once_with(
            "Language :", type=str, default="", show_default=False
        )

    @patch("mkv_editor.operator.console.click.prompt")
    def test_free_text_default_shown(self, mock_prompt) -> None:
        mock_prompt.return_value = "Alien"

        ConsoleOperator().ask("Title :", AskKind.FREE_TEXT, default="Alien")

        mock_prompt.assert_called_once_with(
            "Title :", type=str, default="Alien", show_default=True
        )

    @patch("mkv_editor.operator.console.click.prompt")
    def test_confirmation(self, mock_prompt) -> None:
        mock_prompt.return_value = "yes"
        answer = ConsoleOperator().ask("Remove ?", AskKind.CONFIRMATION, default="yes")
        assert is_confirmed(answer)

    @patch("mkv_editor.operator.console.click.prompt")
    def test_index_returns_text(self, mock_prompt) -> None:
        mock_prompt.return_value = 1

        answer = ConsoleOperator().ask("Subtitle :", AskKind.INDEX, default="0")

        assert answer == "1"
        mock_prompt.assert_called_once_with("Subtitle :", type=int, default=0)

    @patch("mkv_editor.operator.console.click.prompt")
    def test_abort_becomes_keyboard_interrupt(self, mock_prompt) -> None:
        mock_prompt.side_effect = click.Abort()
        with pytest.raises(KeyboardInterrupt):
            ConsoleOperator().ask("Language :", AskKind.FREE_TEXT)


class TestNotify:
    @patch("mkv_editor.operator.console.click.echo")
    def test_echoes(self, mock_echo) -> None:
        ConsoleOperator().notify("Track updated")
        mock_echo.assert_called_once_with("Track updated")


class TestIsConfirmed:
    @pytest.mark.parametrize("answer", ["y", "yes", "YES", " Yes "])
    def test_yes(self, answer) -> None:
        assert is_confirmed(answer) is True

    @pytest.mark.parametrize("answer", ["", "n", "no", "yeah"])
    def test_no(self, answer) -> None:
        assert is_confirmed(answer) is False
