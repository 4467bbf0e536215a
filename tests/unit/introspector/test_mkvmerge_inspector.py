"""Unit tests for MkvmergeInspector."""

import json
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from mkv_editor.introspector.interface import InspectionError
from mkv_editor.introspector.mkvmerge import MkvmergeInspector

MKVMERGE = Path("/usr/bin/mkvmerge")

VALID_OUTPUT = json.dumps(
    {
        "container": {"properties": {"title": "Alien"}, "recognized": True},
        "errors": [],
        "tracks": [
            {"id": 0, "type": "video", "properties": {"number": 1}},
            {"id": 1, "type": "audio", "properties": {"number": 2, "language": "eng"}},
        ],
    }
)


@pytest.fixture
def movie(temp_dir: Path) -> Path:
    path = temp_dir / "Alien (1979).mkv"
    path.write_bytes(b"")
    return path


class TestInit:
    """Tests for MkvmergeInspector construction."""

    @patch("mkv_editor.executor.interface.get_tool_path")
    def test_not_available(self, mock_get_tool_path) -> None:
        mock_get_tool_path.return_value = None
        with pytest.raises(InspectionError, match="mkvmerge is not installed"):
            MkvmergeInspector()

    @patch("mkv_editor.executor.interface.get_tool_path")
    def test_explicit_path_skips_lookup(self, mock_get_tool_path) -> None:
        MkvmergeInspector(mkvmerge_path=MKVMERGE)
        mock_get_tool_path.assert_not_called()


class TestFetch:
    """Tests for MkvmergeInspector.fetch()."""

    @patch("mkv_editor.introspector.mkvmerge.run_command")
    def test_valid_file(self, mock_run, movie) -> None:
        mock_run.return_value = (VALID_OUTPUT, "", 0)
        inspector = MkvmergeInspector(mkvmerge_path=MKVMERGE, timeout=7)

        snapshot = inspector.fetch(movie)

        assert snapshot.file_path == movie
        assert snapshot.container_title == "Alien"
        assert [t.language for t in snapshot.audio_tracks] == ["eng"]
        mock_run.assert_called_once_with([str(MKVMERGE), "-J", str(movie)], timeout=7)

    def test_missing_file(self, temp_dir) -> None:
        inspector = MkvmergeInspector(mkvmerge_path=MKVMERGE)
        with pytest.raises(InspectionError, match="File not found"):
            inspector.fetch(temp_dir / "missing.mkv")

    @patch("mkv_editor.introspector.mkvmerge.run_command")
    def test_unrecognized_file(self, mock_run, movie) -> None:
        output = {"container": {"recognized": False}, "errors": []}
        mock_run.return_value = (json.dumps(output), "", 2)
        inspector = MkvmergeInspector(mkvmerge_path=MKVMERGE)

        with pytest.raises(InspectionError, match="not recognized"):
            inspector.fetch(movie)

    @patch("mkv_editor.introspector.mkvmerge.run_command")
    def test_failure_without_output(self, mock_run, movie) -> None:
        mock_run.return_value = ("", "fatal error", 2)
        inspector = MkvmergeInspector(mkvmerge_path=MKVMERGE)

        with pytest.raises(InspectionError, match="fatal error"):
            inspector.fetch(movie)

    @patch("mkv_editor.introspector.mkvmerge.run_command")
    def test_invalid_json(self, mock_run, movie) -> None:
        mock_run.return_value = ("not json", "", 0)
        inspector = MkvmergeInspector(mkvmerge_path=MKVMERGE)

        with pytest.raises(InspectionError, match="Invalid mkvmerge output"):
            inspector.fetch(movie)

    @patch("mkv_editor.introspector.mkvmerge.run_command")
    def test_non_object_json(self, mock_run, movie) -> None:
        mock_run.return_value = ("[]", "", 0)
        inspector = MkvmergeInspector(mkvmerge_path=MKVMERGE)

        with pytest.raises(InspectionError, match="Invalid mkvmerge output"):
            inspector.fetch(movie)

    @patch("mkv_editor.introspector.mkvmerge.run_command")
    def test_timeout(self, mock_run, movie) -> None:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="mkvmerge", timeout=1)
        inspector = MkvmergeInspector(mkvmerge_path=MKVMERGE, timeout=1)

        with pytest.raises(InspectionError, match="timed out after 1s"):
            inspector.fetch(movie)

    @patch("mkv_editor.introspector.mkvmerge.run_command")
    def test_os_error(self, mock_run, movie) -> None:
        mock_run.side_effect = PermissionError("denied")
        inspector = MkvmergeInspector(mkvmerge_path=MKVMERGE)

        with pytest.raises(InspectionError, match="denied"):
            inspector.fetch(movie)
