"""Unit tests for domain models."""

from pathlib import Path

from mkv_editor.domain.enums import DEFAULT_SCRIPTS, EditorScript, TrackType
from mkv_editor.domain.models import Track, TrackSnapshot


def _snapshot() -> TrackSnapshot:
    return TrackSnapshot(
        file_path=Path("a.mkv"),
        tracks=(
            Track(id=0, track_type=TrackType.VIDEO, number=1, is_default=True),
            Track(id=1, track_type=TrackType.AUDIO, number=2, language="eng"),
            Track(id=2, track_type=TrackType.AUDIO, number=3, is_default=True),
            Track(id=3, track_type=TrackType.SUBTITLES, number=4, is_default=True),
            Track(id=4, track_type=TrackType.SUBTITLES, number=5, is_default=True),
        ),
    )


class TestTrack:
    def test_has_language(self) -> None:
        assert Track(id=1, track_type=TrackType.AUDIO, number=2, language="fre").has_language
        assert not Track(id=1, track_type=TrackType.AUDIO, number=2).has_language


class TestTrackSnapshot:
    def test_tracks_of_keeps_file_order(self) -> None:
        assert [t.id for t in _snapshot().audio_tracks] == [1, 2]
        assert [t.id for t in _snapshot().subtitle_tracks] == [3, 4]

    def test_default_track_is_first_flagged(self) -> None:
        snapshot = _snapshot()
        assert snapshot.default_track(TrackType.AUDIO).id == 2
        assert snapshot.default_track(TrackType.SUBTITLES).id == 3

    def test_no_default(self) -> None:
        snapshot = TrackSnapshot(
            file_path=Path("a.mkv"),
            tracks=(Track(id=1, track_type=TrackType.AUDIO, number=2),),
        )
        assert snapshot.default_track(TrackType.AUDIO) is None


class TestEditorScript:
    def test_run_by_default(self) -> None:
        assert EditorScript.SANITIZE_TITLE.is_run_by_default
        assert not EditorScript.EXTRACT_SUBTITLES.is_run_by_default
        assert len(DEFAULT_SCRIPTS) == 3
