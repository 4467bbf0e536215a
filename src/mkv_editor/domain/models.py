"""Domain models for mkv-editor.

These models describe a container as it was on disk at the time it was
inspected. They are immutable: any change to the file produces a new
snapshot rather than an updated one.
"""

from dataclasses import dataclass, field
from pathlib import Path

from mkv_editor.domain.enums import TrackType

UNDEFINED_LANGUAGE = "und"


@dataclass(frozen=True)
class Track:
    """One stream of a Matroska container."""

    id: int  # mkvmerge track ID, unique within the file
    track_type: TrackType
    number: int  # Matroska track number, used by mkvpropedit "track:@N"
    language: str = UNDEFINED_LANGUAGE
    is_default: bool = False
    is_forced: bool = False
    is_enabled: bool = True
    codec: str | None = None  # Human-readable, e.g. "SubRip/SRT"
    codec_id: str | None = None  # Matroska codec ID, e.g. "S_TEXT/UTF8"
    name: str | None = None

    @property
    def has_language(self) -> bool:
        """Return True if the track carries a language other than "und"."""
        return self.language != UNDEFINED_LANGUAGE


@dataclass(frozen=True)
class TrackSnapshot:
    """Tracks and container metadata of one file as of its last inspection."""

    file_path: Path
    container_title: str = ""
    tracks: tuple[Track, ...] = field(default_factory=tuple)

    def tracks_of(self, track_type: TrackType) -> list[Track]:
        """Return the tracks of one type, in file order."""
        return [t for t in self.tracks if t.track_type == track_type]

    def default_track(self, track_type: TrackType) -> Track | None:
        """Return the first track of a type flagged default, or None."""
        return next(
            (t for t in self.tracks if t.track_type == track_type and t.is_default),
            None,
        )

    @property
    def audio_tracks(self) -> list[Track]:
        """Audio tracks, in file order."""
        return self.tracks_of(TrackType.AUDIO)

    @property
    def subtitle_tracks(self) -> list[Track]:
        """Subtitle tracks, in file order."""
        return self.tracks_of(TrackType.SUBTITLES)
