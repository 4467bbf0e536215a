"""Mutation commands.

Commands are plain values describing one change to a container. They do
not carry the file path: the session that owns the file supplies its
current path when the command actually runs, so a command queued before a
rename still targets the renamed file.
"""

from dataclasses import dataclass

from mkv_editor.domain.enums import TrackType


@dataclass(frozen=True)
class SetLanguage:
    """Set the language of one track (mkvpropedit)."""

    track_number: int
    language: str

    def describe(self) -> str:
        return f"set language of track {self.track_number} to {self.language}"


@dataclass(frozen=True)
class SetDefaultFlags:
    """Set the default flag of several tracks in one edit (mkvpropedit).

    ``flags`` maps track number to flag value. Every sibling track is
    listed explicitly; mkvpropedit has no "clear all" operation.
    """

    flags: tuple[tuple[int, bool], ...]

    @classmethod
    def from_mapping(cls, flags: dict[int, bool]) -> "SetDefaultFlags":
        return cls(flags=tuple(flags.items()))

    def as_dict(self) -> dict[int, bool]:
        return dict(self.flags)

    def describe(self) -> str:
        defaults = [str(number) for number, flag in self.flags if flag]
        return f"set default flag on track(s) {', '.join(defaults) or 'none'}"


@dataclass(frozen=True)
class SetContainerTitle:
    """Set the segment title of the container (mkvpropedit)."""

    title: str

    def describe(self) -> str:
        return f"set container title to {self.title!r}"


@dataclass(frozen=True)
class StripTracks:
    """Remux keeping only some tracks of one type (mkvmerge).

    Tracks of other types are untouched. ``keep_ids`` are mkvmerge track
    IDs; an empty tuple removes every track of the type.
    """

    track_type: TrackType
    keep_ids: tuple[int, ...]

    def describe(self) -> str:
        kept = ", ".join(str(i) for i in self.keep_ids) or "none"
        return f"strip {self.track_type.value} tracks (keeping {kept})"


@dataclass(frozen=True)
class ExtractTrack:
    """Extract one track next to the container (mkvextract)."""

    track_id: int
    language: str
    codec_id: str | None = None

    def describe(self) -> str:
        return f"extract track {self.track_id} ({self.language})"


MutationCommand = (
    SetLanguage | SetDefaultFlags | SetContainerTitle | StripTracks | ExtractTrack
)
