"""Language policy rules.

Each rule reads the session's current snapshot, may question the operator,
and submits mutation commands through the session's execution gate. Rules
never mutate a file directly.

Language codes are compared with ``languages_match`` so that the ISO 639-1
and 639-2 B/T spellings of a language (``fr``, ``fre``, ``fra``) are treated
as the same language.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from mkv_editor.domain.enums import TrackType
from mkv_editor.domain.models import Track
from mkv_editor.executor.commands import (
    ExtractTrack,
    SetDefaultFlags,
    SetLanguage,
    StripTracks,
)
from mkv_editor.language import languages_match, normalize_language
from mkv_editor.operator.interface import AskKind, is_confirmed

if TYPE_CHECKING:
    from mkv_editor.engine.session import FileSession

logger = logging.getLogger(__name__)

FRENCH = "fre"
ENGLISH = "eng"

# Subtitle language wanted for a given default audio language, in order of
# preference. French audio needs no subtitles.
_SUBTITLE_PREFERENCES: dict[str, tuple[str, ...]] = {
    FRENCH: (),
    ENGLISH: (ENGLISH, "fr"),
}
_OTHER_AUDIO_SUBTITLE_PREFERENCE: tuple[str, ...] = ("fr", ENGLISH)


def _find_language(tracks: Sequence[Track], language: str) -> Track | None:
    return next((t for t in tracks if languages_match(t.language, language)), None)


def _say(session: FileSession, message: str) -> None:
    logger.info(message)
    session.operator.notify(message)


# =============================================================================
# Rules
# =============================================================================


def fill_missing_languages(session: FileSession, track_type: TrackType) -> None:
    """Ask a language for every track of one type that has none.

    The track list is read once, before the first question; a language set
    on one track does not change the numbering shown for the next ones.
    """
    tracks = session.snapshot.tracks_of(track_type)
    total = len(tracks)

    for index, track in enumerate(tracks, start=1):
        if track.has_language:
            continue

        answer = session.operator.ask(
            f"New language for {session.file_name} : "
            f"{track_type.value} {index} of {total}",
            AskKind.FREE_TEXT,
        ).strip()

        if not answer:
            _say(session, "Track ignored")
            continue

        session.submit(SetLanguage(track_number=track.number, language=answer))
        _say(session, "Track updated")


def add_missing_languages(session: FileSession) -> None:
    """Fill missing languages of audio tracks, then of subtitle tracks."""
    fill_missing_languages(session, TrackType.AUDIO)
    fill_missing_languages(session, TrackType.SUBTITLES)


def prompt_default_audio_language(session: FileSession) -> None:
    """Make sure the default audio track is in the language the operator wants.

    A lone audio track without the default flag is made default without
    asking. When the audio tracks span several languages the operator picks
    one; the question is repeated until the answer matches a track.
    """
    audio_tracks = session.snapshot.audio_tracks
    if not audio_tracks:
        return

    current_default = session.snapshot.default_track(TrackType.AUDIO)

    if len(audio_tracks) == 1 and current_default is None:
        set_default_track(session, audio_tracks, audio_tracks[0])

    languages = {normalize_language(t.language) for t in audio_tracks}
    if len(languages) <= 1:
        return

    suggestion = (current_default or audio_tracks[0]).language
    listing = ", ".join(t.language for t in audio_tracks)

    while True:
        answer = session.operator.ask(
            f"Default audio language for {session.file_name} : {listing}",
            AskKind.FREE_TEXT,
            default=suggestion,
        ).strip()

        chosen = _find_language(audio_tracks, answer) if answer else None
        if chosen is not None:
            break
        _say(session, "The language you gave does not exist")

    set_default_track(session, audio_tracks, chosen)


def set_default_subtitle(session: FileSession) -> None:
    """Pick the default subtitle track from the default audio language.

    French audio gets no subtitle. English audio prefers English subtitles,
    then French. Any other audio language prefers French, then English.
    """
    default_audio = session.snapshot.default_track(TrackType.AUDIO)
    if default_audio is None:
        return

    subtitle_tracks = session.snapshot.subtitle_tracks
    if not subtitle_tracks:
        return

    audio_language = normalize_language(default_audio.language)
    preferences = _SUBTITLE_PREFERENCES.get(
        audio_language, _OTHER_AUDIO_SUBTITLE_PREFERENCE
    )

    target = None
    for language in preferences:
        target = _find_language(subtitle_tracks, language)
        if target is not None:
            break

    if target is None:
        logger.info("No default subtitle found")
        return

    current = session.snapshot.default_track(TrackType.SUBTITLES)
    if current is not None and languages_match(current.language, target.language):
        logger.debug("Default subtitle already %s", current.language)
        return

    set_default_track(session, subtitle_tracks, target)


def remove_useless_audio_tracks(session: FileSession) -> None:
    """Offer to remove audio tracks that are neither default nor French."""
    default_audio = session.snapshot.default_track(TrackType.AUDIO)
    if default_audio is None:
        return

    candidates = [
        t
        for t in session.snapshot.audio_tracks
        if not languages_match(t.language, default_audio.language)
        and not languages_match(t.language, FRENCH)
    ]
    if not candidates:
        return

    answer = session.operator.ask(
        f"Tracks of type {TrackType.AUDIO.value} to remove : "
        f"{', '.join(t.language for t in candidates)}",
        AskKind.CONFIRMATION,
        default="yes",
    )
    if not is_confirmed(answer):
        logger.info("Modification ignored")
        return

    remove_tracks(session, candidates)


def extract_subtitles(session: FileSession) -> None:
    """Extract one subtitle track chosen by the operator next to the file."""
    subtitle_tracks = session.snapshot.subtitle_tracks
    if not subtitle_tracks:
        return

    listing = ", ".join(
        f"{index} ({track.language})" for index, track in enumerate(subtitle_tracks)
    )

    while True:
        answer = session.operator.ask(
            f"Subtitle of {session.file_name} to extract {listing}",
            AskKind.INDEX,
            default="0",
        )
        try:
            index = int(answer)
        except ValueError:
            index = -1
        if 0 <= index < len(subtitle_tracks):
            break
        _say(session, "Invalid track index")

    track = subtitle_tracks[index]
    session.submit(
        ExtractTrack(track_id=track.id, language=track.language, codec_id=track.codec_id)
    )


# =============================================================================
# Mutations shared by the rules
# =============================================================================


def set_default_track(
    session: FileSession, siblings: Sequence[Track], chosen: Track
) -> None:
    """Flag ``chosen`` as default and every other sibling as not default."""
    command = SetDefaultFlags.from_mapping(
        {track.number: track.id == chosen.id for track in siblings}
    )
    session.submit(command)
    logger.info("New default %s : %s", chosen.track_type.value, chosen.language)


def remove_tracks(session: FileSession, tracks: Sequence[Track]) -> None:
    """Remove tracks of a single type by remuxing the file.

    An empty list, or one mixing track types, is rejected without any
    mutation.
    """
    if not tracks or len({t.track_type for t in tracks}) > 1:
        logger.error("Invalid track list")
        session.operator.notify("Invalid track list")
        return

    track_type = tracks[0].track_type
    removed_ids = {t.id for t in tracks}
    keep_ids = tuple(
        t.id for t in session.snapshot.tracks_of(track_type) if t.id not in removed_ids
    )

    session.submit(StripTracks(track_type=track_type, keep_ids=keep_ids))
