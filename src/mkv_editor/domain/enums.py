"""Domain enums for mkv-editor.

This module contains the enums shared by the introspector, the executors
and the editing engine.
"""

from enum import Enum


class TrackType(Enum):
    """Type of a track inside a Matroska container.

    Values match the ``type`` field reported by ``mkvmerge -J``.
    """

    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLES = "subtitles"


class EditorScript(Enum):
    """Editing scripts that can be enabled for a run.

    Values are the identifiers accepted on the command line. Declaration
    order is the order in which scripts run on a file (``engine.session.RULES``).
    """

    ADD_MISSING_LANGUAGES = "add-missing-languages"
    PROMPT_DEFAULT_AUDIO_LANGUAGE = "prompt-default-audio-language"
    SET_DEFAULT_SUBTITLE = "set-default-subtitle"
    REMOVE_USELESS_AUDIO_TRACKS = "remove-useless-audio-tracks"
    SANITIZE_TITLE = "sanitize-title"
    EXTRACT_SUBTITLES = "extract-subtitles"

    @property
    def is_run_by_default(self) -> bool:
        """True if the script runs when no script selection is given."""
        return self in DEFAULT_SCRIPTS


DEFAULT_SCRIPTS: frozenset[EditorScript] = frozenset(
    {
        EditorScript.ADD_MISSING_LANGUAGES,
        EditorScript.SET_DEFAULT_SUBTITLE,
        EditorScript.SANITIZE_TITLE,
    }
)
