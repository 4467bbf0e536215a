"""Editing engine: gate, rules, title normalization, sessions and the walker."""

from mkv_editor.engine.gate import ExecutionGate, QueuedAction
from mkv_editor.engine.rules import (
    add_missing_languages,
    extract_subtitles,
    fill_missing_languages,
    prompt_default_audio_language,
    remove_tracks,
    remove_useless_audio_tracks,
    set_default_subtitle,
    set_default_track,
)
from mkv_editor.engine.session import RULES, FileSession
from mkv_editor.engine.title import TITLE_PATTERN, is_canonical, sanitize_title
from mkv_editor.engine.walker import CollectionWalker, WalkResult

__all__ = [
    "CollectionWalker",
    "ExecutionGate",
    "FileSession",
    "QueuedAction",
    "RULES",
    "TITLE_PATTERN",
    "WalkResult",
    # Rules
    "add_missing_languages",
    "extract_subtitles",
    "fill_missing_languages",
    "is_canonical",
    "prompt_default_audio_language",
    "remove_tracks",
    "remove_useless_audio_tracks",
    "sanitize_title",
    "set_default_subtitle",
    "set_default_track",
]
