"""Domain models and enums for mkv-editor.

Usage:
    from mkv_editor.domain import Track, TrackSnapshot, TrackType
"""

from .enums import DEFAULT_SCRIPTS, EditorScript, TrackType
from .models import UNDEFINED_LANGUAGE, Track, TrackSnapshot

__all__ = [
    # Models
    "Track",
    "TrackSnapshot",
    "UNDEFINED_LANGUAGE",
    # Enums
    "EditorScript",
    "TrackType",
    "DEFAULT_SCRIPTS",
]
