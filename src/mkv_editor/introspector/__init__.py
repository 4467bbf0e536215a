"""Introspector module for mkv-editor.

- ContainerInspector: Protocol defining the inspection interface
- MkvmergeInspector: Production implementation using ``mkvmerge -J``
- InspectionError: Exception for inspection failures
- format_human / format_json / snapshot_to_dict: output helpers
"""

from mkv_editor.introspector.formatters import (
    format_human,
    format_json,
    format_track_line,
    snapshot_to_dict,
    track_to_dict,
)
from mkv_editor.introspector.interface import ContainerInspector, InspectionError
from mkv_editor.introspector.mkvmerge import MkvmergeInspector

__all__ = [
    "ContainerInspector",
    "InspectionError",
    "MkvmergeInspector",
    # Formatters
    "format_human",
    "format_json",
    "format_track_line",
    "snapshot_to_dict",
    "track_to_dict",
]
