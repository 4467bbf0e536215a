"""Formatters for track snapshots.

Shared by the ``inspect`` command and the debug snapshot dump.
"""

import json
from typing import Any

from mkv_editor.domain.enums import TrackType
from mkv_editor.domain.models import Track, TrackSnapshot

_SECTION_TITLES = {
    TrackType.VIDEO: "Video",
    TrackType.AUDIO: "Audio",
    TrackType.SUBTITLES: "Subtitles",
}


def format_human(snapshot: TrackSnapshot) -> str:
    """Format a snapshot for terminal output."""
    lines: list[str] = [f"File: {snapshot.file_path}"]
    lines.append(f"Title: {snapshot.container_title or '(none)'}")
    lines.append("")
    lines.append("Tracks:")

    for track_type, section in _SECTION_TITLES.items():
        tracks = snapshot.tracks_of(track_type)
        if tracks:
            lines.append(f"  {section}:")
            for track in tracks:
                lines.append(f"    {format_track_line(track)}")

    if not snapshot.tracks:
        lines.append("  (no tracks found)")

    return "\n".join(lines)


def format_track_line(track: Track) -> str:
    """Format a single track for human output."""
    parts = [f"#{track.id}", f"(track {track.number})"]

    if track.codec:
        parts.append(track.codec)

    parts.append(track.language)

    if track.name:
        parts.append(f'"{track.name}"')

    flags = []
    if track.is_default:
        flags.append("default")
    if track.is_forced:
        flags.append("forced")
    if not track.is_enabled:
        flags.append("disabled")
    if flags:
        parts.append(f"[{', '.join(flags)}]")

    return " ".join(parts)


def track_to_dict(track: Track) -> dict[str, Any]:
    """Convert a Track to a JSON-serializable dict."""
    return {
        "id": track.id,
        "type": track.track_type.value,
        "number": track.number,
        "language": track.language,
        "codec": track.codec,
        "codec_id": track.codec_id,
        "name": track.name,
        "default": track.is_default,
        "forced": track.is_forced,
        "enabled": track.is_enabled,
    }


def snapshot_to_dict(snapshot: TrackSnapshot) -> dict[str, Any]:
    """Convert a TrackSnapshot to a JSON-serializable dict."""
    return {
        "file": str(snapshot.file_path),
        "title": snapshot.container_title,
        "tracks": [track_to_dict(t) for t in snapshot.tracks],
    }


def format_json(snapshot: TrackSnapshot) -> str:
    """Format a snapshot as indented JSON."""
    return json.dumps(snapshot_to_dict(snapshot), indent=2)
