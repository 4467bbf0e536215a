"""Pure parsing functions for mkvmerge identification output.

These functions turn the JSON printed by ``mkvmerge -J`` into domain
models. They perform no I/O so they can be tested with plain dicts.
"""

import logging
from pathlib import Path
from typing import Any

from mkv_editor.domain.enums import TrackType
from mkv_editor.domain.models import UNDEFINED_LANGUAGE, Track, TrackSnapshot

logger = logging.getLogger(__name__)

_TRACK_TYPES = {track_type.value: track_type for track_type in TrackType}


def sanitize_string(value: str | None) -> str | None:
    """Replace characters that cannot be encoded as UTF-8.

    Args:
        value: String value to sanitize.

    Returns:
        Sanitized string or None if input was None.
    """
    if value is None:
        return None
    return value.encode("utf-8", errors="replace").decode("utf-8")


def parse_track(data: dict[str, Any]) -> Track | None:
    """Parse one entry of the ``tracks`` array.

    Args:
        data: Track object from mkvmerge JSON.

    Returns:
        Track, or None for track types the editor does not handle
        (e.g. DVD buttons).
    """
    track_type = _TRACK_TYPES.get(data.get("type", ""))
    if track_type is None:
        logger.debug(
            "Skipping track %s of unsupported type %r", data.get("id"), data.get("type")
        )
        return None

    properties = data.get("properties", {})
    return Track(
        id=int(data["id"]),
        track_type=track_type,
        number=int(properties.get("number", int(data["id"]) + 1)),
        language=properties.get("language") or UNDEFINED_LANGUAGE,
        is_default=bool(properties.get("default_track", False)),
        is_forced=bool(properties.get("forced_track", False)),
        is_enabled=bool(properties.get("enabled_track", True)),
        codec=sanitize_string(data.get("codec")),
        codec_id=properties.get("codec_id"),
        name=sanitize_string(properties.get("track_name")),
    )


def parse_mkvmerge_output(path: Path, data: dict[str, Any]) -> TrackSnapshot:
    """Build a TrackSnapshot from ``mkvmerge -J`` output.

    Args:
        path: Path of the inspected file (kept as given, not the path
            echoed by mkvmerge).
        data: Parsed JSON output.

    Returns:
        TrackSnapshot with tracks in file order.
    """
    container = data.get("container") or {}
    properties = container.get("properties") or {}

    tracks = []
    for track_data in data.get("tracks") or []:
        track = parse_track(track_data)
        if track is not None:
            tracks.append(track)

    return TrackSnapshot(
        file_path=path,
        container_title=sanitize_string(properties.get("title")) or "",
        tracks=tuple(tracks),
    )


def get_identification_errors(data: dict[str, Any]) -> list[str]:
    """Return the reasons why mkvmerge output describes an unusable file.

    Args:
        data: Parsed JSON output.

    Returns:
        Error messages; empty when the container was identified.
    """
    errors = [str(e) for e in data.get("errors") or []]
    container = data.get("container") or {}
    if not container.get("recognized", True):
        errors.append("container format not recognized")
    elif not container.get("supported", True):
        errors.append(f"container format not supported: {container.get('type')}")
    return errors
