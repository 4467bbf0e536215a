"""Filename metadata parsing for mkv-editor."""

from mkv_editor.metadata.parser import (
    ParsedMetadata,
    parse_filename,
    parse_movie_filename,
)

__all__ = [
    "ParsedMetadata",
    "parse_filename",
    "parse_movie_filename",
]
