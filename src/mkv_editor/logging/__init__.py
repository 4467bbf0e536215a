"""Structured logging module for mkv-editor.

Provides configurable logging with JSON format support, file rotation and
per-file context injection.
"""

from mkv_editor.logging.config import configure_logging
from mkv_editor.logging.context import (
    FileContextFilter,
    file_context,
    get_file_context,
    set_file_context,
)
from mkv_editor.logging.handlers import JSONFormatter

__all__ = [
    "FileContextFilter",
    "JSONFormatter",
    "configure_logging",
    "file_context",
    "get_file_context",
    "set_file_context",
]
