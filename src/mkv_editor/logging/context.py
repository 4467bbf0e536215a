"""File context for structured logging.

The file currently being edited is kept in a contextvar so that every log
record emitted while a session runs (including records from the executors
and the introspector) carries the file identity without passing it around.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_file_path: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "file_path", default=None
)


def set_file_context(file_path: Path | str | None) -> None:
    """Set the file being processed, or None to clear it."""
    _file_path.set(str(file_path) if file_path is not None else None)


def get_file_context() -> str | None:
    """Return the file being processed, or None."""
    return _file_path.get()


@contextmanager
def file_context(file_path: Path | str) -> Generator[None, None, None]:
    """Context manager setting the file context, restoring the previous one on exit.

    Example:
        with file_context("/movies/Alien (1979).mkv"):
            logger.info("Processing file")  # record carries file_path
    """
    token = _file_path.set(str(file_path))
    try:
        yield
    finally:
        _file_path.reset(token)


class FileContextFilter(logging.Filter):
    """Logging filter that injects the file context into log records.

    Adds ``file_path`` for the JSON format and a compact ``file_tag`` like
    ``[Alien (1979).mkv] `` for the text format.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject file context into log record. Never filters out records."""
        file_path = get_file_context()
        record.file_path = file_path
        record.file_tag = f"[{Path(file_path).name}] " if file_path else ""
        return True
