"""Root logger setup from a LoggingConfig."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from mkv_editor.logging.context import FileContextFilter
from mkv_editor.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from mkv_editor.config.models import LoggingConfig

# file_tag is "[name.mkv] " while a file is being edited, empty otherwise
TEXT_FORMAT = "%(asctime)s - %(file_tag)s%(name)s - %(levelname)s - %(message)s"


def _open_log_file(path: Path) -> logging.Handler | None:
    path = path.expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(path, encoding="utf-8")
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> None:
    """Install handlers on the root logger.

    Previous root handlers are removed, so the CLI can call this again once
    a subcommand has raised the verbosity. Logs go to ``config.file`` when
    it can be opened, and to stderr when there is no file, when it cannot
    be opened, or when ``include_stderr`` is set.
    """
    if config.format.casefold() == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    handlers: list[logging.Handler] = []
    if config.file:
        file_handler = _open_log_file(Path(config.file))
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    context_filter = FileContextFilter()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(config.level.upper())
    for handler in handlers:
        root_logger.addHandler(handler)
