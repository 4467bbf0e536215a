"""Title normalization: ``Title (Year).mkv`` file names and container titles."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from mkv_editor.executor.commands import SetContainerTitle
from mkv_editor.metadata.parser import parse_filename
from mkv_editor.operator.interface import AskKind

if TYPE_CHECKING:
    from mkv_editor.engine.session import FileSession

logger = logging.getLogger(__name__)

# Canonical file stem: "Title (Year)", matched against the whole stem
TITLE_PATTERN = re.compile(r"([^(]+) \(([0-9]{4})\)")


def is_canonical(stem: str) -> bool:
    """Return True if a file stem already reads ``Title (Year)``."""
    return TITLE_PATTERN.fullmatch(stem) is not None


def _ask_title_and_year(session: FileSession) -> tuple[str, str]:
    guess = parse_filename(session.file_path)
    title = session.operator.ask(
        f"Title of {session.file_name} :", AskKind.FREE_TEXT, default=guess.title
    ).strip()
    year = session.operator.ask(
        f"Release year of {session.file_name} :",
        AskKind.FREE_TEXT,
        default=guess.year_text,
    ).strip()
    return title, year


def sanitize_title(session: FileSession) -> None:
    """Rename the file to ``Title (Year)`` and copy the title into the container.

    The operator is asked for the title and the year, pre-filled from the
    current file name, until both are given. The rename happens immediately
    even in batch mode; only the container title edit goes through the gate.
    """
    while not is_canonical(session.file_stem):
        title, year = _ask_title_and_year(session)
        if not title or not year:
            logger.info("Missing informations")
            session.operator.notify("Missing informations")
            continue

        session.rename(f"{title} ({year}){session.file_path.suffix}")
        break

    match = TITLE_PATTERN.fullmatch(session.file_stem)
    if match is None:
        logger.warning("Something went wrong, cannot parse file name")
    else:
        title = match.group(1)
        current_title = session.snapshot.container_title
        if title != current_title:
            logger.info("Update title %r => %r", current_title, title)
            session.submit(SetContainerTitle(title=title))

    session.refresh()
