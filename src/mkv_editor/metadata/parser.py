"""Filename parsing for title normalization.

Regex-based guessing of a movie title and release year from a raw file
name. The result only pre-fills the operator prompts, so a miss is cheap:
the operator types the values instead.
"""

import re
from dataclasses import dataclass
from pathlib import Path


@dataclass
class ParsedMetadata:
    """Title and year guessed from a filename."""

    original_filename: str

    title: str | None = None
    year: int | None = None

    @property
    def year_text(self) -> str | None:
        """Year as prompt-ready text, or None."""
        return str(self.year) if self.year is not None else None


# Tried in order, first match wins:
# Movie Name (2023) [1080p]
# Movie Name [2023]
# Movie.Name.2023.1080p.BluRay.x264-GROUP
# Movie Name - 2023
MOVIE_PATTERNS = [
    re.compile(r"^(?P<title>.+?)\s*\((?P<year>(?:19|20)\d{2})\)", re.IGNORECASE),
    re.compile(r"^(?P<title>.+?)\s*\[(?P<year>(?:19|20)\d{2})\]", re.IGNORECASE),
    re.compile(
        r"^(?P<title>.+?)[._ ](?P<year>(?:19|20)\d{2})(?:[._ \-\[]|$)", re.IGNORECASE
    ),
    re.compile(r"^(?P<title>.+?)\s*-\s*(?P<year>(?:19|20)\d{2})(?:\s|$)", re.IGNORECASE),
]

# Release tags that end a title when no year is present
RELEASE_TAG_PATTERN = re.compile(
    r"[._ \-\[(](?:\d{3,4}p|4K|BluRay|BDRip|WEB-DL|WEBRip|HDRip|DVDRip|HDTV|"
    r"x264|x265|h\.?264|h\.?265|HEVC|AV1|MULTi|VOSTFR|TRUEFRENCH|FRENCH)\b.*$",
    re.IGNORECASE,
)


def _clean_title(title: str) -> str:
    """Replace dots and underscores with spaces and collapse whitespace."""
    cleaned = re.sub(r"[._]+", " ", title)
    cleaned = re.sub(r"\s+", " ", cleaned)
    return cleaned.strip(" -")


def parse_movie_filename(filename: str) -> ParsedMetadata | None:
    """Try to parse a filename (without extension) as a movie with a year."""
    for pattern in MOVIE_PATTERNS:
        match = pattern.match(filename)
        if match:
            title = _clean_title(match.group("title"))
            if not title:
                continue
            return ParsedMetadata(
                original_filename=filename,
                title=title,
                year=int(match.group("year")),
            )
    return None


def parse_filename(path: Path | str) -> ParsedMetadata:
    """Guess title and year from a media filename.

    Returns a ParsedMetadata even if no pattern matched: the title is then
    the cleaned stem stripped of release tags, with no year.

    Args:
        path: Path to media file or filename string.

    Returns:
        ParsedMetadata with the guessed title and year.
    """
    filename = Path(path).stem

    result = parse_movie_filename(filename)
    if result:
        return result

    title = _clean_title(RELEASE_TAG_PATTERN.sub("", filename))
    return ParsedMetadata(original_filename=filename, title=title or None)
