"""Language code normalization and comparison utilities.

Matroska files tag tracks with ISO 639-2/B codes ("fre", "ger"), but users
and other tools commonly type ISO 639-1 ("fr", "de") or ISO 639-2/T ("fra",
"deu") codes. This module normalizes all of them to ISO 639-2/B so that
"fr", "fre" and "fra" compare equal.
"""

import logging

logger = logging.getLogger(__name__)

# ISO 639-1 (2-letter) to ISO 639-2/B (3-letter bibliographic) mapping
# Covers the languages commonly found in video files
_ISO_639_1_TO_639_2B: dict[str, str] = {
    "ar": "ara",  # Arabic
    "bg": "bul",  # Bulgarian
    "ca": "cat",  # Catalan
    "cs": "cze",  # Czech (bibliographic)
    "da": "dan",  # Danish
    "de": "ger",  # German (bibliographic)
    "el": "gre",  # Greek (bibliographic)
    "en": "eng",  # English
    "es": "spa",  # Spanish
    "et": "est",  # Estonian
    "eu": "baq",  # Basque (bibliographic)
    "fa": "per",  # Persian (bibliographic)
    "fi": "fin",  # Finnish
    "fr": "fre",  # French (bibliographic)
    "he": "heb",  # Hebrew
    "hi": "hin",  # Hindi
    "hr": "hrv",  # Croatian
    "hu": "hun",  # Hungarian
    "id": "ind",  # Indonesian
    "is": "ice",  # Icelandic (bibliographic)
    "it": "ita",  # Italian
    "ja": "jpn",  # Japanese
    "ko": "kor",  # Korean
    "lt": "lit",  # Lithuanian
    "lv": "lav",  # Latvian
    "ms": "may",  # Malay (bibliographic)
    "nl": "dut",  # Dutch (bibliographic)
    "no": "nor",  # Norwegian
    "pl": "pol",  # Polish
    "pt": "por",  # Portuguese
    "ro": "rum",  # Romanian (bibliographic)
    "ru": "rus",  # Russian
    "sk": "slo",  # Slovak (bibliographic)
    "sl": "slv",  # Slovenian
    "sr": "srp",  # Serbian
    "sv": "swe",  # Swedish
    "th": "tha",  # Thai
    "tr": "tur",  # Turkish
    "uk": "ukr",  # Ukrainian
    "vi": "vie",  # Vietnamese
    "zh": "chi",  # Chinese (bibliographic)
}

# ISO 639-2/T codes that differ from their bibliographic counterpart
_ISO_639_2T_TO_639_2B: dict[str, str] = {
    "ces": "cze",
    "deu": "ger",
    "ell": "gre",
    "eus": "baq",
    "fas": "per",
    "fra": "fre",
    "isl": "ice",
    "msa": "may",
    "nld": "dut",
    "ron": "rum",
    "slk": "slo",
    "zho": "chi",
}

_SPECIAL_CODES = frozenset({"und", "mis", "mul", "zxx"})


def normalize_language(code: str | None) -> str:
    """Normalize a language code to ISO 639-2/B.

    Args:
        code: ISO 639-1, 639-2/B or 639-2/T code. None or blank gives "und".

    Returns:
        The ISO 639-2/B code. Unknown codes are returned lowercased as-is,
        since Matroska also accepts codes outside the table above.

    Examples:
        >>> normalize_language("fr")
        'fre'
        >>> normalize_language("FRA")
        'fre'
        >>> normalize_language("eng")
        'eng'
    """
    if not code or not code.strip():
        return "und"

    code = code.casefold().strip()

    if code in _SPECIAL_CODES:
        return code
    if len(code) == 2:
        converted = _ISO_639_1_TO_639_2B.get(code)
        if converted is None:
            logger.debug("Unknown ISO 639-1 code '%s', keeping as-is", code)
            return code
        return converted
    return _ISO_639_2T_TO_639_2B.get(code, code)


def languages_match(code1: str | None, code2: str | None) -> bool:
    """Check if two language codes represent the same language.

    Examples:
        >>> languages_match("fr", "fre")
        True
        >>> languages_match("fra", "fre")
        True
        >>> languages_match("eng", "fre")
        False
    """
    return normalize_language(code1) == normalize_language(code2)
