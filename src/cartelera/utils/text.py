"""Text utilities for programme titles, day tokens and version tags."""

import re

# Version key for ticket entries whose title carries no version tag
DEFAULT_VERSION = "DEFAULT"

# Audio/subtitle variants a screening can be sold as
VERSION_TAGS = ("ES", "VOSE", "CAT", "VOSC")

# Order matters: the first tag found in a session time wins
_SESSION_VERSION_ORDER = ("VOSE", "ES", "CAT", "VOSC")

# Catalan weekday abbreviations (source) → Spanish (display)
CATALAN_TO_SPANISH_DAYS: dict[str, str] = {
    "Dv.": "Vie.",
    "Ds.": "Sáb.",
    "Dg.": "Dom.",
    "Dll.": "Lun.",
    "Dt.": "Mar.",
    "Dc.": "Mié.",
    "Dj.": "Jue.",
}

_INFO_MARKER_RE = re.compile(r"\s*\(\+info\)\s*", re.IGNORECASE)
_VERSIONED_TITLE_RE = re.compile(
    r"^(.*?)\s*\((" + "|".join(VERSION_TAGS) + r")\)\s*$", re.IGNORECASE
)


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim."""
    return re.sub(r"\s+", " ", text).strip()


def clean_title(title: str) -> str:
    """
    Clean a programme title.

    Removes the "(+info)" link marker the programme page appends to titles:
    "Nosferatu (+info)" → "Nosferatu". Only the first marker is removed.

    Args:
        title: Raw title text

    Returns:
        Trimmed title, possibly empty
    """
    return _INFO_MARKER_RE.sub(" ", title.strip(), count=1).strip()


def base_title(title: str) -> str:
    """
    Reduce a title to its lookup key.

    Everything from the first "(" on is dropped, so "Movie X (ES)" and
    "Movie X (VOSE)" share the key "movie x".
    """
    return title.split("(", 1)[0].strip().lower()


def split_ticket_title(title: str) -> tuple[str, str]:
    """
    Split a ticketing page title into (base title, version).

    Examples:
        "Movie X (VOSE)" → ("movie x", "VOSE")
        "Movie X (vosc)" → ("movie x", "VOSC")
        "Movie X"        → ("movie x", "DEFAULT")
        "Movie X (2024)" → ("movie x (2024)", "DEFAULT")
    """
    m = _VERSIONED_TITLE_RE.match(title.strip())
    if m:
        return m.group(1).strip().lower(), m.group(2).upper()
    return title.strip().lower(), DEFAULT_VERSION


def detect_version(time: str) -> str:
    """
    Find the version tag in a session time string such as "10.15-VOSE".

    Tags are plain substrings checked as VOSE, ES, CAT, VOSC; the first one
    present wins. "ES" can match inside unrelated text, and checking VOSE
    first is the only guard against that.

    Returns:
        The tag, or "DEFAULT" when none is present
    """
    for tag in _SESSION_VERSION_ORDER:
        if tag in time:
            return tag
    return DEFAULT_VERSION


def translate_day(day: str, table: dict[str, str] | None = None) -> str:
    """
    Translate the weekday abbreviation at the start of a day token.

    "Dv. 13" → "Vie. 13". Tokens with no known prefix are returned unchanged.

    Args:
        day: Day token from the programme grid
        table: Prefix translations, tried in order (default: Catalan → Spanish)

    Returns:
        Translated day token
    """
    if table is None:
        table = CATALAN_TO_SPANISH_DAYS
    for source, target in table.items():
        if day.startswith(source):
            return target + day[len(source):]
    return day
