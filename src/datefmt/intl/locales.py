"""Locale and time zone resolution over Babel."""

from __future__ import annotations

from datetime import tzinfo

from babel import Locale
from babel.dates import get_timezone, tokenize_pattern

HOUR_CHARS = "hHKk"


def parse_locale(tag: str) -> Locale:
    """Parse a BCP 47 language tag into a Babel locale.

    Accepts both "en-US" and "en_US" separators.

    Raises:
        babel.UnknownLocaleError: If CLDR has no data for the locale.
        ValueError: If the tag is malformed.
    """
    return Locale.parse(tag.replace("_", "-"), sep="-")


def resolve_time_zone(name: str) -> tzinfo:
    """Resolve an IANA time zone identifier.

    Raises:
        LookupError: If the zone is unknown.
    """
    return get_timezone(name)


def pattern_text(pattern: object) -> str:
    """Return the raw LDML pattern string of a Babel pattern object or string."""
    return getattr(pattern, "pattern", pattern)


def preferred_hour_char(locale: Locale) -> str:
    """Return the locale's preferred hour field character (h, H, K or k).

    Read from the locale's short time pattern, the same source CLDR uses to
    derive the preferred hour cycle.
    """
    for kind, value in tokenize_pattern(pattern_text(locale.time_formats["short"])):
        if kind == "field" and value[0] in HOUR_CHARS:
            return value[0]
    return "H"
