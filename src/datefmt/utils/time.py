"""Canonical instant utilities.

This module is the single place where inputs become canonical instants:
- Canonical instant: a tz-aware ``datetime`` (any offset)
- Strings with a trailing offset marker (Z, z, +hh:mm, -hhmm) keep that offset
- Strings without a marker are interpreted as UTC, never as local time
- Naive datetimes keep their own absolute instant (Python local-time semantics)

Parsing leniency is whatever ``dateutil.parser.isoparse`` provides; malformed
strings raise its ValueError unchanged.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime

from dateutil import parser
from tzlocal import get_localzone_name

logger = logging.getLogger(__name__)

# Trailing UTC designator or numeric offset, with or without the colon
OFFSET_MARKER_PATTERN = re.compile(r"([Zz]|[+-]\d{2}:?\d{2})$")


def utc_now() -> datetime:
    """Return current UTC time as tz-aware datetime.

    Returns:
        Current UTC datetime with timezone.utc.
    """
    return datetime.now(UTC)


def detect_time_zone() -> str:
    """Return the host's IANA time zone name.

    Returns:
        IANA zone identifier, e.g. "Europe/Paris". "UTC" when the host
        reports no zone.
    """
    name = get_localzone_name()
    if not name:
        logger.debug("Host reported no local time zone, using UTC")
        return "UTC"
    return name


def has_offset_marker(s: str) -> bool:
    """Return True if the string ends with Z/z or a +hh:mm / -hhmm offset."""
    return OFFSET_MARKER_PATTERN.search(s) is not None


def normalize_instant(value: str | datetime | date) -> datetime:
    """Normalize an accepted input into a canonical tz-aware datetime.

    Args:
        value: ISO-like string, naive or aware datetime, or date.

    Returns:
        Tz-aware datetime. Aware datetimes are returned unchanged.

    Raises:
        ValueError: If a string cannot be parsed (raised by dateutil).
        TypeError: If value is not one of the accepted types.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            return value
        # Naive: astimezone() resolves it through the host's local zone
        return value.astimezone()

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)

    if isinstance(value, str):
        if has_offset_marker(value):
            return parser.isoparse(value)
        # Offsets the marker check rejects (e.g. "+05") are dropped, not honored
        return parser.isoparse(value).replace(tzinfo=UTC)

    raise TypeError(
        f"Expected str, datetime or date, got {type(value).__name__}: {value!r}"
    )


def is_before(a: datetime, b: datetime) -> bool:
    """Return True if instant a is strictly before instant b."""
    return a < b


def diff_seconds(a: datetime, b: datetime) -> float:
    """Return the signed difference a - b in seconds."""
    return (a - b).total_seconds()
