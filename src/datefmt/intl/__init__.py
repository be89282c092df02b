"""Locale-aware formatting primitives over Babel and CLDR data."""

from .locales import parse_locale, preferred_hour_char, resolve_time_zone
from .patterns import InvalidFormatOptionError, build_pattern
from .render import SECONDS_PER_UNIT, format_datetime, format_relative_time

__all__ = [
    "SECONDS_PER_UNIT",
    "InvalidFormatOptionError",
    "build_pattern",
    "format_datetime",
    "format_relative_time",
    "parse_locale",
    "preferred_hour_char",
    "resolve_time_zone",
]
