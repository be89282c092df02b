"""Rendering of instants and relative times through Babel."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from babel import Locale
from babel.dates import format_datetime as babel_format_datetime
from babel.dates import format_timedelta

from .locales import parse_locale, resolve_time_zone
from .patterns import build_pattern

# Unit sizes must match Babel's own table so the forced unit is recovered exactly
SECONDS_PER_UNIT = {
    "second": 1,
    "minute": 60,
    "hour": 3600,
    "day": 86400,
    "month": 86400 * 30,
    "year": 86400 * 365,
}


def format_datetime(dt: datetime, language: str, options: Mapping[str, Any]) -> str:
    """Render a tz-aware datetime with a locale and formatting options.

    Args:
        dt: Tz-aware datetime.
        language: BCP 47 language tag.
        options: FormatOptions map; time_zone (if set) is applied before rendering.

    Returns:
        Locale-formatted string.

    Raises:
        InvalidFormatOptionError: If options are invalid.
        LookupError: If time_zone is unknown.
        babel.UnknownLocaleError: If the locale is unknown.
    """
    locale = parse_locale(language)
    pattern = build_pattern(locale, options)
    time_zone = options.get("time_zone")
    tzinfo = resolve_time_zone(time_zone) if time_zone else None
    return babel_format_datetime(dt, pattern, tzinfo=tzinfo, locale=locale)


def format_relative_time(
    value: int, unit: str, language: str, is_future: bool | None = None
) -> str:
    """Render a signed magnitude in a unit as a long-style relative phrase.

    Positive values read as future ("in 3 days"), negative as past
    ("3 days ago"). Labels and plural forms come from CLDR. A zero value
    reads as future unless is_future is False.

    Raises:
        ValueError: If unit is not one of second, minute, hour, day, month, year.
    """
    if unit not in SECONDS_PER_UNIT:
        raise ValueError(
            f"Unsupported relative time unit {unit!r}; "
            f"expected one of {list(SECONDS_PER_UNIT)}"
        )
    locale = parse_locale(language)
    if value == 0 and is_future is False:
        return _past_zero(locale, unit)
    # granularity pins the unit; an infinite threshold keeps coarser units out
    return format_timedelta(
        value * SECONDS_PER_UNIT[unit],
        granularity=unit,
        threshold=math.inf,
        add_direction=True,
        format="long",
        locale=locale,
    )


def _past_zero(locale: Locale, unit: str) -> str:
    # format_timedelta has no negative zero, so read the CLDR past pattern the way it does
    date_fields = locale._data["date_fields"]
    patterns = (date_fields.get(f"{unit}-long") or date_fields[unit])["past"]
    pattern = patterns.get(locale.plural_form(0)) or patterns["other"]
    return pattern.replace("{0}", "0")
