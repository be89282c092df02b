"""Shared types for date/time formatting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Literal, TypedDict

# Accepted input representations; a tz-aware datetime is already canonical.
Instant = str | datetime | date


@dataclass(frozen=True)
class DateTimeFormatConfig:
    """Locale and time zone to apply when formatting.

    Attributes:
        language_code: BCP 47 language tag used for formatting, e.g. "en-US",
            "fr-FR" or "ja-JP". Falls back to the formatter's default language.
        time_zone: IANA time zone identifier, e.g. "America/New_York" or
            "Europe/Paris". Falls back to the host's detected zone.
    """

    language_code: str | None = None
    time_zone: str | None = None


class DateTimeVariant(StrEnum):
    """Predefined formatting variants to keep output consistent."""

    DATE = "date"
    DATETIME_SHORT = "datetime-short"
    DATETIME_LONG = "datetime-long"
    RELATIVE = "relative"
    CUSTOM = "custom"


NumericWidth = Literal["numeric", "2-digit"]
TextWidth = Literal["long", "short", "narrow"]
StyleWidth = Literal["full", "long", "medium", "short"]


class FormatOptions(TypedDict, total=False):
    """Locale-aware formatting options, merged per call.

    Field options (weekday through time_zone_name) and style presets
    (date_style, time_style) are mutually exclusive.
    """

    time_zone: str
    date_style: StyleWidth
    time_style: StyleWidth
    weekday: TextWidth
    era: TextWidth
    year: NumericWidth
    month: NumericWidth | TextWidth
    day: NumericWidth
    hour: NumericWidth
    minute: NumericWidth
    second: NumericWidth
    time_zone_name: Literal[
        "short", "long", "shortOffset", "longOffset", "shortGeneric", "longGeneric"
    ]
    hour12: bool
    hour_cycle: Literal["h11", "h12", "h23", "h24"]
