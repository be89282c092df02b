"""Date/time formatting with named variants and expiry checks.

All inputs go through ``normalize_instant`` first. Variants map to a fixed
base option set; caller options are layered on top and always win.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from . import intl
from .global_config import DEFAULT_LANGUAGE
from .types import DateTimeFormatConfig, DateTimeVariant, FormatOptions, Instant
from .utils.time import detect_time_zone, diff_seconds, is_before, normalize_instant, utc_now

logger = logging.getLogger(__name__)

VARIANT_OPTIONS: dict[str, FormatOptions] = {
    DateTimeVariant.DATE: {"year": "numeric", "month": "2-digit", "day": "2-digit"},
    DateTimeVariant.DATETIME_SHORT: {
        "year": "numeric",
        "month": "2-digit",
        "day": "2-digit",
        "hour": "2-digit",
        "minute": "2-digit",
    },
    DateTimeVariant.DATETIME_LONG: {"date_style": "full", "time_style": "long"},
    DateTimeVariant.CUSTOM: {},
}

# (limit, unit) checked in order; months and years are fixed 30/365-day spans
RELATIVE_LADDER = (
    (60, "second"),
    (60, "minute"),
    (24, "hour"),
    (30, "day"),
    (12, "month"),
)
RELATIVE_DIVISORS = {"minute": 60, "hour": 60, "day": 24, "month": 30}


class DateTimeUtils:
    """Formatter for instants with unified config and variants.

    Args:
        default_language: BCP 47 tag used when a call's config has none.
        default_time_zone: IANA zone used when a call's config has none.
            Detected from the host when None.
        now: Clock returning the current tz-aware time.
    """

    def __init__(
        self,
        default_language: str = DEFAULT_LANGUAGE,
        default_time_zone: str | None = None,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        self.default_language = default_language
        self.default_time_zone = default_time_zone
        self._now = now

    def format(
        self,
        value: Instant | None,
        variant: DateTimeVariant | str = DateTimeVariant.DATETIME_SHORT,
        config: DateTimeFormatConfig | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Format an instant using a predefined variant or custom options.

        Args:
            value: Instant to format. Empty/falsy input yields "".
            variant: One of date, datetime-short, datetime-long, relative,
                custom. Unrecognized variants behave like custom.
            config: Language and time zone for this call.
            options: FormatOptions layered over the variant's base options.

        Returns:
            Formatted string.

        Raises:
            ValueError: If a string input cannot be parsed.
            InvalidFormatOptionError: If the merged options are invalid.
            LookupError: If the time zone is unknown.
        """
        if not value:
            return ""

        instant = normalize_instant(value)
        config = config or DateTimeFormatConfig()
        language = config.language_code or self.default_language

        if variant == DateTimeVariant.RELATIVE:
            return self._format_relative(instant, language)

        time_zone = config.time_zone or self.default_time_zone or detect_time_zone()
        merged: dict[str, Any] = {
            "time_zone": time_zone,
            **VARIANT_OPTIONS.get(variant, {}),
            **(options or {}),
        }
        logger.debug("Formatting %s as %s (language=%s)", instant, variant, language)
        return intl.format_datetime(instant, language, merged)

    def is_expired(self, value: Instant) -> bool:
        """Return True if the instant is strictly before now."""
        return is_before(normalize_instant(value), self._now())

    def _format_relative(self, instant: datetime, language: str) -> str:
        diff = diff_seconds(instant, self._now())
        is_future = diff > 0

        magnitude = abs(diff)
        for limit, unit in RELATIVE_LADDER:
            if unit in RELATIVE_DIVISORS:
                magnitude /= RELATIVE_DIVISORS[unit]
            if magnitude < limit:
                break
        else:
            magnitude, unit = abs(diff) / 86400 / 365, "year"

        # Half-up rounding on the non-negative magnitude
        rounded = math.floor(magnitude + 0.5)
        return intl.format_relative_time(
            rounded if is_future else -rounded, unit, language, is_future=is_future
        )


def format_datetime(
    value: Instant | None,
    variant: DateTimeVariant | str = DateTimeVariant.DATETIME_SHORT,
    config: DateTimeFormatConfig | None = None,
    options: Mapping[str, Any] | None = None,
) -> str:
    """Format an instant with default settings. See DateTimeUtils.format."""
    return DateTimeUtils().format(value, variant, config, options)


def is_expired(value: Instant) -> bool:
    """Return True if the instant is strictly before now."""
    return DateTimeUtils().is_expired(value)
