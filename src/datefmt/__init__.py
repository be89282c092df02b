"""
datefmt core package.

Locale- and timezone-aware date/time formatting helpers:
- Input normalization into canonical tz-aware datetimes (`datefmt.utils.time`)
- Pattern generation and rendering over CLDR data (`datefmt.intl`)
- The public formatter with named variants and expiry checks (`datefmt.formatter`)
- A small Typer-based CLI (`datefmt.cli`)

Configuration:
- Shared defaults live in `datefmt.global_config`.
- Per-call locale and zone go through `DateTimeFormatConfig`.
"""

from .formatter import DateTimeUtils, format_datetime, is_expired
from .types import DateTimeFormatConfig, DateTimeVariant, FormatOptions

__all__ = [
    "DateTimeFormatConfig",
    "DateTimeUtils",
    "DateTimeVariant",
    "FormatOptions",
    "format_datetime",
    "is_expired",
]
