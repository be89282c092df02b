"""Pattern generation from locale formatting options.

Turns a FormatOptions map into an LDML pattern for a locale, the way a
date-time pattern generator does:
- Style presets (date_style/time_style) come straight from the locale and are
  joined with the locale's date-time glue.
- Field options become a skeleton, split into a date part and a time part.
  Each part is matched against the locale's available formats, then field
  widths are adjusted to the request and missing fields are appended.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from itertools import combinations
from typing import Any

from babel import Locale
from babel.dates import match_skeleton, tokenize_pattern, untokenize_pattern

from .locales import HOUR_CHARS, pattern_text, preferred_hour_char

logger = logging.getLogger(__name__)


class InvalidFormatOptionError(ValueError):
    """Raised when a formatting option map is invalid.

    Covers unknown option keys, values outside an option's allowed set, and
    style presets combined with individual field options.
    """


STYLE_VALUES = ("full", "long", "medium", "short")
NUMERIC_WIDTHS = {"numeric": 1, "2-digit": 2}
TEXT_WIDTHS = {"short": 3, "long": 4, "narrow": 5}
ERA_WIDTHS = {"short": 1, "long": 4, "narrow": 5}
MONTH_WIDTHS = {**NUMERIC_WIDTHS, **TEXT_WIDTHS}
ZONE_NAME_FIELDS = {
    "short": ("z", 1),
    "long": ("z", 4),
    "shortOffset": ("O", 1),
    "longOffset": ("O", 4),
    "shortGeneric": ("v", 1),
    "longGeneric": ("v", 4),
}
HOUR_CYCLE_CHARS = {"h11": "K", "h12": "h", "h23": "H", "h24": "k"}

# Option key -> (skeleton char, value -> field width)
FIELD_OPTIONS: dict[str, tuple[str, dict[str, int]]] = {
    "era": ("G", ERA_WIDTHS),
    "year": ("y", NUMERIC_WIDTHS),
    "month": ("M", MONTH_WIDTHS),
    "weekday": ("E", TEXT_WIDTHS),
    "day": ("d", NUMERIC_WIDTHS),
    "hour": ("h", NUMERIC_WIDTHS),
    "minute": ("m", NUMERIC_WIDTHS),
    "second": ("s", NUMERIC_WIDTHS),
}
STYLE_OPTIONS = ("date_style", "time_style")
HOUR_OPTIONS = ("hour12", "hour_cycle")

# Without any of these, numeric year/month/day are rendered
DEFAULT_TRIGGERS = ("weekday", "year", "month", "day", "hour", "minute", "second")
DEFAULT_DATE_FIELDS = {"y": ("y", 1), "M": ("M", 1), "d": ("d", 1)}

DATE_FAMILIES = ("G", "y", "M", "E", "d")
TIME_FAMILIES = ("hour", "m", "s", "zone")

_FAMILY_BY_CHAR = {
    "G": "G",
    "y": "y", "Y": "y", "u": "y", "U": "y", "r": "y",
    "M": "M", "L": "M",
    "E": "E", "c": "E", "e": "E",
    "d": "d",
    "h": "hour", "H": "hour", "K": "hour", "k": "hour",
    "m": "m",
    "s": "s",
    "z": "zone", "v": "zone", "V": "zone", "O": "zone",
    "Z": "zone", "x": "zone", "X": "zone",
}

Field = tuple[str, int]


def _family(char: str) -> str:
    return _FAMILY_BY_CHAR.get(char, char)


def _validate(options: Mapping[str, Any]) -> None:
    for key, value in options.items():
        if key in FIELD_OPTIONS:
            allowed: Any = FIELD_OPTIONS[key][1]
        elif key in STYLE_OPTIONS:
            allowed = STYLE_VALUES
        elif key == "time_zone_name":
            allowed = ZONE_NAME_FIELDS
        elif key == "hour_cycle":
            allowed = HOUR_CYCLE_CHARS
        elif key == "hour12":
            if not isinstance(value, bool):
                raise InvalidFormatOptionError(
                    f"Option 'hour12' must be a bool, got {type(value).__name__}"
                )
            continue
        elif key == "time_zone":
            if not isinstance(value, str):
                raise InvalidFormatOptionError(
                    f"Option 'time_zone' must be a string, got {type(value).__name__}"
                )
            continue
        else:
            raise InvalidFormatOptionError(f"Unknown formatting option: {key!r}")

        if value not in allowed:
            raise InvalidFormatOptionError(
                f"Invalid value {value!r} for option {key!r}; "
                f"expected one of {sorted(allowed)}"
            )

    if any(key in options for key in STYLE_OPTIONS):
        conflicting = [
            key for key in options if key in FIELD_OPTIONS or key == "time_zone_name"
        ]
        if conflicting:
            raise InvalidFormatOptionError(
                f"Can't combine date_style/time_style with field options: {conflicting}"
            )


def resolve_hour_char(locale: Locale, options: Mapping[str, Any]) -> str:
    """Return the hour field character for the requested hour cycle.

    hour12 takes precedence over hour_cycle; without either, the locale's
    preferred cycle is used.
    """
    if "hour12" in options:
        return "h" if options["hour12"] else "H"
    if "hour_cycle" in options:
        return HOUR_CYCLE_CHARS[options["hour_cycle"]]
    return preferred_hour_char(locale)


def _requested_fields(options: Mapping[str, Any], hour_char: str) -> dict[str, Field]:
    fields: dict[str, Field] = {}
    for key, (char, widths) in FIELD_OPTIONS.items():
        if key not in options:
            continue
        if key == "hour":
            char = hour_char
        fields[_family(char)] = (char, widths[options[key]])

    if "time_zone_name" in options:
        fields["zone"] = ZONE_NAME_FIELDS[options["time_zone_name"]]

    if not any(key in options for key in DEFAULT_TRIGGERS):
        fields.update(DEFAULT_DATE_FIELDS)
    return fields


def _skeleton(requested: dict[str, Field], families: tuple[str, ...]) -> str:
    return "".join(requested[f][0] * requested[f][1] for f in families)


def _closest_pattern(locale: Locale, requested: dict[str, Field]) -> str:
    """Return the locale pattern for the largest matchable subset of fields.

    Babel's matcher only accepts skeletons with the exact same fields, so
    smaller subsets are tried until one matches; the rest get appended.
    """
    skeletons = locale.datetime_skeletons
    families = tuple(requested)
    for size in range(len(families), 0, -1):
        for subset in combinations(families, size):
            match = match_skeleton(_skeleton(requested, subset), skeletons)
            if match:
                logger.debug("Matched skeleton %r for %s", match, sorted(requested))
                return pattern_text(skeletons[match])
    return ""


def _is_text(char: str, width: int) -> bool:
    if char in ("E", "G"):
        return True
    if char in ("M", "L", "c", "e"):
        return width >= 3
    return False


def _adjust_pattern(pattern: str, requested: dict[str, Field]) -> str:
    """Adjust field widths to the request and append fields the pattern lacks.

    A numeric field the locale chose for a text request is kept as-is: the
    pattern already carries its own literal (e.g. "M月").
    """
    tokens: list[tuple[str, Any]] = []
    seen: set[str] = set()
    for kind, value in tokenize_pattern(pattern) if pattern else []:
        if kind == "field":
            char, width = value
            family = _family(char)
            if family in requested:
                want_char, want_width = requested[family]
                seen.add(family)
                keep_numeric = not _is_text(char, width) and _is_text(want_char, want_width)
                if family in ("M", "E") and keep_numeric:
                    tokens.append((kind, value))
                    continue
                if family in ("hour", "zone"):
                    char = want_char
                # Minutes and seconds keep their padding
                width = max(width, want_width) if family in ("m", "s") else want_width
                value = (char, width)
        tokens.append((kind, value))

    for family, (char, width) in requested.items():
        if family in seen:
            continue
        if tokens:
            tokens.append(("chars", " "))
        tokens.append(("field", (char, width)))
        if family == "hour" and char in "hK":
            tokens.extend([("chars", " "), ("field", ("a", 1))])

    return untokenize_pattern(tokens)


def _part_pattern(locale: Locale, requested: dict[str, Field]) -> str:
    return _adjust_pattern(_closest_pattern(locale, requested), requested)


def _glue(locale: Locale, length: str, date_pattern: str, time_pattern: str) -> str:
    glue = pattern_text(locale.datetime_formats[length])
    return glue.replace("{1}", date_pattern).replace("{0}", time_pattern)


def _glue_length(date_fields: dict[str, Field]) -> str:
    month_width = date_fields.get("M", ("M", 0))[1]
    if month_width == 4:
        return "full" if "E" in date_fields else "long"
    if month_width == 3:
        return "medium"
    return "short"


def _field_pattern(locale: Locale, requested: dict[str, Field]) -> str:
    date_fields = {f: v for f, v in requested.items() if f in DATE_FAMILIES}
    time_fields = {f: v for f, v in requested.items() if f in TIME_FAMILIES}
    date_pattern = _part_pattern(locale, date_fields) if date_fields else ""
    time_pattern = _part_pattern(locale, time_fields) if time_fields else ""
    if date_pattern and time_pattern:
        return _glue(locale, _glue_length(date_fields), date_pattern, time_pattern)
    return date_pattern or time_pattern


def _apply_hour_char(pattern: str, hour_char: str) -> str:
    """Switch a preset time pattern to another hour cycle.

    Adds a day period after the last time field for 12-hour cycles and drops
    it for 24-hour cycles.
    """
    twelve_hour = hour_char in "hK"
    tokens: list[tuple[str, Any]] = []
    has_period = False
    strip_next = False
    for kind, value in tokenize_pattern(pattern):
        if kind == "field" and value[0] in HOUR_CHARS:
            value = (hour_char, value[1])
        elif kind == "field" and value[0] in "abB":
            if not twelve_hour:
                if tokens and tokens[-1][0] == "chars":
                    text = tokens[-1][1].rstrip()
                    if text:
                        tokens[-1] = ("chars", text)
                    else:
                        tokens.pop()
                else:
                    strip_next = True
                continue
            has_period = True
        elif kind == "chars" and strip_next:
            strip_next = False
            value = value.lstrip()
            if not value:
                continue
        tokens.append((kind, value))

    if twelve_hour and not has_period:
        last_time_field = max(
            (
                i
                for i, (kind, value) in enumerate(tokens)
                if kind == "field" and _family(value[0]) in ("hour", "m", "s")
            ),
            default=len(tokens) - 1,
        )
        tokens[last_time_field + 1 : last_time_field + 1] = [
            ("chars", " "),
            ("field", ("a", 1)),
        ]
    return untokenize_pattern(tokens)


def _style_pattern(locale: Locale, options: Mapping[str, Any], hour_char: str) -> str:
    date_style = options.get("date_style")
    time_style = options.get("time_style")
    date_pattern = pattern_text(locale.date_formats[date_style]) if date_style else ""
    time_pattern = ""
    if time_style:
        time_pattern = pattern_text(locale.time_formats[time_style])
        if any(key in options for key in HOUR_OPTIONS):
            time_pattern = _apply_hour_char(time_pattern, hour_char)
    if date_pattern and time_pattern:
        return _glue(locale, date_style, date_pattern, time_pattern)
    return date_pattern or time_pattern


def build_pattern(locale: Locale, options: Mapping[str, Any]) -> str:
    """Build an LDML date/time pattern for a locale from formatting options.

    Args:
        locale: Babel locale providing CLDR patterns.
        options: FormatOptions map. time_zone is accepted and ignored here.

    Returns:
        LDML pattern suitable for babel.dates.format_datetime.

    Raises:
        InvalidFormatOptionError: If an option key or value is invalid, or
            style presets are mixed with field options.
    """
    _validate(options)
    hour_char = resolve_hour_char(locale, options)
    if any(key in options for key in STYLE_OPTIONS):
        pattern = _style_pattern(locale, options, hour_char)
    else:
        pattern = _field_pattern(locale, _requested_fields(options, hour_char))
    logger.debug("Resolved pattern %r for locale %s", pattern, locale)
    return pattern
