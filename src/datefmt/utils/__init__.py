"""Utility modules.

This package provides shared utilities used across the codebase.
"""

from .time import (
    OFFSET_MARKER_PATTERN,
    detect_time_zone,
    diff_seconds,
    has_offset_marker,
    is_before,
    normalize_instant,
    utc_now,
)

__all__ = [
    # Time utilities (canonical instant handling)
    "OFFSET_MARKER_PATTERN",
    "detect_time_zone",
    "diff_seconds",
    "has_offset_marker",
    "is_before",
    "normalize_instant",
    "utc_now",
]
