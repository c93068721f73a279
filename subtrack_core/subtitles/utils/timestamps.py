# subtrack_core/subtitles/utils/timestamps.py
"""
Timestamp parsing and formatting for ASS subtitle files.

Formats:
- ASS: H:MM:SS.cc (single digit hour, centiseconds or finer)
- Clock: M:SS (player position display, whole seconds)

All parsed times are integer milliseconds.
"""

from __future__ import annotations

import math

from .fields import parse_float_field, parse_int_field


def _combine(hours: float, minutes: float, seconds: float) -> int:
    try:
        total = hours * 3600000 + minutes * 60000 + seconds * 1000
    except OverflowError:
        return 0
    if not math.isfinite(total):
        return 0
    # half-up rounding; negative totals clamp to zero
    return max(0, int(math.floor(total + 0.5)))


def parse_timestamp(time_str: str) -> int:
    """
    Parse an ASS timestamp to integer milliseconds, leniently.

    Format: H:MM:SS.cc

    Any field that is not a number counts as zero. Decimal hours and
    minutes truncate toward zero ("1.5" -> 1). Input that does not split
    into exactly three fields, or whose total is not representable,
    returns 0.

    Args:
        time_str: ASS timestamp string (e.g., "1:02:03.50")

    Returns:
        Time in milliseconds (3723500 for the example above)
    """
    parts = time_str.split(":")
    if len(parts) != 3:
        return 0

    hours = parse_int_field(parts[0], 0)
    minutes = parse_int_field(parts[1], 0)
    seconds = parse_float_field(parts[2], 0.0)
    return _combine(hours, minutes, seconds)


def parse_timestamp_strict(time_str: str) -> int:
    """
    Parse an ASS timestamp, raising ``ValueError`` on malformed input.

    Same arithmetic as :func:`parse_timestamp`.
    """
    parts = time_str.strip().split(":")
    if len(parts) != 3:
        raise ValueError(f"Expected H:MM:SS.cc, got {time_str!r}")
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = float(parts[2])
    except ValueError as e:
        raise ValueError(f"Invalid timestamp {time_str!r}: {e}") from e
    if hours < 0 or minutes < 0 or not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"Invalid timestamp {time_str!r}: negative or non-finite field")
    return _combine(hours, minutes, seconds)


def format_ass_timestamp(ms: int | float) -> str:
    """
    Format milliseconds as an ASS timestamp (H:MM:SS.cc).

    Centiseconds are floored, negative input clamps to zero.
    """
    total_cs = max(int(math.floor(ms / 10)), 0)

    cs = total_cs % 100
    total_seconds = total_cs // 100
    seconds = total_seconds % 60
    total_minutes = total_seconds // 60
    minutes = total_minutes % 60
    hours = total_minutes // 60

    return f"{hours}:{minutes:02d}:{seconds:02d}.{cs:02d}"


def format_clock(ms: int | float | None) -> str:
    """Format a playback position as M:SS. Missing or zero positions show 0:00."""
    if not ms:
        return "0:00"
    total_seconds = int(ms // 1000)
    minutes = total_seconds // 60
    seconds = total_seconds % 60
    return f"{minutes}:{seconds:02d}"
