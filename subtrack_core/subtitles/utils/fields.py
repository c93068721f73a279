# subtrack_core/subtitles/utils/fields.py
"""
Lenient field codecs for ASS style and dialogue lines.

Every parser here is a pure function that returns a documented default
instead of raising. Bad input in one field never costs the whole line.

Formats:
- Integers/floats: plain decimal text, surrounding whitespace allowed
- Flags: "-1" is true, anything else is false
- Colors: &HBBGGRR& or &HAABBGGRR&, red is the low byte. The closing
  & is optional since most writers (Aegisub, pysubs2) omit it
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass


@dataclass(frozen=True)
class RGBColor:
    """Opaque RGB color. ASS alpha is dropped at parse time."""

    r: int
    g: int
    b: int

    def to_css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


WHITE = RGBColor(255, 255, 255)
BLACK = RGBColor(0, 0, 0)

HEX_DIGITS = frozenset(string.hexdigits)


def parse_int_field(text: str | None, default: int = 0) -> int:
    """
    Parse an integer field, returning ``default`` on failure.

    Decimal text is truncated toward zero ("20.7" -> 20).
    """
    if text is None:
        return default
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return default


def parse_float_field(text: str | None, default: float = 0.0) -> float:
    """Parse a float field, returning ``default`` on failure or non-finite values."""
    if text is None:
        return default
    try:
        value = float(text.strip())
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return value


def parse_flag(text: str | None) -> bool:
    return text is not None and text.strip() == "-1"


def parse_color(text: str | None, default: RGBColor = WHITE) -> RGBColor:
    """
    Parse an ASS color field into RGB.

    The payload after ``&H`` up to the closing ``&`` is a hex integer
    laid out as (AA)BBGGRR. Anything that does not match maps to
    ``default``.

    A missing closing ``&`` is accepted as a compatibility extension:
    Aegisub and pysubs2 write style colors as ``&H00FFFFFF`` with no
    sentinel. ``&H0000FF&`` and ``&H0000FF`` parse to the same color.

    Args:
        text: Raw field text, e.g. "&H0000FF&"
        default: Color returned for malformed input

    Returns:
        RGBColor with alpha discarded
    """
    if text is None:
        return default
    text = text.strip()
    if not text.startswith("&H"):
        return default

    payload = text[2:-1] if text.endswith("&") else text[2:]
    if not payload or len(payload) > 8 or any(c not in HEX_DIGITS for c in payload):
        return default
    value = int(payload, 16)

    return RGBColor(
        r=value & 0xFF,
        g=(value >> 8) & 0xFF,
        b=(value >> 16) & 0xFF,
    )


def split_fields(text: str, count: int) -> list[str]:
    """
    Split a comma-separated record into at most ``count`` fields.

    The last field keeps any remaining commas, so free text at the end of
    a record is never truncated. Callers check ``len()`` against their
    minimum field count.
    """
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")
    return text.split(",", count - 1)
