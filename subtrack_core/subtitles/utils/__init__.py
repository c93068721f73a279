# subtrack_core/subtitles/utils/__init__.py
from .fields import (
    BLACK,
    WHITE,
    RGBColor,
    parse_color,
    parse_flag,
    parse_float_field,
    parse_int_field,
    split_fields,
)
from .timestamps import (
    format_ass_timestamp,
    format_clock,
    parse_timestamp,
    parse_timestamp_strict,
)

__all__ = [
    "BLACK",
    "WHITE",
    "RGBColor",
    "format_ass_timestamp",
    "format_clock",
    "parse_color",
    "parse_flag",
    "parse_float_field",
    "parse_int_field",
    "parse_timestamp",
    "parse_timestamp_strict",
    "split_fields",
]
