# subtrack_core/subtitles/styles.py
# -*- coding: utf-8 -*-
"""
Style records and the per-track style table.

Style lines are positional:

    Style: Name,Fontname,Fontsize,PrimaryColour,SecondaryColour,
           OutlineColour,BackColour,Bold,Italic,Underline,StrikeOut,
           ScaleX,ScaleY,Spacing,Angle,BorderStyle,Outline,Shadow,
           Alignment,MarginL,MarginR,MarginV

At least MIN_STYLE_FIELDS values must be present. Values past the
22nd (e.g. Encoding) are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from .parsers.sections import STYLES, iter_section_lines
from .utils.fields import (
    WHITE,
    RGBColor,
    parse_color,
    parse_flag,
    parse_float_field,
    parse_int_field,
)

logger = logging.getLogger(__name__)

STYLE_PREFIX = "Style:"
MIN_STYLE_FIELDS = 16
MAX_STYLE_FIELDS = 22

DEFAULT_FONT_SIZE = 16.0
DEFAULT_SCALE = 100.0
DEFAULT_BORDER_STYLE = 1
DEFAULT_ALIGNMENT = 2


@dataclass(frozen=True)
class StyleRecord:
    """Named bundle of font, color and geometry attributes."""

    name: str
    fontname: str = ""
    fontsize: float = DEFAULT_FONT_SIZE
    primary_color: RGBColor = WHITE
    secondary_color: RGBColor = WHITE
    outline_color: RGBColor = WHITE
    back_color: RGBColor = WHITE
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_out: bool = False
    scale_x: float = DEFAULT_SCALE
    scale_y: float = DEFAULT_SCALE
    spacing: float = 0.0
    angle: float = 0.0
    border_style: int = DEFAULT_BORDER_STYLE  # 1 = outline + shadow, 3 = opaque box
    outline: float = 0.0
    shadow: float = 0.0
    alignment: int = DEFAULT_ALIGNMENT  # numpad layout, 1-9
    margin_l: int = 0
    margin_r: int = 0
    margin_v: int = 0

    @classmethod
    def from_fields(cls, values: List[str]) -> StyleRecord:
        """
        Build a record from positional Style values.

        Missing trailing fields and unparseable numbers take their defaults;
        non-positive sizes/scales and out-of-range alignment codes do too.
        """

        def field(index: int) -> Optional[str]:
            return values[index] if index < len(values) else None

        fontsize = parse_float_field(field(2), DEFAULT_FONT_SIZE)
        if fontsize <= 0:
            fontsize = DEFAULT_FONT_SIZE

        scale_x = parse_float_field(field(11), DEFAULT_SCALE)
        if scale_x <= 0:
            scale_x = DEFAULT_SCALE
        scale_y = parse_float_field(field(12), DEFAULT_SCALE)
        if scale_y <= 0:
            scale_y = DEFAULT_SCALE

        border_style = parse_int_field(field(15), DEFAULT_BORDER_STYLE)
        if border_style <= 0:
            border_style = DEFAULT_BORDER_STYLE

        alignment = parse_int_field(field(18), DEFAULT_ALIGNMENT)
        if not 1 <= alignment <= 9:
            alignment = DEFAULT_ALIGNMENT

        return cls(
            name=values[0].strip(),
            fontname=values[1].strip(),
            fontsize=fontsize,
            primary_color=parse_color(field(3)),
            secondary_color=parse_color(field(4)),
            outline_color=parse_color(field(5)),
            back_color=parse_color(field(6)),
            bold=parse_flag(field(7)),
            italic=parse_flag(field(8)),
            underline=parse_flag(field(9)),
            strike_out=parse_flag(field(10)),
            scale_x=scale_x,
            scale_y=scale_y,
            spacing=parse_float_field(field(13), 0.0),
            angle=parse_float_field(field(14), 0.0),
            border_style=border_style,
            outline=parse_float_field(field(16), 0.0),
            shadow=parse_float_field(field(17), 0.0),
            alignment=alignment,
            margin_l=parse_int_field(field(19), 0),
            margin_r=parse_int_field(field(20), 0),
            margin_v=parse_int_field(field(21), 0),
        )

    @classmethod
    def parse_line(cls, line: str) -> Optional[StyleRecord]:
        """Parse one ``Style:`` line. Returns None for short or foreign lines."""
        stripped = line.strip()
        if not stripped.startswith(STYLE_PREFIX):
            return None
        values = stripped[len(STYLE_PREFIX):].split(",")
        if len(values) < MIN_STYLE_FIELDS:
            return None
        return cls.from_fields(values[:MAX_STYLE_FIELDS])


class StyleTable:
    """
    Name-keyed style records for one loaded track.

    Built once by :meth:`parse` and read-only afterwards. A later style
    with the same name replaces an earlier one.
    """

    def __init__(self, styles: Optional[Dict[str, StyleRecord]] = None):
        self._styles: Dict[str, StyleRecord] = dict(styles or {})

    @classmethod
    def parse(cls, lines: Iterable[str]) -> StyleTable:
        styles: Dict[str, StyleRecord] = {}
        dropped = 0
        for line in iter_section_lines(lines, STYLES):
            if not line.startswith(STYLE_PREFIX):
                continue
            record = StyleRecord.parse_line(line)
            if record is None:
                dropped += 1
                continue
            styles[record.name] = record

        logger.debug("Parsed %d styles (%d short lines dropped)", len(styles), dropped)
        return cls(styles)

    def get(self, name: Optional[str]) -> Optional[StyleRecord]:
        """Resolve a style reference. Unknown names resolve to None."""
        if name is None:
            return None
        return self._styles.get(name)

    def names(self) -> List[str]:
        return list(self._styles.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[StyleRecord]:
        return iter(self._styles.values())

    def __repr__(self) -> str:
        return f"StyleTable({self.names()!r})"

