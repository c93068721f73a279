# subtrack_core/subtitles/presentation.py
# -*- coding: utf-8 -*-
"""
Style -> presentation attribute mapping.

Turns a StyleRecord (or no style at all) plus the current display
context into the concrete attributes a drawing surface needs. The mapping
is pure: the same (style, context) always yields equal attributes.

Base font size comes from PLATFORM_FONT_SCALE, a hand-tuned table of
viewport-height multipliers per platform class. Override it through
``DisplayContext.font_scale`` (or the ``platform_font_scale`` setting)
rather than editing the mapping code.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from .events import DialogueEvent
from .styles import DEFAULT_ALIGNMENT, DEFAULT_FONT_SIZE, StyleRecord
from .utils.fields import BLACK, WHITE, RGBColor


class PlatformClass(Enum):
    IOS = 'ios'
    ANDROID = 'android'
    DEFAULT = 'default'

    @classmethod
    def from_name(cls, name: Optional[str]) -> PlatformClass:
        try:
            return cls((name or '').strip().lower())
        except ValueError:
            return cls.DEFAULT


class HorizontalAlign(Enum):
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'


class VerticalAnchor(Enum):
    TOP = 'top'
    MIDDLE = 'middle'
    BOTTOM = 'bottom'


PLATFORM_FONT_SCALE: Dict[str, float] = {
    PlatformClass.IOS.value: 0.022,
    PlatformClass.ANDROID.value: 0.072,
    PlatformClass.DEFAULT.value: 0.09,
}

# Style font sizes are divided by this before scaling the base size.
FONT_SIZE_DIVISOR = 160.0

SHADOW_OFFSET: Tuple[int, int] = (1, 1)
DEFAULT_SHADOW_RADIUS = 1.0


@dataclass(frozen=True)
class DisplayContext:
    """Viewport metrics and platform class of the presentation surface."""

    width: float
    height: float
    platform: PlatformClass = PlatformClass.DEFAULT
    font_scale: Mapping[str, float] = field(default_factory=lambda: dict(PLATFORM_FONT_SCALE))

    def __hash__(self) -> int:
        return hash((self.width, self.height, self.platform, tuple(sorted(self.font_scale.items()))))

    @property
    def scale_factor(self) -> float:
        scale = self.font_scale.get(self.platform.value)
        if scale is None:
            scale = self.font_scale.get(
                PlatformClass.DEFAULT.value, PLATFORM_FONT_SCALE[PlatformClass.DEFAULT.value]
            )
        return scale

    @property
    def base_font_size(self) -> float:
        return self.scale_factor * self.height


@dataclass(frozen=True)
class PresentationAttributes:
    """Concrete, surface-ready text attributes for one subtitle block."""

    color: RGBColor = WHITE
    font_size: float = DEFAULT_FONT_SIZE
    font_family: str = ''
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike_out: bool = False
    shadow_color: RGBColor = BLACK
    shadow_offset: Tuple[int, int] = SHADOW_OFFSET
    shadow_radius: float = DEFAULT_SHADOW_RADIUS
    margin_left: int = 0
    margin_right: int = 0
    margin_vertical: int = 0
    horizontal: HorizontalAlign = HorizontalAlign.CENTER
    anchor: VerticalAnchor = VerticalAnchor.BOTTOM

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to a style dictionary a drawing surface can consume."""
        decorations = [name for flag, name in ((self.underline, 'underline'),
                                               (self.strike_out, 'line-through')) if flag]
        return {
            'color': self.color.to_css(),
            'fontSize': self.font_size,
            'fontFamily': self.font_family or None,
            'fontWeight': 'bold' if self.bold else 'normal',
            'fontStyle': 'italic' if self.italic else 'normal',
            'textDecorationLine': ' '.join(decorations) or 'none',
            'textShadowColor': self.shadow_color.to_css(),
            'textShadowOffset': {'width': self.shadow_offset[0], 'height': self.shadow_offset[1]},
            'textShadowRadius': self.shadow_radius,
            'marginLeft': self.margin_left,
            'marginRight': self.margin_right,
            'marginVertical': self.margin_vertical,
            'textAlign': self.horizontal.value,
            'anchor': self.anchor.value,
        }


DEFAULT_ATTRIBUTES = PresentationAttributes()


def alignment_layout(code: int) -> Tuple[HorizontalAlign, VerticalAnchor]:
    """
    Map a numpad alignment code to (justification, anchor).

    1-3 bottom row, 4-6 middle row, 7-9 top row; within a row the codes
    run left, center, right. Codes outside 1-9 use the default (2).
    """
    if not 1 <= code <= 9:
        code = DEFAULT_ALIGNMENT
    row, column = divmod(code - 1, 3)
    horizontal = (HorizontalAlign.LEFT, HorizontalAlign.CENTER, HorizontalAlign.RIGHT)[column]
    anchor = (VerticalAnchor.BOTTOM, VerticalAnchor.MIDDLE, VerticalAnchor.TOP)[row]
    return horizontal, anchor


def resolve(style: Optional[StyleRecord], context: DisplayContext) -> PresentationAttributes:
    """
    Derive presentation attributes for ``style`` on the given display.

    Args:
        style: Resolved style, or None when the event's style reference
            does not exist in the track
        context: Current viewport metrics and platform class

    Returns:
        PresentationAttributes; DEFAULT_ATTRIBUTES when style is None
    """
    if style is None:
        return DEFAULT_ATTRIBUTES

    base = context.base_font_size
    font_size = base * (style.fontsize / FONT_SIZE_DIVISOR) if style.fontsize else base
    horizontal, anchor = alignment_layout(style.alignment)

    return PresentationAttributes(
        color=style.primary_color,
        font_size=font_size,
        font_family=style.fontname,
        bold=style.bold,
        italic=style.italic,
        underline=style.underline,
        strike_out=style.strike_out,
        shadow_color=style.outline_color,
        shadow_offset=SHADOW_OFFSET,
        shadow_radius=style.outline or DEFAULT_SHADOW_RADIUS,
        margin_left=style.margin_l,
        margin_right=style.margin_r,
        margin_vertical=style.margin_v,
        horizontal=horizontal,
        anchor=anchor,
    )


def apply_event_margins(attrs: PresentationAttributes, event: DialogueEvent) -> PresentationAttributes:
    """Non-zero event margins override the style's, as in ASS renderers."""
    changes = {}
    if event.margin_l:
        changes['margin_left'] = event.margin_l
    if event.margin_r:
        changes['margin_right'] = event.margin_r
    if event.margin_v:
        changes['margin_vertical'] = event.margin_v
    return replace(attrs, **changes) if changes else attrs
