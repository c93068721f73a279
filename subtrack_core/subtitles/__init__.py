# subtrack_core/subtitles/__init__.py
"""
Subtitle track engine: ASS parsing, active-event queries, display text
normalization and style-to-presentation mapping.
"""
from .events import DialogueEvent, EventTrack
from .markup import strip_override_tags, to_display_text
from .presentation import (
    PLATFORM_FONT_SCALE,
    DisplayContext,
    HorizontalAlign,
    PlatformClass,
    PresentationAttributes,
    VerticalAnchor,
    alignment_layout,
    apply_event_margins,
    resolve,
)
from .styles import StyleRecord, StyleTable
from .track import SubtitleLoadError, SubtitleTrack, load_track
from .parsers.ass_parser import parse_ass_text

__all__ = [
    'PLATFORM_FONT_SCALE',
    'DialogueEvent',
    'DisplayContext',
    'EventTrack',
    'HorizontalAlign',
    'PlatformClass',
    'PresentationAttributes',
    'StyleRecord',
    'StyleTable',
    'SubtitleLoadError',
    'SubtitleTrack',
    'VerticalAnchor',
    'alignment_layout',
    'apply_event_margins',
    'load_track',
    'parse_ass_text',
    'resolve',
    'strip_override_tags',
    'to_display_text',
]
