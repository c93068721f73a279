# subtrack_core/subtitles/parsers/ass_parser.py
# -*- coding: utf-8 -*-
"""
ASS subtitle text parser.

Parsing is maximally lenient:
- Unknown sections are ignored
- Short Style/Dialogue lines are dropped without error
- Bad numbers, times and colors take their documented defaults

Only [Script Info], [V4+ Styles] and [Events] contribute to the track.
"""
from __future__ import annotations

import logging
from collections import OrderedDict
from types import MappingProxyType
from typing import Iterable, List

from ..events import EventTrack
from ..styles import StyleTable
from ..track import SubtitleTrack
from .sections import SCRIPT_INFO, iter_section_lines

logger = logging.getLogger(__name__)


def parse_script_info(lines: Iterable[str]) -> "OrderedDict[str, str]":
    """Parse [Script Info] ``Key: value`` pairs. Comments (;) are skipped."""
    info: OrderedDict = OrderedDict()
    for stripped in iter_section_lines(lines, SCRIPT_INFO):
        if not stripped or stripped.startswith(';'):
            continue
        if ':' in stripped:
            key, value = stripped.split(':', 1)
            info[key.strip()] = value.strip()
    return info


def parse_ass_lines(lines: List[str], end_inclusive: bool = True) -> SubtitleTrack:
    """
    Build a track from already-split lines.

    Args:
        lines: Text lines of an ASS file
        end_inclusive: Whether events are active at their exact end time

    Returns:
        SubtitleTrack with events sorted by start time
    """
    styles = StyleTable.parse(lines)
    events = EventTrack.parse(lines, end_inclusive=end_inclusive)
    info = parse_script_info(lines)

    logger.info(
        "Parsed subtitle track: %d events, %d styles", len(events), len(styles)
    )
    return SubtitleTrack(
        styles=styles,
        events=events,
        script_info=MappingProxyType(dict(info)),
    )


def parse_ass_text(content: str, end_inclusive: bool = True) -> SubtitleTrack:
    # A leading BOM would hide the first section header.
    return parse_ass_lines(content.lstrip('\ufeff').splitlines(), end_inclusive=end_inclusive)
