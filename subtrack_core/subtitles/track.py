# subtrack_core/subtitles/track.py
"""
Loaded subtitle track: styles, events and script info together.

A track is built once from raw text and never mutated. To reload,
build a new track and swap the reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional

from .events import DialogueEvent, EventTrack
from .styles import StyleRecord, StyleTable


class SubtitleLoadError(ValueError):
    """Raised when subtitle text cannot be loaded into a track."""


@dataclass(frozen=True)
class SubtitleTrack:
    styles: StyleTable = field(default_factory=StyleTable)
    events: EventTrack = field(default_factory=EventTrack.empty)
    script_info: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def empty(cls) -> SubtitleTrack:
        return cls()

    @property
    def title(self) -> str:
        return self.script_info.get('Title', '')

    def style_for(self, event: DialogueEvent) -> Optional[StyleRecord]:
        """Resolve an event's style reference; None if the name is unknown."""
        return self.styles.get(event.style)

    def active_at(self, time_ms: int) -> List[DialogueEvent]:
        return self.events.active_at(time_ms)

    def validate(self) -> List[str]:
        """
        Collect data-integrity warnings. Never raises.

        Returns:
            List of human-readable warnings
        """
        warnings = []
        for i, event in enumerate(self.events):
            if event.end_ms < event.start_ms:
                warnings.append(f"Event {i}: end ({event.end_ms}) < start ({event.start_ms})")
            if event.style not in self.styles:
                warnings.append(f"Event {i}: references unknown style '{event.style}'")
        return warnings


def load_track(text: Optional[str], end_inclusive: bool = True) -> SubtitleTrack:
    """
    Parse raw ASS text into a track.

    Raises:
        SubtitleLoadError: if ``text`` is None, empty or whitespace only
    """
    if text is None or not text.strip():
        raise SubtitleLoadError("Empty subtitle file")

    from .parsers.ass_parser import parse_ass_text

    return parse_ass_text(text, end_inclusive=end_inclusive)
