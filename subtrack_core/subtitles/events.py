# subtrack_core/subtitles/events.py
# -*- coding: utf-8 -*-
"""
Dialogue events and the time-ordered event track.

Dialogue lines are positional, and the text field may contain commas:

    Dialogue: Layer,Start,End,Style,Name,MarginL,MarginR,MarginV,Effect,Text

All timing is INTEGER MILLISECONDS. The track sorts its events by start
time once at build and answers "which events are on screen at t" from a
numpy index over that order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .parsers.sections import EVENTS, iter_section_lines
from .utils.fields import parse_int_field, split_fields
from .utils.timestamps import parse_timestamp

logger = logging.getLogger(__name__)

DIALOGUE_PREFIX = "Dialogue:"
EVENT_FIELDS = 10


@dataclass(frozen=True)
class DialogueEvent:
    """
    Single timed subtitle line.

    ``style`` is a weak reference: a name looked up in the StyleTable at
    render time, which may not exist. ``start_ms <= end_ms`` is not
    enforced; an inverted event never matches a query.
    """

    start_ms: int
    end_ms: int
    text: str
    style: str = "Default"
    layer: int = 0
    name: str = ""  # Actor field, informational only
    margin_l: int = 0
    margin_r: int = 0
    margin_v: int = 0
    effect: str = ""

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms

    def is_active_at(self, time_ms: int, end_inclusive: bool = True) -> bool:
        if end_inclusive:
            return self.start_ms <= time_ms <= self.end_ms
        return self.start_ms <= time_ms < self.end_ms

    @classmethod
    def parse_line(cls, line: str) -> Optional[DialogueEvent]:
        """
        Parse one ``Dialogue:`` line.

        Returns None when the line has fewer than ten fields. Everything
        after the ninth comma is the text, commas included.
        """
        stripped = line.strip()
        if not stripped.startswith(DIALOGUE_PREFIX):
            return None

        values = split_fields(stripped[len(DIALOGUE_PREFIX):], EVENT_FIELDS)
        if len(values) < EVENT_FIELDS:
            return None

        return cls(
            layer=parse_int_field(values[0], 0),
            start_ms=parse_timestamp(values[1].strip()),
            end_ms=parse_timestamp(values[2].strip()),
            style=values[3].strip(),
            name=values[4].strip(),
            margin_l=parse_int_field(values[5], 0),
            margin_r=parse_int_field(values[6], 0),
            margin_v=parse_int_field(values[7], 0),
            effect=values[8].strip(),
            text=values[9].strip(),
        )


class EventTrack:
    """
    Immutable, start-ordered collection of dialogue events.

    Queries never mutate the track and keep no state between calls, so a
    track can be shared freely and replaced wholesale on reload.
    """

    def __init__(self, events: Iterable[DialogueEvent] = (), end_inclusive: bool = True):
        self._events: Tuple[DialogueEvent, ...] = tuple(
            sorted(events, key=lambda e: e.start_ms)
        )
        self.end_inclusive = end_inclusive

        count = len(self._events)
        self._starts = np.fromiter((e.start_ms for e in self._events), dtype=np.int64, count=count)
        self._ends = np.fromiter((e.end_ms for e in self._events), dtype=np.int64, count=count)
        # Running max of end times; non-decreasing, so it can be bisected.
        self._max_ends = np.maximum.accumulate(self._ends) if count else self._ends

    @classmethod
    def parse(cls, lines: Iterable[str], end_inclusive: bool = True) -> EventTrack:
        events: List[DialogueEvent] = []
        dropped = 0
        for line in iter_section_lines(lines, EVENTS):
            if not line.startswith(DIALOGUE_PREFIX):
                continue
            event = DialogueEvent.parse_line(line)
            if event is None:
                dropped += 1
                continue
            events.append(event)

        logger.debug("Parsed %d dialogue events (%d short lines dropped)", len(events), dropped)
        return cls(events, end_inclusive=end_inclusive)

    @classmethod
    def empty(cls) -> EventTrack:
        return cls(())

    @property
    def events(self) -> Tuple[DialogueEvent, ...]:
        return self._events

    def active_at(self, time_ms: int) -> List[DialogueEvent]:
        """
        Return every event whose interval contains ``time_ms``, in start order.

        The interval is [start, end] when ``end_inclusive`` (an event is
        still shown at the exact instant of its end time), else [start, end).
        """
        if not self._events:
            return []

        # Candidates start at or before t ...
        hi = int(np.searchsorted(self._starts, time_ms, side="right"))
        # ... and lie past the first event whose running max end reaches t.
        side = "left" if self.end_inclusive else "right"
        lo = int(np.searchsorted(self._max_ends[:hi], time_ms, side=side))
        if lo >= hi:
            return []

        ends = self._ends[lo:hi]
        mask = ends >= time_ms if self.end_inclusive else ends > time_ms
        return [self._events[lo + int(i)] for i in np.flatnonzero(mask)]

    def timing_range(self) -> Tuple[int, int]:
        """Get (min_start_ms, max_end_ms) of all events."""
        if not self._events:
            return (0, 0)
        return (int(self._starts[0]), int(self._max_ends[-1]))

    def style_counts(self) -> Dict[str, int]:
        """
        Get event count per style name.

        Example: {'Default': 1243, 'Sign': 47, 'OP': 24}
        """
        counts: Dict[str, int] = {}
        for event in self._events:
            counts[event.style] = counts.get(event.style, 0) + 1
        return counts

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[DialogueEvent]:
        return iter(self._events)

    def __getitem__(self, index: int) -> DialogueEvent:
        return self._events[index]

    def __repr__(self) -> str:
        return f"EventTrack({len(self._events)} events)"


def same_events(a: Sequence[DialogueEvent], b: Sequence[DialogueEvent]) -> bool:
    """Identity comparison of two active sets, for change detection."""
    return len(a) == len(b) and all(x is y for x, y in zip(a, b))
