# subtrack_core/playback/session.py

# -*- coding: utf-8 -*-

"""
Clock-driven subtitle session.

Glue between a playback clock, a loaded track and a drawing surface. The
clock reports status updates; on every update the session queries the
active events and, when the set (or the display context) changed, hands a
fresh list of styled text blocks to the surface callback.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging
from pathlib import Path
from typing import Callable, List, Optional

from ..config import AppConfig
from ..io.loader import read_subtitle_text
from ..subtitles.events import DialogueEvent, same_events
from ..subtitles.markup import to_display_text
from ..subtitles.presentation import (
    DisplayContext,
    PlatformClass,
    PresentationAttributes,
    apply_event_margins,
    resolve,
)
from ..subtitles.track import SubtitleLoadError, SubtitleTrack, load_track
from ..subtitles.utils.timestamps import format_clock

logger = logging.getLogger(__name__)

SEEK_STEP_S = 10


@dataclass(frozen=True)
class PlaybackStatus:
    """Snapshot reported by the playback clock."""
    position_ms: Optional[int] = None
    duration_ms: Optional[int] = None
    is_loaded: bool = False
    is_playing: bool = False


@dataclass(frozen=True)
class StyledTextBlock:
    """One display-ready subtitle. Higher ``layer`` draws on top."""
    text: str
    attributes: PresentationAttributes
    layer: int
    event: DialogueEvent


SurfaceCallback = Callable[[List[StyledTextBlock]], None]


class SubtitleSession:
    """Tracks playback status and viewport, and emits styled blocks on change."""

    def __init__(self, config: Optional[AppConfig] = None,
                 surface_callback: Optional[SurfaceCallback] = None,
                 log_callback: Optional[Callable[[str], None]] = None):
        self.config = config if config is not None else AppConfig()
        self.surface = surface_callback
        self.log = log_callback

        self._track: Optional[SubtitleTrack] = None
        self._status = PlaybackStatus()
        self._active: List[DialogueEvent] = []
        self._blocks: List[StyledTextBlock] = []
        self._context = DisplayContext(
            width=float(self.config.get('reference_width', 1280)),
            height=float(self.config.get('reference_height', 720)),
            platform=PlatformClass.from_name(self.config.get('platform')),
            font_scale=dict(self.config.get('platform_font_scale') or {}),
        )

    def _log_message(self, message: str):
        """Formats and sends a message to the log callback."""
        if self.log is None:
            logger.info(message)
            return
        if self.config.get('log_timestamps', True):
            ts = datetime.now().strftime('%H:%M:%S')
            message = f'[{ts}] {message}'
        self.log(message)

    # ------------------------------------------------------------------
    # Track loading
    # ------------------------------------------------------------------

    @property
    def track(self) -> Optional[SubtitleTrack]:
        return self._track

    @property
    def is_track_loaded(self) -> bool:
        return self._track is not None

    def load_text(self, text: Optional[str]) -> bool:
        """
        Parse ``text`` and swap it in as the current track.

        Returns False on a load failure; the previous track (or the
        no-track state) is kept in that case.
        """
        try:
            track = load_track(text, end_inclusive=bool(self.config.get('end_inclusive', True)))
        except SubtitleLoadError as e:
            self._log_message(f'[!] Failed to load subtitles: {e}')
            return False
        self.swap_track(track)
        return True

    def load_file(self, path: Path | str) -> bool:
        self._log_message(f'Loading subtitles from: {path}')
        try:
            text = read_subtitle_text(path, self.config.get('source_encoding') or None)
        except SubtitleLoadError as e:
            self._log_message(f'[!] Failed to load subtitles: {e}')
            return False
        return self.load_text(text)

    def swap_track(self, track: Optional[SubtitleTrack]):
        """Replace the current track reference and re-query at the current position."""
        self._track = track
        if track is not None:
            self._log_message(
                f'Subtitle track loaded with {len(track.events)} events and {len(track.styles)} styles'
            )
        self._active = []
        self._refresh(force=True)

    def clear(self):
        self.swap_track(None)

    # ------------------------------------------------------------------
    # Collaborator notifications
    # ------------------------------------------------------------------

    def on_playback_status(self, status: PlaybackStatus):
        self._status = status
        self._refresh()

    def on_viewport_change(self, width: float, height: float, platform: Optional[PlatformClass] = None):
        context = DisplayContext(
            width=float(width),
            height=float(height),
            platform=platform if platform is not None else self._context.platform,
            font_scale=self._context.font_scale,
        )
        if context == self._context:
            return
        self._context = context
        self._emit(self._build_blocks(self._active))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def status(self) -> PlaybackStatus:
        return self._status

    @property
    def context(self) -> DisplayContext:
        return self._context

    @property
    def active_events(self) -> List[DialogueEvent]:
        return list(self._active)

    @property
    def blocks(self) -> List[StyledTextBlock]:
        return list(self._blocks)

    def active_at(self, time_ms: int) -> List[DialogueEvent]:
        """Stateless query; an empty list when no track is loaded."""
        if self._track is None:
            return []
        return self._track.active_at(time_ms)

    def seek_target(self, delta_s: float = SEEK_STEP_S) -> Optional[int]:
        """Position after skipping ``delta_s`` seconds, clamped to [0, duration]."""
        status = self._status
        if not status.is_loaded or not status.duration_ms:
            return None
        target = (status.position_ms or 0) + delta_s * 1000
        return int(max(0, min(target, status.duration_ms)))

    def debug_info(self) -> dict:
        return {
            'active_subtitles': len(self._active),
            'total_events': len(self._track.events) if self._track else 0,
            'total_styles': len(self._track.styles) if self._track else 0,
            'platform': self._context.platform.value,
            'time': f'{format_clock(self._status.position_ms)} / {format_clock(self._status.duration_ms)}',
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _refresh(self, force: bool = False):
        status = self._status
        if status.is_loaded and status.position_ms is not None:
            active = self.active_at(status.position_ms)
        else:
            active = self._active if self._track is not None else []

        if not force and same_events(active, self._active):
            return
        self._active = list(active)
        self._emit(self._build_blocks(self._active))

    def _build_blocks(self, events: List[DialogueEvent]) -> List[StyledTextBlock]:
        if self._track is None:
            return []
        blocks = []
        for event in events:
            attrs = resolve(self._track.style_for(event), self._context)
            blocks.append(StyledTextBlock(
                text=to_display_text(event.text),
                attributes=apply_event_margins(attrs, event),
                layer=event.layer,
                event=event,
            ))
        # stable: equal layers keep track order
        blocks.sort(key=lambda b: b.layer)
        return blocks

    def _emit(self, blocks: List[StyledTextBlock]):
        self._blocks = blocks
        if self.surface is not None:
            self.surface(list(blocks))
