# subtrack_core/playback/__init__.py
from .session import PlaybackStatus, StyledTextBlock, SubtitleSession

__all__ = ['PlaybackStatus', 'StyledTextBlock', 'SubtitleSession']
