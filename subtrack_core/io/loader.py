# subtrack_core/io/loader.py
# -*- coding: utf-8 -*-
"""
Reading subtitle text from disk.

ASS/SSA files are decoded and returned as-is. Other formats pysubs2
understands (SRT, WebVTT, MicroDVD, ...) are converted to ASS text first,
so the rest of the engine only ever parses one format.
"""
from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Optional, Tuple

import pysubs2
from pysubs2.exceptions import Pysubs2Error

from ..subtitles.track import SubtitleLoadError, SubtitleTrack, load_track

logger = logging.getLogger(__name__)

ASS_SUFFIXES = ('.ass', '.ssa')

# Encodings to try when auto-detecting a BOM-less file. UTF-16 and UTF-32
# are only recognised by their BOM; nearly any even-length byte string
# decodes as UTF-16.
ENCODINGS_TO_TRY = [
    'utf-8',
    'shift_jis',
    'gbk',
    'big5',
    'cp1252',     # Windows Western European
    'latin1',
]


def detect_encoding(raw: bytes) -> Tuple[str, bool]:
    """
    Detect the encoding of raw file bytes.

    Returns:
        Tuple of (encoding_name, has_bom)
    """
    if raw.startswith(codecs.BOM_UTF8):
        return ('utf-8-sig', True)
    if raw.startswith(codecs.BOM_UTF32_LE):
        return ('utf-32', True)
    if raw.startswith(codecs.BOM_UTF32_BE):
        return ('utf-32', True)
    if raw.startswith(codecs.BOM_UTF16_LE):
        return ('utf-16', True)
    if raw.startswith(codecs.BOM_UTF16_BE):
        return ('utf-16', True)

    for encoding in ENCODINGS_TO_TRY:
        try:
            raw.decode(encoding)
            return (encoding, False)
        except (UnicodeDecodeError, LookupError):
            continue

    return ('utf-8', False)


def read_subtitle_text(path: Path | str, encoding: Optional[str] = None) -> str:
    """
    Read a subtitle file and return ASS text.

    Args:
        path: Subtitle file path
        encoding: Source encoding; auto-detected when empty

    Raises:
        SubtitleLoadError: unreadable file, bad encoding or failed conversion
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise SubtitleLoadError(f"Cannot read {path}: {e}") from e

    if not encoding:
        encoding, _ = detect_encoding(raw)
    try:
        content = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise SubtitleLoadError(f"Cannot decode {path} as {encoding}: {e}") from e

    logger.debug("Read %s (%d bytes, %s)", path, len(raw), encoding)

    if path.suffix.lower() in ASS_SUFFIXES:
        return content
    return convert_to_ass(content, source=str(path))


def convert_to_ass(content: str, source: str = '<string>') -> str:
    """Convert any pysubs2-supported subtitle text into ASS text."""
    if not content.strip():
        raise SubtitleLoadError(f"Empty subtitle file: {source}")
    try:
        subs = pysubs2.SSAFile.from_string(content)
    except (Pysubs2Error, ValueError) as e:
        raise SubtitleLoadError(f"Unsupported subtitle format in {source}: {e}") from e

    logger.info("Converted %s to ASS (%d events)", source, len(subs.events))
    return subs.to_string('ass')


def load_track_file(path: Path | str, encoding: Optional[str] = None,
                    end_inclusive: bool = True) -> SubtitleTrack:
    """Read and parse a subtitle file in one step."""
    return load_track(read_subtitle_text(path, encoding), end_inclusive=end_inclusive)
