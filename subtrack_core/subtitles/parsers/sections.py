# subtrack_core/subtitles/parsers/sections.py
"""
Section scanning for line-oriented ASS/SSA text.

A section starts at a line of the form ``[Name]`` and runs until the next
such line. Header names are matched case-insensitively against
KNOWN_SECTIONS; anything else is an unknown section whose lines are
skipped by every consumer.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple

SCRIPT_INFO = "script info"
STYLES = "v4+ styles"
SSA_STYLES = "v4 styles"
EVENTS = "events"
FONTS = "fonts"
GRAPHICS = "graphics"
AEGISUB_GARBAGE = "aegisub project garbage"
AEGISUB_EXTRADATA = "aegisub extradata"

KNOWN_SECTIONS = frozenset({
    SCRIPT_INFO,
    STYLES,
    SSA_STYLES,
    EVENTS,
    FONTS,
    GRAPHICS,
    AEGISUB_GARBAGE,
    AEGISUB_EXTRADATA,
})


def section_name(line: str) -> Optional[str]:
    """Return the lowercased section name if ``line`` is a header, else None."""
    stripped = line.strip()
    if len(stripped) >= 2 and stripped.startswith("[") and stripped.endswith("]"):
        return stripped[1:-1].strip().lower()
    return None


def iter_sections(lines: Iterable[str]) -> Iterator[Tuple[Optional[str], str]]:
    """
    Yield ``(section, stripped_line)`` for every non-header line.

    ``section`` is the lowercased known section name, or None for lines
    before the first header and inside unknown sections.
    """
    current: Optional[str] = None
    for line in lines:
        name = section_name(line)
        if name is not None:
            current = name if name in KNOWN_SECTIONS else None
            continue
        yield current, line.strip()


def iter_section_lines(lines: Iterable[str], section: str) -> Iterator[str]:
    """Yield the stripped lines that belong to ``section``."""
    for current, stripped in iter_sections(lines):
        if current == section:
            yield stripped
