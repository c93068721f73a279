# subtrack_core/subtitles/markup.py
"""Inline override tag removal and line-break translation for dialogue text."""

from __future__ import annotations

import re

OVERRIDE_TAG_RE = re.compile(r"\{[^}]*\}")

# \N is a hard break, \n a soft one; both render as a real newline here.
LINE_BREAK_ESCAPES = ("\\N", "\\n")


def strip_override_tags(raw: str) -> str:
    """Remove every ``{...}`` block, braces included."""
    return OVERRIDE_TAG_RE.sub("", raw)


def to_display_text(raw: str) -> str:
    """
    Convert raw dialogue text into plain display text.

    Override tags are removed first, then line-break escapes become
    newlines. Other escapes are left as written.

    Example:
        "{\\i1}Hi\\Nthere" -> "Hi\nthere"
    """
    text = strip_override_tags(raw)
    for escape in LINE_BREAK_ESCAPES:
        text = text.replace(escape, "\n")
    return text
