"""
Whitespace normalization for extracted page text.
"""

from __future__ import annotations

import re

_LINE_ENDINGS = re.compile(r"\r\n?")
# any whitespace except a line feed: spaces, tabs, NBSP, form feeds...
_HORIZONTAL_SPACE = re.compile(r"[^\S\n]+")
_SPACE_AROUND_BREAK = re.compile(r" ?\n ?")
_BLANK_LINES = re.compile(r"\n{2,}")


def normalize_text(text: str) -> str:
    """Compress whitespace without flattening paragraph structure.

    Runs of spaces and tabs become one space, runs of two or more line
    breaks become exactly one blank line, and single line breaks are kept.
    """
    text = _LINE_ENDINGS.sub("\n", text)
    text = _HORIZONTAL_SPACE.sub(" ", text)
    text = _SPACE_AROUND_BREAK.sub("\n", text)
    text = _BLANK_LINES.sub("\n\n", text)
    return text.strip()
