from __future__ import annotations

import re
from typing import AbstractSet, Iterator, Optional

from ..domain.normalize import title_case
from .constants import COLOR_WORDS, COLORWAY_RE

_PART_SPLIT_RE = re.compile(r"[/\-,]")


def _format_segments(raw: str) -> str:
    return "/".join(title_case(part) for part in raw.split("/"))


def _slash_lines(upper_text: str) -> Iterator[str]:
    # A colorway never spans lines, so only lines with a "/" are searched.
    for line in upper_text.split("\n"):
        if "/" in line:
            yield line


def extract_colorway(text: str) -> Optional[str]:
    """Return the first slash-separated colour run, title-cased per segment.

    "UNIVERSITY RED/BLACK/WHITE" -> "University Red/Black/White"
    """
    for line in _slash_lines((text or "").upper()):
        m = COLORWAY_RE.search(line)
        if m:
            return _format_segments(m.group(1).strip()) or None
    return None


def looks_like_colorway(line: str, color_words: AbstractSet[str] = COLOR_WORDS) -> bool:
    """True if a line reads as a colorway rather than a model name.

    Either the whole line is a slash run of letter groups, or it splits on
    "/", "-" or "," into 2+ parts of which at least two (or at least half)
    are known colour words.
    """
    upper = (line or "").upper().strip()
    if not upper:
        return False
    if "/" in upper and COLORWAY_RE.fullmatch(upper):
        return True
    parts = [p.strip() for p in _PART_SPLIT_RE.split(upper) if p.strip()]
    if len(parts) < 2:
        return False
    color_count = sum(1 for p in parts if p in color_words)
    return color_count >= 2 or color_count / len(parts) >= 0.5
