import re
from typing import Iterable

from ..logging import get_logger

_LOG = get_logger(__name__)

_WS_RE = re.compile(r"\s+")
# Lone screen index / badge counter, not label content
_SHORT_NUMBER_RE = re.compile(r"^\d{1,4}$", re.ASCII)


def collapse_ws(value: str) -> str:
    """Trim and squeeze internal whitespace runs to single spaces."""
    return _WS_RE.sub(" ", value or "").strip()


def title_case(value: str) -> str:
    """Title-case word by word.

    Splits on whitespace, upper-cases the first character of each token,
    lower-cases the rest and joins with single spaces:
    "ULTRABOOST 22" -> "Ultraboost 22", "air force 1 '07" -> "Air Force 1 '07".
    """
    return " ".join(tok[:1].upper() + tok[1:].lower() for tok in (value or "").split())


def is_noise_line(line: str, noise_patterns: Iterable[re.Pattern]) -> bool:
    return any(p.search(line) for p in noise_patterns)


def strip_noise_lines(raw_text: str, noise_patterns: Iterable[re.Pattern]) -> str:
    """Strip OCR noise lines (UI chrome, prices, dates, clock times).

    - Splits on newlines and trims each line.
    - Drops empty lines, lines shorter than 2 chars, lines matching any
      noise pattern and lone numbers of up to 4 digits.
    - Returns the surviving lines joined with newlines ("" when nothing
      survives).
    """
    patterns = tuple(noise_patterns)
    kept = []
    for raw in (raw_text or "").split("\n"):
        line = raw.strip()
        if len(line) < 2:
            continue
        if is_noise_line(line, patterns):
            continue
        if _SHORT_NUMBER_RE.fullmatch(line):
            continue
        kept.append(line)
    _LOG.debug("strip_noise_lines kept %d line(s)", len(kept))
    return "\n".join(kept)
