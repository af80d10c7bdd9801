from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple

from ..domain.models import LabelTables, ModelPattern
from ..domain.normalize import collapse_ws, title_case
from ..logging import get_logger
from .colorway import looks_like_colorway
from .tables import DEFAULT_TABLES

LOG = get_logger(__name__)

MAX_MODEL_LEN = 50


def _match_model_patterns(text: str, patterns: Iterable[ModelPattern]) -> Optional[str]:
    for mp in patterns:
        m = mp.pattern.search(text)
        if m:
            value = title_case(collapse_ws(m.group(1)))
            if value:
                LOG.debug("model pattern %r (%s) matched", mp.pattern.pattern, mp.brand)
                return value
    return None


def extract_model_from_patterns(text: str, brand: Optional[str], tables: LabelTables) -> Optional[str]:
    """Pass A: known model names, brand-scoped first, then the whole table.

    The unscoped retry lets a pattern tagged for another brand still fire
    when brand detection picked the wrong one.
    """
    if brand:
        scoped = [mp for mp in tables.model_patterns if mp.brand == brand]
        found = _match_model_patterns(text, scoped)
        if found:
            return found
    return _match_model_patterns(text, tables.model_patterns)


def _is_skippable(line: str, skip_patterns: Tuple[re.Pattern, ...]) -> bool:
    return any(p.search(line) for p in skip_patterns)


def _style_code_forms(style_code: Optional[str]) -> List[str]:
    if not style_code:
        return []
    upper = style_code.upper()
    forms = [upper, upper.replace("-", " ")]
    return [f for f in dict.fromkeys(forms) if f]


def _brand_markers(brand: str, tables: LabelTables) -> List[str]:
    entry = tables.brand_entry(brand)
    markers = list(entry.keywords) if entry else []
    if not markers:
        markers = [brand.upper()]
    return markers


def _model_after_brand_prefix(lines: List[str], brand_upper: str, tables: LabelTables) -> Optional[str]:
    """Pass B1: "NIKE REACT SFB CARBON LOW" -> "React Sfb Carbon Low"."""
    prefix = brand_upper + " "
    for line in lines:
        upper = line.upper()
        if upper.startswith(prefix) and len(upper) > len(brand_upper) + 2:
            rest = line[len(brand_upper):].strip()
            if len(rest) >= 2 and not looks_like_colorway(rest, tables.color_words):
                return title_case(rest)
    return None


def extract_model(
    text: str,
    brand: Optional[str],
    style_code: Optional[str],
    colorway: Optional[str],
    tables: Optional[LabelTables] = None,
) -> Optional[str]:
    """Guess the model name.

    Pass A tries the known model patterns. Pass B falls back to line
    positions: first a "<BRAND> <model>" line, then the first plausible
    line after the brand line (any line when the brand is unknown).
    """
    tables = tables or DEFAULT_TABLES

    text = text or ""
    found = extract_model_from_patterns(text, brand, tables)
    if found:
        return found

    lines = [ln.strip() for ln in text.split("\n") if ln.strip()]
    skip_patterns = tuple(tables.skip_patterns) + tuple(tables.noise_patterns)
    brand_upper = brand.upper() if brand else ""
    style_forms = _style_code_forms(style_code)
    color_upper = colorway.upper() if colorway else ""

    if brand_upper:
        found = _model_after_brand_prefix(lines, brand_upper, tables)
        if found:
            return found

    markers = _brand_markers(brand, tables) if brand else []
    found_brand = not brand_upper
    for line in lines:
        upper = line.upper()
        if not found_brand:
            if upper == brand_upper or any(m in upper for m in markers):
                found_brand = True
            continue

        if len(upper) < 2:
            continue
        if _is_skippable(upper, skip_patterns):
            continue
        if upper == brand_upper:
            continue
        if any(form in upper for form in style_forms):
            continue
        if color_upper and upper == color_upper:
            continue
        if looks_like_colorway(upper, tables.color_words):
            continue
        if len(line) <= MAX_MODEL_LEN and any(ch.isalpha() for ch in line):
            LOG.debug("model inferred from line position: %r", line)
            return title_case(line)
    return None
