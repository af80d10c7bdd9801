from __future__ import annotations

import re
from typing import Iterable, Optional

from ..domain.models import BrandEntry, LabelTables, ModelPattern
from .constants import COLOR_WORDS, KNOWN_BRANDS, MODEL_PATTERNS, NOISE_PATTERNS, SKIP_PATTERNS


def build_tables(
    extra_brands: Iterable[BrandEntry] = (),
    extra_model_patterns: Iterable[ModelPattern] = (),
    extra_skip_patterns: Iterable[re.Pattern] = (),
    extra_color_words: Iterable[str] = (),
    base: Optional[LabelTables] = None,
) -> LabelTables:
    """Return tables with extensions appended after the base entries.

    Appending keeps the built-in priority order intact.
    """
    if base is None:
        base = LabelTables(
            brands=KNOWN_BRANDS,
            model_patterns=MODEL_PATTERNS,
            noise_patterns=NOISE_PATTERNS,
            skip_patterns=SKIP_PATTERNS,
            color_words=COLOR_WORDS,
        )
    return LabelTables(
        brands=base.brands + tuple(extra_brands),
        model_patterns=base.model_patterns + tuple(extra_model_patterns),
        noise_patterns=base.noise_patterns,
        skip_patterns=base.skip_patterns + tuple(extra_skip_patterns),
        color_words=base.color_words | frozenset(w.upper() for w in extra_color_words),
    )


DEFAULT_TABLES = build_tables()
