from __future__ import annotations

import re
from typing import Iterable, Optional

from ..domain.models import LabelTables, ParsedLabel
from ..domain.normalize import strip_noise_lines
from ..logging import get_logger
from .brand import detect_brand
from .colorway import extract_colorway
from .constants import NOISE_PATTERNS
from .model import extract_model
from .style_code import extract_style_code
from .tables import DEFAULT_TABLES

LOG = get_logger(__name__)


def normalize(raw_text: str, noise_patterns: Iterable[re.Pattern] = NOISE_PATTERNS) -> str:
    """Drop noise lines from raw OCR text; see `strip_noise_lines`."""
    return strip_noise_lines(raw_text, noise_patterns)


class LabelParser:
    """Runs the label pipeline against a fixed set of lookup tables.

    Stateless apart from the (immutable) tables, so one instance can be
    shared across threads.
    """

    def __init__(self, tables: Optional[LabelTables] = None) -> None:
        self.tables = tables or DEFAULT_TABLES

    def parse(self, raw_ocr_text: Optional[str]) -> ParsedLabel:
        raw = raw_ocr_text if isinstance(raw_ocr_text, str) else ""
        cleaned = normalize(raw, self.tables.noise_patterns)
        # Aggressive noise stripping on a short label must not erase all signal
        text = cleaned or raw

        brand = detect_brand(text, self.tables.brands)
        style_code = extract_style_code(text, brand)
        colorway = extract_colorway(text)
        model = extract_model(text, brand, style_code, colorway, self.tables)

        result = ParsedLabel(brand=brand, model=model, style_code=style_code, colorway=colorway)
        LOG.debug("parsed label: %s", result.to_dict())
        return result


_DEFAULT_PARSER = LabelParser()


def parse_label(raw_ocr_text: Optional[str]) -> ParsedLabel:
    """Extract brand, model, style code and colorway from raw OCR text.

    Never raises; fields that could not be detected are None.
    """
    return _DEFAULT_PARSER.parse(raw_ocr_text)
