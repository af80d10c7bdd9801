from __future__ import annotations

from typing import Iterable, Optional

from ..logging import get_logger
from ..domain.models import BrandEntry
from .constants import KNOWN_BRANDS

LOG = get_logger(__name__)


def detect_brand(text: str, brands: Iterable[BrandEntry] = KNOWN_BRANDS) -> Optional[str]:
    """Return the canonical name of the first brand whose keyword occurs in text.

    Matching is plain substring containment on the upper-cased text, so OCR
    tokens glued together ("NIKEAIR") still hit. The flip side is that a
    keyword hidden inside an unrelated word also hits ("ANTA" in "SANTA").
    """
    upper = (text or "").upper()
    for entry in brands:
        for kw in entry.keywords:
            if kw in upper:
                LOG.debug("brand %s matched on keyword %r", entry.name, kw)
                return entry.name
    return None
