from __future__ import annotations

from typing import Optional

from ..logging import get_logger
from .constants import ADIDAS_STYLE_RE, NB_STYLE_RE, NIKE_STYLE_RE

LOG = get_logger(__name__)


def extract_style_code(text: str, brand: Optional[str] = None) -> Optional[str]:
    """Find a manufacturer style/article code.

    Priority: Nike/Jordan shape (normalized to "LLDDDD-DDD"), New Balance
    shape when the brand is New Balance, then the generic Adidas shape.
    Only the first occurrence of each shape is considered.
    """
    upper = (text or "").upper()

    m = NIKE_STYLE_RE.search(upper)
    if m:
        return f"{m.group(1)}-{m.group(2)}"

    if brand == "New Balance":
        m = NB_STYLE_RE.search(upper)
        if m:
            return m.group(1)

    m = ADIDAS_STYLE_RE.search(upper)
    if m:
        return m.group(1)

    LOG.debug("no style code found")
    return None
