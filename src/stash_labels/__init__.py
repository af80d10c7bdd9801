"""
Stash labels – OCR label/receipt text parser.

Turns raw OCR text from a product label, shoe box tag or product page
screenshot into structured fields (brand, model, style code, colorway).
Producing the OCR text and storing the results are left to the caller.
"""

from .domain.models import ParsedLabel
from .labels import parse_label

__all__ = ["ParsedLabel", "parse_label"]
