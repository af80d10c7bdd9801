"""Label text parsing package.

Pipeline stages, each a pure function over strings:
- parser: normalize (noise stripping) and the parse_label orchestrator
- brand: brand keyword detection
- style_code: manufacturer style/article codes
- colorway: slash-separated colour names
- model: known model patterns, then positional inference
- export: JSON/CSV rendering of parsed results
"""

from .brand import detect_brand
from .colorway import extract_colorway, looks_like_colorway
from .export import LabelRecord, records_to_csv, records_to_json, write_export
from .model import extract_model
from .parser import LabelParser, normalize, parse_label
from .style_code import extract_style_code
from .tables import DEFAULT_TABLES, build_tables

__all__ = [
    "DEFAULT_TABLES",
    "LabelParser",
    "LabelRecord",
    "build_tables",
    "detect_brand",
    "extract_colorway",
    "extract_model",
    "extract_style_code",
    "looks_like_colorway",
    "normalize",
    "parse_label",
    "records_to_csv",
    "records_to_json",
    "write_export",
]
