from __future__ import annotations

import re
from typing import FrozenSet, Tuple

from ..domain.models import BrandEntry, ModelPattern

# Brand table: first brand with any keyword contained in the upper-cased text wins.
KNOWN_BRANDS: Tuple[BrandEntry, ...] = (
    BrandEntry("Nike", ("NIKE", "NIKE,INC")),
    BrandEntry("Jordan", ("JORDAN", "AIR JORDAN")),
    BrandEntry("Adidas", ("ADIDAS",)),
    BrandEntry("New Balance", ("NEW BALANCE",)),
    BrandEntry("Converse", ("CONVERSE",)),
    BrandEntry("Puma", ("PUMA",)),
    BrandEntry("Reebok", ("REEBOK",)),
    BrandEntry("Vans", ("VANS",)),
    BrandEntry("Asics", ("ASICS",)),
    BrandEntry("Saucony", ("SAUCONY",)),
    BrandEntry("Under Armour", ("UNDER ARMOUR",)),
    BrandEntry("Yeezy", ("YEEZY",)),
    BrandEntry("Hoka", ("HOKA",)),
    BrandEntry("On", ("ON RUNNING", "ON CLOUD")),
    BrandEntry("Salomon", ("SALOMON",)),
    BrandEntry("Timberland", ("TIMBERLAND",)),
    BrandEntry("Dr. Martens", ("DR. MARTENS", "DR MARTENS")),
    BrandEntry("Birkenstock", ("BIRKENSTOCK",)),
    BrandEntry("Crocs", ("CROCS",)),
    BrandEntry("Fila", ("FILA",)),
    BrandEntry("Diadora", ("DIADORA",)),
    BrandEntry("Mizuno", ("MIZUNO",)),
    BrandEntry("Brooks", ("BROOKS",)),
    BrandEntry("Li-Ning", ("LI-NING", "LI NING")),
    BrandEntry("Anta", ("ANTA",)),
)


def _mp(brand: str, pattern: str) -> ModelPattern:
    return ModelPattern(brand, re.compile(pattern, re.IGNORECASE | re.ASCII))


# Well-known model names as printed on boxes and product pages.
# Matched against the text as-is (not upper-cased); earlier entries take priority.
MODEL_PATTERNS: Tuple[ModelPattern, ...] = (
    _mp("Nike", r"\b(Air (?:Force 1|Max \d+|Jordan \d+|Huarache|Vapormax|Zoom)[^\n,]*)"),
    _mp("Nike", r"\b(Dunk (?:Low|High|Mid)[^\n,]*)"),
    _mp("Nike", r"\b(Blazer (?:Low|Mid|High)[^\n,]*)"),
    _mp("Jordan", r"\b(Air Jordan \d+[^\n,]*)"),
    _mp("Jordan", r"\b(Jordan \d+[^\n,]*)"),
    _mp("Adidas", r"\b(Yeezy (?:Boost|Slide|Foam)[^\n,]*)"),
    _mp("Adidas", r"\b(Ultra ?Boost[^\n,]*)"),
    _mp("Adidas", r"\b(NMD[^\n,]*)"),
    _mp("Adidas", r"\b(Stan Smith[^\n,]*)"),
    _mp("Adidas", r"\b(Superstar[^\n,]*)"),
    _mp("Adidas", r"\b(Samba[^\n,]*)"),
    _mp("Adidas", r"\b(Gazelle[^\n,]*)"),
    _mp("New Balance", r"\b((?:990|992|993|550|574|2002R|530|327|9060)[^\n,]*)"),
    _mp("Converse", r"\b(Chuck Taylor[^\n,]*)"),
    _mp("Converse", r"\b(Chuck 70[^\n,]*)"),
    _mp("Asics", r"\b(Gel[- ](?:Lyte|Kayano|1130|NYC)[^\n,]*)"),
)

# Screenshot / label noise, each tested against a whole trimmed line.
NOISE_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"^\d{1,2}:\d{2}$", re.ASCII),  # clock time like "11:26"
    re.compile(r"^\d{1,3}%$", re.ASCII),  # battery percentage
    re.compile(r"^(https?://|www\.)", re.IGNORECASE | re.ASCII),
    re.compile(r"^(home|back|search|menu|share|save|cart|bag|buy now|add to|sign in|log in)$", re.IGNORECASE | re.ASCII),
    re.compile(r"^[@#]", re.ASCII),  # social handles / hashtags
    re.compile(r"^\$[\d,.]+$", re.ASCII),
    re.compile(r"^¥[\d,.]+$", re.ASCII),
    re.compile(r"^€[\d,.]+$", re.ASCII),
    re.compile(r"^£[\d,.]+$", re.ASCII),
    re.compile(r"^\d+\s*(reviews?|ratings?|sold|left|available)$", re.IGNORECASE | re.ASCII),
    re.compile(r"^(free shipping|free delivery|ships free)", re.IGNORECASE | re.ASCII),
    re.compile(r"^\d{1,2}[./]\d{1,2}[./]\d{2,4}$", re.ASCII),  # dates
)

# Lines that never carry a model name (sizes, origin, barcode captions).
# Noise patterns are applied on top of these.
SKIP_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"^\d+$", re.ASCII),
    re.compile(r"^(US|UK|EUR|CM|BR|MM)\s", re.IGNORECASE | re.ASCII),
    re.compile(r"^(MADE IN|FABRIQUE|FABRICADO|HECHO)", re.IGNORECASE | re.ASCII),
    re.compile(r"BARCODE", re.IGNORECASE | re.ASCII),
)

COLOR_WORDS: FrozenSet[str] = frozenset(
    {
        "BLACK", "WHITE", "RED", "BLUE", "GREEN", "GREY", "GRAY", "BROWN", "ORANGE",
        "YELLOW", "PINK", "PURPLE", "NAVY", "CREAM", "BEIGE", "TAN", "GOLD", "SILVER",
        "ANTHRACITE", "OBSIDIAN", "SAIL", "BONE", "VOLT", "INFRARED", "BRED",
        "NOIR", "BLANC", "ROUGE", "BLEU", "VERT", "GRIS", "MARRON",
    }
)

# Style codes, matched on upper-cased text. Digits are ASCII only.
# Nike/Jordan: "DM4044 108", "CW2288-111"; a separator is required.
NIKE_STYLE_RE = re.compile(r"\b([A-Z]{2}\d{4})(?:[ \t]*-[ \t]*|[ \t]+)(\d{3})\b", re.ASCII)
# New Balance: "M990GL5", "WL574EG", "990V5"
NB_STYLE_RE = re.compile(r"\b([MW]?[A-Z]?\d{3,4}[A-Z]{1,3}\d?)\b", re.ASCII)
# Adidas article numbers: "FY2903", "GW1229", "HP5565"
ADIDAS_STYLE_RE = re.compile(r"\b([A-Z]{2}\d{4,5})\b", re.ASCII)

# Colorway: slash-separated colour names, "UNIVERSITY RED/BLACK/WHITE".
# Searched one line at a time, and only on lines holding a "/". The first
# segment is capped so a failed start never scans the rest of a long line.
COLORWAY_FIRST_SEGMENT_MAX = 40
COLORWAY_RE = re.compile(
    r"\b([A-Z][A-Z \t]{0,%d}(?:/[ \t]*[A-Z][A-Z \t]*)+)\b" % COLORWAY_FIRST_SEGMENT_MAX,
    re.ASCII,
)
