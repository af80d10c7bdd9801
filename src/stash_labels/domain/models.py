from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple


@dataclass
class ParsedLabel:
    brand: Optional[str] = None
    model: Optional[str] = None
    style_code: Optional[str] = None
    colorway: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Return the record in the app's field naming (camelCase styleCode)."""
        return {
            "brand": self.brand,
            "model": self.model,
            "styleCode": self.style_code,
            "colorway": self.colorway,
        }

    def is_empty(self) -> bool:
        return not any((self.brand, self.model, self.style_code, self.colorway))


@dataclass(frozen=True)
class BrandEntry:
    name: str
    keywords: Tuple[str, ...]


@dataclass(frozen=True)
class ModelPattern:
    brand: str
    pattern: re.Pattern  # exactly one capture group


@dataclass(frozen=True)
class LabelTables:
    """Ordered lookup tables used by one parse run.

    Earlier entries win ties, so extensions are always appended.
    """

    brands: Tuple[BrandEntry, ...]
    model_patterns: Tuple[ModelPattern, ...]
    noise_patterns: Tuple[re.Pattern, ...]
    skip_patterns: Tuple[re.Pattern, ...]
    color_words: FrozenSet[str] = field(default_factory=frozenset)

    def brand_entry(self, name: Optional[str]) -> Optional[BrandEntry]:
        if not name:
            return None
        for entry in self.brands:
            if entry.name == name:
                return entry
        return None
