import json
import os
import re
from typing import Any, Dict, List, Optional

from dotenv import dotenv_values

from .domain.models import BrandEntry, LabelTables, ModelPattern
from .labels.tables import DEFAULT_TABLES, build_tables
from .logging import get_logger
from .paths import expand_abs, find_upwards

log = get_logger(__name__)

RULES_FILENAME = "label_rules.json"
RULES_ENV_VAR = "STASH_LABELS_RULES"


class RulesError(Exception):
    pass


def _read_dotenv(dotenv_dir: str) -> Dict[str, str]:
    """Return key/value pairs of the nearest .env (walking upwards).

    Does not mutate the process environment.
    """
    path = find_upwards(dotenv_dir, ".env")
    if not path:
        log.debug(f"No .env found starting from: {os.path.abspath(dotenv_dir)}")
        return {}
    try:
        values = dotenv_values(path)
    except (OSError, UnicodeDecodeError) as e:
        log.warning(f"Failed reading .env: {e}")
        return {}
    env = {k: v.strip() for k, v in values.items() if k and v is not None}
    log.debug(f"Loaded {len(env)} key(s) from .env at {path}")
    return env


def resolve_rules_path(start_dir: str, explicit: Optional[str] = None) -> Optional[str]:
    """Locate the rules file: explicit path, then env/.env, then discovery."""
    if explicit:
        return expand_abs(explicit)
    v = os.environ.get(RULES_ENV_VAR)
    if v:
        log.info(f"Using {RULES_ENV_VAR} from environment")
        return expand_abs(v.strip())
    env = _read_dotenv(start_dir)
    v = env.get(RULES_ENV_VAR)
    if v:
        log.info(f"Loaded {RULES_ENV_VAR} from .env file")
        return expand_abs(v)
    return find_upwards(start_dir, RULES_FILENAME)


def _compile(pattern: Any, where: str) -> Optional[re.Pattern]:
    if not isinstance(pattern, str) or not pattern:
        log.warning(f"{where}: pattern must be a non-empty string; skipped")
        return None
    try:
        return re.compile(pattern, re.IGNORECASE | re.ASCII)
    except re.error as e:
        log.warning(f"{where}: invalid regex {pattern!r} ({e}); skipped")
        return None


def _as_list(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        log.warning(f"{key}: expected a list; ignored")
        return []
    return value


def parse_rules(data: Any, base: Optional[LabelTables] = None) -> LabelTables:
    """Build lookup tables from a decoded rules document.

    Expected shape (all keys optional):
    - brands: [{ name: str, keywords: [str] }]
    - model_patterns: [{ brand: str, pattern: regex with one group }]
    - skip_patterns: [regex]
    - color_words: [str]

    Invalid entries are logged and skipped; only a non-object document raises.
    """
    if not isinstance(data, dict):
        raise RulesError("rules document must be a JSON object")

    brands: List[BrandEntry] = []
    for idx, b in enumerate(_as_list(data, "brands")):
        if not isinstance(b, dict) or not isinstance(b.get("name"), str) or not b["name"].strip():
            log.warning(f"brands[{idx}]: name required; skipped")
            continue
        kws = b.get("keywords") or [b["name"]]
        if isinstance(kws, str):
            kws = [kws]
        elif not isinstance(kws, list):
            log.warning(f"brands[{idx}]: keywords must be a list; skipped")
            continue
        keywords = tuple(str(k).upper().strip() for k in kws if str(k).strip())
        if not keywords:
            log.warning(f"brands[{idx}]: no usable keywords; skipped")
            continue
        brands.append(BrandEntry(b["name"].strip(), keywords))

    model_patterns: List[ModelPattern] = []
    for idx, mp in enumerate(_as_list(data, "model_patterns")):
        if not isinstance(mp, dict) or not isinstance(mp.get("brand"), str):
            log.warning(f"model_patterns[{idx}]: brand required; skipped")
            continue
        rx = _compile(mp.get("pattern"), f"model_patterns[{idx}]")
        if rx is None:
            continue
        if rx.groups != 1:
            log.warning(f"model_patterns[{idx}]: needs exactly one capture group; skipped")
            continue
        model_patterns.append(ModelPattern(mp["brand"].strip(), rx))

    skip_patterns = []
    for idx, sp in enumerate(_as_list(data, "skip_patterns")):
        rx = _compile(sp, f"skip_patterns[{idx}]")
        if rx is not None:
            skip_patterns.append(rx)

    color_words = [str(w).strip() for w in _as_list(data, "color_words") if str(w).strip()]

    return build_tables(
        extra_brands=brands,
        extra_model_patterns=model_patterns,
        extra_skip_patterns=skip_patterns,
        extra_color_words=color_words,
        base=base,
    )


def load_tables(start_dir: str, rules_path: Optional[str] = None) -> LabelTables:
    """Return lookup tables, extended by a rules file when one is found.

    Falls back to the built-in tables when the file is missing or unreadable.
    """
    path = resolve_rules_path(start_dir, rules_path)
    if not path:
        log.debug("No label_rules.json found; using built-in tables")
        return DEFAULT_TABLES
    if not os.path.isfile(path):
        log.warning(f"Rules file not found: {path}; using built-in tables")
        return DEFAULT_TABLES
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        tables = parse_rules(data)
    except (OSError, ValueError, RulesError) as e:
        log.warning(f"Failed to read rules file {path}: {e}")
        return DEFAULT_TABLES
    log.info(
        f"Loaded rules from {path}: {len(tables.brands)} brand(s), "
        f"{len(tables.model_patterns)} model pattern(s), {len(tables.skip_patterns)} skip pattern(s)"
    )
    return tables
