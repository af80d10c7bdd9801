import os
from typing import Optional


def expand_abs(path: str) -> str:
    """Absolute form of a user-supplied path.

    Quotes left over from pasting into a shell are dropped, then env vars
    and ~ are expanded.
    """
    cleaned = (path or "").strip().strip('"').strip("'")
    return os.path.abspath(os.path.expanduser(os.path.expandvars(cleaned)))


def find_upwards(start_dir: Optional[str], filename: str) -> Optional[str]:
    """Return first matching file found when walking up from start_dir.

    Lets the CLI run from subdirectories and still pick up repository-level
    files like `.env` and `label_rules.json`.
    """
    d = os.path.abspath(start_dir or ".")
    while True:
        candidate = os.path.join(d, filename)
        if os.path.isfile(candidate):
            return candidate
        parent = os.path.dirname(d)
        if parent == d:
            return None
        d = parent
