from __future__ import annotations

import csv
import io
import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from ..domain.models import ParsedLabel
from ..logging import get_logger

LOG = get_logger(__name__)

CSV_COLUMNS = ("source", "brand", "model", "styleCode", "colorway")
EXPORT_FORMATS = ("json", "csv")


@dataclass
class LabelRecord:
    source: str
    label: ParsedLabel

    def to_row(self) -> Dict[str, Any]:
        row: Dict[str, Any] = {"source": self.source}
        row.update(self.label.to_dict())
        return row


def records_to_json(records: Iterable[LabelRecord]) -> str:
    return json.dumps([r.to_row() for r in records], ensure_ascii=False, indent=2)


def records_to_csv(records: Iterable[LabelRecord]) -> str:
    """Render records as CSV; missing fields become empty cells."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=list(CSV_COLUMNS), lineterminator="\n")
    writer.writeheader()
    for r in records:
        writer.writerow({k: ("" if v is None else v) for k, v in r.to_row().items()})
    return buf.getvalue()


def render_export(records: Iterable[LabelRecord], fmt: str) -> str:
    fmt = (fmt or "").lower()
    if fmt == "json":
        return records_to_json(records)
    if fmt == "csv":
        return records_to_csv(records)
    raise ValueError(f"unsupported export format: {fmt!r} (expected one of {EXPORT_FORMATS})")


def write_export(records: Iterable[LabelRecord], path: str, fmt: str) -> str:
    """Write records to path and return the absolute path written.

    CSV files start with a UTF-8 BOM so spreadsheet apps pick the right
    encoding.
    """
    items: List[LabelRecord] = list(records)
    body = render_export(items, fmt)
    if fmt.lower() == "csv":
        body = "\ufeff" + body
    out = os.path.abspath(path)
    os.makedirs(os.path.dirname(out) or ".", exist_ok=True)
    with open(out, "w", encoding="utf-8", newline="") as f:
        f.write(body)
    LOG.info(f"Wrote {len(items)} record(s) as {fmt.lower()} to {out}")
    return out
