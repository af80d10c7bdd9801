from __future__ import annotations

import argparse
import glob
import json
import os
import sys
from typing import List, Sequence

from ..config import load_tables
from ..labels import LabelParser, LabelRecord, write_export
from ..labels.export import EXPORT_FORMATS, render_export
from ..logging import configure_logging, get_logger
from ..paths import expand_abs

LOG = get_logger(__name__)


def _read_text_file(path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def _build_parser(ns: argparse.Namespace) -> LabelParser:
    return LabelParser(load_tables(os.getcwd(), rules_path=ns.rules))


def _handle_parse(ns: argparse.Namespace) -> int:
    if ns.text is not None:
        text = ns.text
    elif ns.file:
        path = expand_abs(ns.file)
        if not os.path.isfile(path):
            LOG.error(f"Input file not found: {path}")
            return 2
        text = _read_text_file(path)
    else:
        text = sys.stdin.read()
    result = _build_parser(ns).parse(text)
    print(json.dumps(result.to_dict(), ensure_ascii=False))
    return 0


def _handle_batch(ns: argparse.Namespace) -> int:
    input_dir = expand_abs(ns.input_dir)
    if not os.path.isdir(input_dir):
        LOG.error(f"Input directory not found: {input_dir}")
        return 2
    paths = sorted(p for p in glob.glob(os.path.join(input_dir, ns.pattern)) if os.path.isfile(p))
    if not paths:
        LOG.error(f"No files matching '{ns.pattern}' in {input_dir}")
        return 1
    LOG.info(f"Parsing {len(paths)} file(s) from {input_dir}")

    parser = _build_parser(ns)
    records: List[LabelRecord] = []
    for p in paths:
        label = parser.parse(_read_text_file(p))
        if label.is_empty():
            LOG.warning(f"Nothing detected in {os.path.basename(p)}")
        records.append(LabelRecord(source=os.path.basename(p), label=label))

    if ns.output:
        write_export(records, expand_abs(ns.output), ns.format)
    else:
        print(render_export(records, ns.format))
    return 0


def _handle_brands(ns: argparse.Namespace) -> int:
    tables = _build_parser(ns).tables
    for entry in tables.brands:
        print(f"{entry.name}: {', '.join(entry.keywords)}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    provided = list(argv) if argv is not None else sys.argv[1:]
    LOG.info(f"CLI invoked with arguments: {provided}")

    parser = argparse.ArgumentParser(
        prog="stash-labels",
        description="Extract brand, model, style code and colorway from label OCR text.",
    )
    parser.add_argument(
        "--rules",
        help="Path to a label_rules.json extending the built-in tables (default: discovered from cwd)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override LOG_LEVEL for this run (DEBUG shows every parser stage)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse one OCR text and print the fields as JSON.")
    src = parse_cmd.add_mutually_exclusive_group()
    src.add_argument("--text", help="OCR text to parse (use real newlines between lines)")
    src.add_argument("--file", help="Text file holding the OCR output")
    parse_cmd.set_defaults(handler=_handle_parse)

    batch_cmd = subparsers.add_parser("batch", help="Parse every text file in a directory and export the results.")
    batch_cmd.add_argument("--input-dir", required=True)
    batch_cmd.add_argument("--pattern", default="*.txt", help="Glob for input files (default: *.txt)")
    batch_cmd.add_argument("--format", choices=EXPORT_FORMATS, default="json")
    batch_cmd.add_argument("--output", help="Write the export here instead of stdout")
    batch_cmd.set_defaults(handler=_handle_batch)

    brands_cmd = subparsers.add_parser("brands", help="List known brands and their keywords.")
    brands_cmd.set_defaults(handler=_handle_brands)

    args = parser.parse_args(provided)
    if args.log_level:
        configure_logging(args.log_level)
    code = args.handler(args)
    LOG.info(f"Subcommand '{args.command}' finished with exit code {code}.")
    return code


if __name__ == "__main__":
    sys.exit(main())
