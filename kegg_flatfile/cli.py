#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
KEGG Flat-File CLI

Command-line interface for rendering JSON records as KEGG flat-files.

Usage:
    kegg-flatfile render records.json -o entries.txt
    kegg-flatfile render records.jsonl --line-width 100 --type compound
    kegg-flatfile stats records.json
    kegg-flatfile stats records.json --csv entry name formula
    kegg-flatfile types --fields
"""

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from config.logging_config import get_logger
from config.settings import get_settings

from .errors import OutputWriteError, RecordInputError, RenderConfigError
from .field_registry import all_record_types, field_order
from .record import Record
from .render_config import RenderConfig
from .serializer import KeggSerializer
from .stats import entries_to_csv, format_summary
from .writer import load_records, write_kegg_file

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE_ERROR = 2


def cmd_render(args) -> int:
    """Render records to flat-file text"""
    config = RenderConfig.from_settings(
        label_width=args.label_width,
        line_width=args.line_width,
        sequence_width=args.sequence_width,
    )
    records = load_records(args.input)

    if args.type:
        records = [Record.coerce(r, record_type=args.type) for r in records]

    if args.output:
        path = write_kegg_file(args.output, records, config)
        print(f"[OK] {len(records)} record(s) written to {path}", file=sys.stderr)
    else:
        print(KeggSerializer(config).render_batch(records, workers=args.workers))
    return EXIT_OK


def cmd_stats(args) -> int:
    """Summarize records or project them to CSV"""
    records = load_records(args.input)
    if args.csv:
        print(entries_to_csv(records, args.csv, header=not args.no_header))
    else:
        print(format_summary(records, top_fields=args.top))
    return EXIT_OK


def cmd_types(args) -> int:
    """List supported record types"""
    for record_type in sorted(all_record_types(), key=lambda t: t.value):
        if args.fields:
            fields = " ".join(f.upper() for f in field_order(record_type))
            print(f"{record_type.value:<10} {fields}")
        else:
            print(record_type.value)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kegg-flatfile",
        description="Render KEGG records (JSON) as KEGG flat-file text"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Render command
    render_parser = subparsers.add_parser("render", help="Render records to flat-file text")
    render_parser.add_argument("input", help="JSON, JSON array or JSON Lines file of records")
    render_parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    render_parser.add_argument("-t", "--type", help="Force record type (e.g. compound)")
    render_parser.add_argument("--label-width", type=int, help="Label column width (default 12)")
    render_parser.add_argument("--line-width", type=int, help="Total line width (default 80)")
    render_parser.add_argument("--sequence-width", type=int,
                               help="Residues per AASEQ/NTSEQ line (default 60)")
    render_parser.add_argument("-w", "--workers", type=int, default=1,
                               help="Render threads for stdout output")

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Summarize records")
    stats_parser.add_argument("input", help="JSON, JSON array or JSON Lines file of records")
    stats_parser.add_argument("--csv", nargs="+", metavar="FIELD",
                              help="Print a CSV projection of these fields instead")
    stats_parser.add_argument("--no-header", action="store_true", help="Omit CSV header row")
    stats_parser.add_argument("--top", type=int, default=10, help="Fields listed in the summary")

    # Types command
    types_parser = subparsers.add_parser("types", help="List supported record types")
    types_parser.add_argument("-f", "--fields", action="store_true",
                              help="Show the field order of each type")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    get_settings.cache_clear()

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE_ERROR

    commands = {
        "render": cmd_render,
        "stats": cmd_stats,
        "types": cmd_types,
    }

    logger.debug(f"Running command {args.command!r}")
    try:
        return commands[args.command](args)
    except (RenderConfigError, RecordInputError) as e:
        print(f"[X] {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    except OutputWriteError as e:
        print(f"[X] {e}", file=sys.stderr)
        return EXIT_IO_ERROR


if __name__ == "__main__":
    sys.exit(main())
