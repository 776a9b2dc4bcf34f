"""Command-line interface for columndiff."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .cells import CellParseOptions, is_separator_row, parse_table_row_cells
from .config import settings
from .detection import detect_column_diff


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="columndiff - Detect column changes in markdown pipe tables"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log the detection trace"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Cells command
    cells_parser = subparsers.add_parser("cells", help="Split one table row into cells")
    cells_parser.add_argument("line", help="Table row, e.g. '| a | b |'")
    cells_parser.add_argument(
        "--no-trim", action="store_true", help="Keep whitespace around cell values"
    )
    cells_parser.add_argument(
        "--no-escapes", action="store_true", help="Treat every pipe as a delimiter"
    )

    # Detect command
    detect_parser = subparsers.add_parser(
        "detect", help="Detect column changes from a row diff"
    )
    detect_parser.add_argument(
        "entries", help="JSON file with the row diff entries ('-' for stdin)"
    )
    detect_parser.add_argument(
        "--columns", "-c", type=int, required=True, help="Column count of the current table"
    )
    detect_parser.add_argument(
        "--ignore-case", action="store_true", help="Compare headers case-insensitively"
    )
    detect_parser.add_argument(
        "--simple", action="store_true", help="Omit the detection method from the output"
    )

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "cells":
        run_cells(args.line, trim=not args.no_trim, escapes=not args.no_escapes)
    elif args.command == "detect":
        run_detect(args.entries, args.columns, args.ignore_case, args.simple)
    else:
        parser.print_help()
        sys.exit(1)


def configure_logging(verbose: bool = False):
    """Configure root logging from settings."""
    level = logging.DEBUG if verbose or settings.debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_cells(line: str, trim: bool = True, escapes: bool = True):
    """Print the cells of a row as JSON."""
    options = CellParseOptions(trim_cells=trim, handle_escaped_pipes=escapes)
    result = {
        "cells": parse_table_row_cells(line, options),
        "separator": is_separator_row(line, options),
    }
    print(json.dumps(result, ensure_ascii=False))


def load_entries(source: str) -> list:
    """Load row diff entries from a JSON file or stdin."""
    if source == "-":
        data = json.load(sys.stdin)
    else:
        data = json.loads(Path(source).read_text(encoding="utf-8"))

    if isinstance(data, dict):
        data = data.get("entries", [])
    if not isinstance(data, list):
        raise ValueError("Expected a JSON list of entries")
    return data


def run_detect(source: str, columns: int, ignore_case: bool = False, simple: bool = False):
    """Print the detected column diff as JSON."""
    try:
        entries = load_entries(source)
    except (OSError, ValueError) as e:
        print(f"Could not read entries: {e}", file=sys.stderr)
        sys.exit(1)

    options = {"header_compare": {"ignore_case": True}} if ignore_case else None
    result = detect_column_diff(entries, columns, options)
    if simple:
        result = result.to_simple()

    print(result.model_dump_json(by_alias=True, indent=2))


if __name__ == "__main__":
    main()
