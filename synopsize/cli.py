# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Summarize every column of a CSV / TSV / JSON data set.
#
# USAGE:
# ------
#   synopsize < my_data.csv
#   synopsize my_data.tsv --sample 5
#   synopsize https://example.com/data.json --json
#   python -m synopsize --format tsv < my_data.txt
#
# OPTIONS:
# --------
#   SOURCE                 File path, http(s) URL, or "-" for stdin
#   --sample N             Max example values to show per column
#   --format FMT           auto | csv | tsv | json
#   --json                 Emit JSON instead of the text report
#   --version              Print version and exit
#
# EXIT STATUS:
# ------------
#   0 → report written, "DONE" on stderr
#   1 → "ERROR: ..." on stderr
#
# ==============================================

import argparse
import random
import sys
from typing import List, Optional

import requests

from synopsize import __version__
from synopsize.analysis import SynopsisAggregator
from synopsize.config import INPUT_FORMATS, AppConfig, get_config
from synopsize.input import open_source, read_records
from synopsize.report import SynopsisPrinter, render_json


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser(config: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="synopsize",
        usage="synopsize [SOURCE] [options]  (or: synopsize < my_data.csv)",
        description="Infer the type of each column and summarize its values.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help='file path, http(s) URL, or "-" for stdin (default: stdin)',
    )
    parser.add_argument(
        "--sample",
        type=_positive_int,
        default=config.report.sample_size,
        help="maximum number of example values to show for each column",
    )
    parser.add_argument(
        "--format",
        choices=INPUT_FORMATS,
        default=config.input.input_format,
        help="input format (default: detect)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print synopses as JSON",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="print version",
    )
    return parser


def _fail(error: Exception) -> int:
    print(f"ERROR: {error}", file=sys.stderr)
    return 1


def run(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line tool.

    Args:
        argv: Arguments (without the program name). Defaults to sys.argv[1:].

    Returns:
        Process exit status
    """
    try:
        config = get_config()
    except ValueError as e:
        return _fail(e)

    args = build_parser(config).parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if args.source in (None, "-") and sys.stdin.isatty():
        return _fail(ValueError("Data must be piped in on STDIN"))

    try:
        text = open_source(args.source, timeout=config.input.request_timeout_seconds)
        table = read_records(text, args.format)
    except (ValueError, OSError, requests.RequestException) as e:
        return _fail(e)

    synopses = SynopsisAggregator().synopsize_records(table.records, table.columns)

    if args.json:
        print(render_json(synopses))
    else:
        printer = SynopsisPrinter(
            sample_size=args.sample,
            rng=random.Random(config.report.random_seed),
        )
        printer.print_report(synopses)

    print("DONE", file=sys.stderr)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
