"""Command-line entry point: JSON arrays in, delimited table out."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .errors import TabulateError, UsageError
from .io_utils import STDIN_NAME
from .paths import split_skip_path
from .records import collect_records
from .tabular import DEFAULT_SEPARATOR, validate_separator, write_table

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-tabulate",
        description="Flatten JSON arrays of nested objects into a delimited table on stdout.",
        epilog="inputs must be valid JSON files with a top-level array.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("inputs", nargs="*", help="Input JSON files, or '-' (the default) for stdin.")
    parser.add_argument("-h", "-help", "--help", dest="help", action="store_true", help="Show help.")
    parser.add_argument(
        "-skip",
        "--skip",
        dest="skip",
        action="append",
        default=[],
        metavar="STEP",
        help="JSON key or array index to jump into before flattening. Repeat to go deeper.",
    )
    parser.add_argument(
        "-skip-path",
        "--skip-path",
        dest="skip_path",
        metavar="PATH",
        help="Dotted skip steps, e.g. 'result.items' ('\\.' for a literal dot). Applied after -skip.",
    )
    parser.add_argument(
        "-separator",
        "--separator",
        dest="separator",
        default=DEFAULT_SEPARATOR,
        help="Single character used to separate output fields (default: tab).",
    )
    parser.add_argument(
        "-no-prefix",
        "--no-prefix",
        dest="no_prefix",
        action="store_true",
        help="Do not prefix column names with the skip steps.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    return parser


def input_sources(inputs: Sequence[str]) -> List[str]:
    if not inputs:
        return [STDIN_NAME]
    return list(inputs)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.help:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        separator = validate_separator(args.separator)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        logger.error("%s", exc)
        return EXIT_USAGE

    skip = list(args.skip) + split_skip_path(args.skip_path)
    sources = input_sources(args.inputs)
    logger.debug("reading %d input(s) with skip steps %s", len(sources), skip)

    try:
        records = collect_records(sources, skip, keep_prefix=not args.no_prefix)
        write_table(records, sys.stdout, separator)
    except (TabulateError, OSError) as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())
