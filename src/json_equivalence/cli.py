"""Command-line entry point for json-equivalence.

Compares an expected JSON file against an actual one and prints a report::

    $ json-equivalence expected.json actual.json
    [FAIL]: actual.json differs from expected.json
      1 difference(s) found:
        $.user.scores[1]: expected 2, got 5

Exit status is 0 when the documents are equivalent, 1 when they differ,
and 2 when a file cannot be read or is not valid JSON.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from json_equivalence import __version__
from json_equivalence.algorithm.config import ComparisonConfig
from json_equivalence.api import compare_files
from json_equivalence.errors import JsonParseError
from json_equivalence.logs import LOG_FORMATS, LOG_LEVELS, configure_logging
from json_equivalence.report import format_report

EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-equivalence",
        description="Check whether an actual JSON document matches an expected one.",
    )
    parser.add_argument("expected", type=Path, help="Path to the expected JSON file.")
    parser.add_argument("actual", type=Path, help="Path to the actual JSON file.")
    parser.add_argument(
        "--relative-tolerance",
        type=float,
        default=1e-10,
        help="Allowed numeric difference as a fraction of magnitude (default: 1e-10).",
    )
    parser.add_argument(
        "--zero-tolerance",
        type=float,
        default=1e-15,
        help="Allowed numeric difference when magnitude is zero (default: 1e-15).",
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print the comparison time."
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="INFO",
        help="Minimum log level (default: INFO).",
    )
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file.")
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default="text",
        help="Log record format (default: text).",
    )
    parser.add_argument(
        "--no-logging", action="store_true", help="Disable logging entirely."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ComparisonConfig(
            relative_tolerance=args.relative_tolerance,
            zero_tolerance=args.zero_tolerance,
        )
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(
        level=args.log_level,
        log_file=args.log_file,
        log_format=args.log_format,
        enabled=not args.no_logging,
    )
    logger.info("Comparing {} against {}", args.actual, args.expected)

    try:
        result = compare_files(args.expected, args.actual, config=config)
    except JsonParseError as exc:
        label = args.expected if exc.source == "expected" else args.actual
        print(f"Error: {label}: {exc}", file=sys.stderr)
        logger.error("Comparison aborted: {}", exc)
        return EXIT_ERROR
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        logger.error("Comparison aborted: {}", exc)
        return EXIT_ERROR

    print(format_report(result, str(args.expected), str(args.actual)))
    if args.stats:
        print(f"  Comparison time: {result.computation_time_ms:.3f} ms")

    if result.is_equivalent:
        logger.info("Documents are equivalent")
    else:
        logger.warning(
            "Documents differ with {} difference(s)", len(result.mismatches)
        )
    return result.exit_status


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
