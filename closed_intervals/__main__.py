#!/usr/bin/env python3
"""
closed-intervals - look up values in a step table.

This is the command line entry point.
"""

import sys
import argparse
from datetime import datetime
from pathlib import Path

from .config import StepTable
from .interval import Infinity, InvalidArgument
from .timezone_utils import to_local_datetime, to_utc_datetime


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="closed-intervals",
        description="Report the closed interval(s) of a step table containing each value"
    )
    parser.add_argument(
        "values",
        nargs="+",
        metavar="VALUE",
        help="Number or ISO datetime to look up"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to the table file (default: auto-detect)"
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print every interval containing the value, not just one"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def parse_value(text: str):
    """Read a query value as int, float or ISO datetime (normalised to UTC)."""
    for convert in (int, float):
        try:
            return convert(text)
        except ValueError:
            pass
    try:
        return to_utc_datetime(datetime.fromisoformat(text))
    except ValueError:
        raise InvalidArgument(f"Cannot read {text!r} as a number or datetime") from None


def format_bound(bound) -> str:
    if isinstance(bound, Infinity):
        return str(bound)
    at = getattr(bound, 'idx', bound)
    if isinstance(at, datetime):
        at = to_local_datetime(at).isoformat()
    data = getattr(bound, 'data', None)
    return f"{at} [{data}]" if data is not None else str(at)


def format_interval(interval) -> str:
    left, right = interval
    return f"({format_bound(left)}, {format_bound(right)})"


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        table = StepTable.load(args.config, debug=args.debug)
        index = table.build_index()
        for text in args.values:
            value = table.check_value(parse_value(text))
            if args.all:
                intervals = index.get_all_intervals(value)
            else:
                intervals = [index.get_interval(value)]
            print(f"{text} -> " + " ".join(format_interval(i) for i in intervals))
    except (FileNotFoundError, InvalidArgument) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
