"""Command-line entry point: count placements and solutions for one N.

Usage::

    nqueens-counter        # N defaults to 4
    nqueens-counter 12

Prints exactly one result line on success. Board construction failures are
reported on stderr with exit status 1 and nothing is written to stdout.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .exceptions import BoardError
from .search import solve
from .utils import format_counts

DEFAULT_SIZE = 4


def build_arg_parser():
    """Construct the argument parser for the CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="nqueens-counter",
        description="Count queen placements and solutions of the N-Queens problem.",
    )
    parser.add_argument(
        "size",
        nargs="?",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Board size N, also the number of queens (default: {DEFAULT_SIZE}).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments, run the search, and print the counts."""
    args = build_arg_parser().parse_args(argv)

    try:
        placements, solutions = solve(args.size)
    except BoardError as exc:
        print(exc, file=sys.stderr)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        print("\nSearch interrupted by user.", file=sys.stderr)
        raise SystemExit(130) from None

    print(format_counts(args.size, placements, solutions))


if __name__ == "__main__":
    main()
