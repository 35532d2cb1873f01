import argparse
import sys

from notation import ConfigurationError, format_ranks, parse_origin
from tour import TourStatus, solve_tour


def build_parser():
    parser = argparse.ArgumentParser(
        prog="knights-tour",
        description="Find a knight's tour with Warnsdorff's rule and backtracking.",
    )
    parser.add_argument("rows", type=int)
    parser.add_argument("cols", type=int)
    parser.add_argument("origin", help="start cell, e.g. a1 (row 1 is the bottom row)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        if args.rows < 1 or args.cols < 1:
            raise ConfigurationError("rows and cols must be positive")
        origin = parse_origin(args.origin, args.rows, args.cols)
    except ConfigurationError as e:
        parser.error(str(e))

    result = solve_tour(args.rows, args.cols, origin)
    if result.status is TourStatus.SOLVED:
        print(format_ranks(result.ranks))
        return 0
    print(result.status.value)
    return 1 if result.status is TourStatus.TIMEOUT else 0


if __name__ == "__main__":
    sys.exit(main())
