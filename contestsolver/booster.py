"""Smallest booster distance that lets the last racer finish strictly first."""

import argparse
import sys
from bisect import bisect_left
from itertools import islice
from pathlib import Path

_NO_RIVAL_TIME = 1e9


def min_booster(x, y, speeds):
    """Return the smallest booster that makes the last racer win.

    The last entry of ``speeds`` is our racer; the others are rivals. A
    booster of ``b`` metres costs one time unit and skips ``b`` metres.
    Returns 0 when no booster is needed and -1 when even ``y`` is not enough.
    """
    if not speeds:
        raise ValueError("at least one speed is required")
    if any(speed <= 0 for speed in speeds):
        raise ValueError("speeds must be positive")

    *rivals, mine = speeds
    best_rival = min([_NO_RIVAL_TIME, *(x / speed for speed in rivals)])

    if x / mine < best_rival:
        return 0

    def wins(boost):
        return 1.0 + (x - boost) / mine < best_rival

    if not wins(y):
        return -1
    return 1 + bisect_left(range(1, y + 1), True, key=wins)


def _take(tokens, count):
    values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError("unexpected end of input")
    return values


def main(argv=None):
    """Read test cases and print the answer for each one."""
    parser = argparse.ArgumentParser(
        prog="booster", description="Find the smallest winning booster."
    )
    parser.add_argument("input", nargs="?", type=Path, help="input file (default: stdin)")
    args = parser.parse_args(argv)
    text = args.input.read_text() if args.input else sys.stdin.read()

    tokens = iter(text.split())
    (cases,) = _take(tokens, 1)
    for _ in range(int(cases)):
        n, x, y = map(int, _take(tokens, 3))
        speeds = [int(value) for value in _take(tokens, n)]
        print(min_booster(x, y, speeds))
    return 0


if __name__ == "__main__":
    sys.exit(main())