"""Choose which strings to reverse so the sequence becomes strictly increasing."""

import argparse
import sys
from itertools import islice
from pathlib import Path


def min_flip_pattern(strings):
    """Return the lexicographically smallest flip pattern, or None if impossible.

    The pattern has one character per string: "0" keeps it, "1" reverses it.
    After applying the pattern the strings must be strictly increasing.
    """
    if not strings:
        raise ValueError("at least one string is required")

    first = strings[0]
    options = [(first, "0"), (first[::-1], "1")]
    for text in strings[1:]:
        next_options = []
        for flag, current in (("0", text), ("1", text[::-1])):
            candidates = [
                pattern + flag
                for previous, pattern in options
                if pattern is not None and previous < current
            ]
            next_options.append((current, min(candidates, default=None)))
        options = next_options

    return min((pattern for _, pattern in options if pattern is not None), default=None)


def _take(tokens, count):
    values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError("unexpected end of input")
    return values


def main(argv=None):
    """Read test cases and print the flip pattern for each one."""
    parser = argparse.ArgumentParser(
        prog="reversals", description="Find the smallest flip pattern."
    )
    parser.add_argument("input", nargs="?", type=Path, help="input file (default: stdin)")
    args = parser.parse_args(argv)
    text = args.input.read_text() if args.input else sys.stdin.read()

    tokens = iter(text.split())
    (cases,) = _take(tokens, 1)
    for _ in range(int(cases)):
        (count,) = _take(tokens, 1)
        strings = _take(tokens, int(count))
        pattern = min_flip_pattern(strings)
        print(pattern if pattern is not None else "")
    return 0


if __name__ == "__main__":
    sys.exit(main())