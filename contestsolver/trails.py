"""Count hiking routes that alternate between two mountains.

A route is a sequence of distinct trails alternating between the east and
west mountains; every switch adds a fixed crossing length. A route counts
when its total length lies within ``[low, high]``.
"""

import argparse
import sys
from collections import deque
from functools import cache
from itertools import islice
from pathlib import Path

MOD = 1_000_000_007

_EAST = 0
_WEST = 1


def count_routes(x, low, high, east, west):
    """Count valid routes by breadth-first enumeration, modulo ``MOD``."""
    result = 0
    queue = deque()
    for side, lengths in ((_EAST, east), (_WEST, west)):
        for i, length in enumerate(lengths):
            used_east = 1 << i if side == _EAST else 0
            used_west = 1 << i if side == _WEST else 0
            queue.append((used_east, used_west, side, length))
            if low <= length <= high:
                result = (result + 1) % MOD

    while queue:
        used_east, used_west, last, total = queue.popleft()
        if last == _EAST:
            for i, length in enumerate(west):
                bit = 1 << i
                if used_west & bit:
                    continue
                new_total = total + x + length
                if new_total <= high:
                    queue.append((used_east, used_west | bit, _WEST, new_total))
                    if new_total >= low:
                        result = (result + 1) % MOD
        else:
            for i, length in enumerate(east):
                bit = 1 << i
                if used_east & bit:
                    continue
                new_total = total + x + length
                if new_total <= high:
                    queue.append((used_east | bit, used_west, _EAST, new_total))
                    if new_total >= low:
                        result = (result + 1) % MOD
    return result


def count_routes_memo(x, low, high, east, west):
    """Count valid routes by memoised depth-first search, modulo ``MOD``."""
    east = list(east)
    west = list(west)
    east_order = sorted(range(len(east)), key=east.__getitem__)
    west_order = sorted(range(len(west)), key=west.__getitem__)

    @cache
    def extend(used_east, used_west, last, total):
        if total > high:
            return 0
        count = 1 if low <= total <= high else 0
        if last == _EAST:
            lengths, order, used = west, west_order, used_west
        else:
            lengths, order, used = east, east_order, used_east
        for i in order:
            bit = 1 << i
            if used & bit:
                continue
            new_total = total + x + lengths[i]
            if new_total > high:
                break
            if last == _EAST:
                count += extend(used_east, used_west | bit, _WEST, new_total)
            else:
                count += extend(used_east | bit, used_west, _EAST, new_total)
            count %= MOD
        return count

    result = 0
    for i, length in enumerate(east):
        if length <= high:
            result = (result + extend(1 << i, 0, _EAST, length)) % MOD
    for i, length in enumerate(west):
        if length <= high:
            result = (result + extend(0, 1 << i, _WEST, length)) % MOD
    extend.cache_clear()
    return result


def _take(tokens, count):
    values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError("unexpected end of input")
    return values


def main(argv=None):
    """Read test cases and print the route count for each one."""
    parser = argparse.ArgumentParser(
        prog="trails", description="Count alternating hiking routes."
    )
    parser.add_argument("input", nargs="?", type=Path, help="input file (default: stdin)")
    parser.add_argument(
        "--method",
        choices=("memo", "bfs"),
        default="memo",
        help="counting strategy (default: memo)",
    )
    args = parser.parse_args(argv)
    text = args.input.read_text() if args.input else sys.stdin.read()
    solver = count_routes_memo if args.method == "memo" else count_routes

    tokens = iter(text.split())
    (cases,) = _take(tokens, 1)
    for _ in range(int(cases)):
        n, m, x, low, high = map(int, _take(tokens, 5))
        east = [int(v) for v in _take(tokens, n)]
        west = [int(v) for v in _take(tokens, m)]
        print(solver(x, low, high, east, west))
    return 0


if __name__ == "__main__":
    sys.exit(main())