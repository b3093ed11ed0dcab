"""Maximum-weight node selection on a rooted tree.

A chosen node forbids choosing any of its children; an unchosen node with
children needs at least one chosen child.
"""

import argparse
import sys
from itertools import islice
from pathlib import Path


class TreeDP:
    """A rooted tree given by node values and 1-based parent indices (0 = root)."""

    def __init__(self, values, parents):
        if len(values) != len(parents):
            raise ValueError("values and parents must have the same length")
        self.values = list(values)
        self.children = [[] for _ in self.values]
        self.root = None
        for node, parent in enumerate(parents):
            if parent == 0:
                self.root = node
            elif 1 <= parent <= len(values):
                self.children[parent - 1].append(node)
            else:
                raise ValueError(f"parent index {parent} out of range")
        if self.root is None:
            raise ValueError("the tree has no root")

    def _post_order(self):
        order = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(self.children[node])
        return reversed(order)

    def solve(self):
        """Return the best total value of a valid selection."""
        take = {}
        skip = {}
        for node in self._post_order():
            kids = self.children[node]
            if not kids:
                take[node] = self.values[node]
                skip[node] = 0
                continue
            take[node] = self.values[node] + sum(skip[kid] for kid in kids)
            best_total = sum(max(take[kid], skip[kid]) for kid in kids)
            if any(take[kid] > skip[kid] for kid in kids):
                skip[node] = best_total
            else:
                # Every child prefers not being taken; force the cheapest one in.
                skip[node] = max(best_total - skip[kid] + take[kid] for kid in kids)
        return max(take[self.root], skip[self.root])


def max_selection(values, parents):
    """Return the best selection value for the tree given by values and parents."""
    return TreeDP(values, parents).solve()


def _take(tokens, count):
    values = list(islice(tokens, count))
    if len(values) < count:
        raise ValueError("unexpected end of input")
    return values


def main(argv=None):
    """Read test cases and print the best selection value for each tree."""
    parser = argparse.ArgumentParser(
        prog="treedp", description="Best node selection on a rooted tree."
    )
    parser.add_argument("input", nargs="?", type=Path, help="input file (default: stdin)")
    args = parser.parse_args(argv)
    text = args.input.read_text() if args.input else sys.stdin.read()

    tokens = iter(text.split())
    (cases,) = _take(tokens, 1)
    for _ in range(int(cases)):
        (count,) = _take(tokens, 1)
        n = int(count)
        values = [int(v) for v in _take(tokens, n)]
        parents = [int(p) for p in _take(tokens, n)]
        print(max_selection(values, parents))
    return 0


if __name__ == "__main__":
    sys.exit(main())