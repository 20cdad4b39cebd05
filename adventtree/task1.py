"""Total distance between two sorted columns of integers.

Each input line holds two whitespace-separated integers. The left and
right columns are loaded into separate trees, so each column comes out
sorted with its duplicates kept. The distance is the sum of absolute
differences between items of equal rank.
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Iterable, Sequence

from adventtree.items import Int
from adventtree.rbtree import RBTree

__all__ = ["read_trees", "calculate_distance", "run", "main"]

DEFAULT_DATA_PATH = "task-1/task-1.dat"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int(word: str) -> int:
    """Parse a decimal integer; text that is not one counts as 0.

    Values outside the signed 64-bit range are clamped to it.
    """
    if not _INT_PATTERN.fullmatch(word):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(word)))


def read_trees(lines: Iterable[str]) -> tuple[RBTree, RBTree]:
    """Load the two columns of ``lines`` into two trees.

    Raises ValueError for a line with fewer than two fields.
    """
    left, right = RBTree(), RBTree()
    for number, line in enumerate(lines, start=1):
        words = line.split()
        if len(words) < 2:
            raise ValueError(
                f"line {number}: expected two fields, got {len(words)}"
            )
        left.insert(Int(_parse_int(words[0])))
        right.insert(Int(_parse_int(words[1])))
    return left, right


def calculate_distance(tree1: RBTree, tree2: RBTree) -> int:
    """Sum the absolute differences of same-rank items of both trees.

    Pairing stops when the shorter tree runs out.
    """
    return sum(abs(int(a) - int(b)) for a, b in zip(tree1, tree2))


def _describe(name: str, tree: RBTree) -> str:
    return (
        f"Count in {name} is {len(tree)}\n"
        f"Min in {name} is {tree.min()}\n"
        f"Max in {name} is {tree.max()}"
    )


def run(path: str | Path) -> int:
    """Read ``path``, print the column statistics and return the distance."""
    with open(path, encoding="utf-8") as handle:
        tree1, tree2 = read_trees(handle)

    print(_describe("tree1", tree1))
    print(_describe("tree2", tree2))

    distance = calculate_distance(tree1, tree2)
    print(f"count count {min(len(tree1), len(tree2))}")
    print(f"Distance is {distance}")
    return distance


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; returns the process exit status."""
    parser = argparse.ArgumentParser(
        description="Compute the distance between two sorted columns."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_DATA_PATH,
        help=f"input file (default: {DEFAULT_DATA_PATH})",
    )
    args = parser.parse_args(argv)

    print("Hello world")
    try:
        run(args.path)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())