"""Puzzle input handling and the command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from .presents import PresentPossibilities
from .tree import Tree

DEFAULT_INPUT = "data/input.txt"


def read_input(path: str | Path) -> str:
    """Return the whole text of the input file."""
    return Path(path).read_text()


def solve_pt1(text: str) -> int:
    """Count the trees whose area is not used up by their presents."""
    sections = text.split("\n\n")
    tree_descriptions = sections.pop()
    if not sections:
        raise ValueError("input holds no present sections")

    presents = [PresentPossibilities(section[3:]) for section in sections]
    trees = [Tree(line, presents) for line in tree_descriptions.splitlines()]

    counter = 0
    for tree in trees:
        if tree.simple_check():
            print("Tree PASS")
            counter += 1
        else:
            print("Tree FAIL")
    return counter


def solve_pt2(text: str) -> int:
    """The second part has no answer; it is always zero."""
    return 0


def solve(text: str) -> tuple[int, int]:
    """Return the answers to both parts."""
    return solve_pt1(text), solve_pt2(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle input and print both answers."""
    parser = argparse.ArgumentParser(description="Fit presents under trees.")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT, help="input file")
    args = parser.parse_args(argv)

    part_1, part_2 = solve(read_input(args.path))
    print(f"Part 1: {part_1}")
    print(f"Part 2: {part_2}")
    return 0