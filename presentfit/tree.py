"""A tree region, with the presents it must hold under it."""

from __future__ import annotations

import copy as _copy
from collections import deque
from collections.abc import Iterator, Sequence

from .presents import SIDE, PresentPossibilities
from .space import Space

Coord = tuple[int, int]


def _parse_count(text: str) -> int:
    """Parse a non-negative decimal count, raising ValueError otherwise."""
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"expected a non-negative integer, got {text!r}")
    return int(text)


class Tree:
    """A walled grid under a tree and the number of each present it must take.

    The grid is stored wider than it is tall, with a one-cell border of
    occupied cells around the usable area.
    """

    def __init__(
        self, description: str, present_types: Sequence[PresentPossibilities]
    ) -> None:
        size_text, sep, demand_text = description.partition(": ")
        if not sep:
            raise ValueError(f"missing ': ' in tree description {description!r}")
        height_text, sep, width_text = size_text.partition("x")
        if not sep:
            raise ValueError(f"missing 'x' in tree size {size_text!r}")

        height = _parse_count(height_text) + 2
        width = _parse_count(width_text) + 2
        if height > width:
            height, width = width, height

        wall = Space.OCCUPIED
        self.grid: list[list[Space]] = (
            [[wall] * width]
            + [[wall] + [Space.FREE] * (width - 2) + [wall] for _ in range(height - 2)]
            + [[wall] * width]
        )

        self.demand: list[int] = [
            _parse_count(part) for part in demand_text.strip().split(" ")
        ]
        if len(self.demand) < len(present_types):
            raise ValueError(
                f"tree lists {len(self.demand)} demands for "
                f"{len(present_types)} present types"
            )

        self.present_types = present_types
        self.space_slack: int = self._remaining_space()

    def _remaining_space(self) -> int:
        space = (len(self.grid) - 2) * (len(self.grid[0]) - 2)
        for present, count in zip(self.present_types, self.demand):
            space = max(0, space - present.size() * count)
        return space

    def copy(self) -> Tree:
        """Return an independent copy sharing only the present types."""
        clone = _copy.copy(self)
        clone.grid = [row[:] for row in self.grid]
        clone.demand = list(self.demand)
        return clone

    def simple_check(self) -> bool:
        """Whether the area left after subtracting all demanded presents is non-zero."""
        return self._remaining_space() != 0

    def try_to_fit(self) -> bool:
        """Search exhaustively for a placement of every demanded present."""
        if self.space_slack < 0:
            return False
        if all(count == 0 for count in self.demand):
            return True
        return any(tree.try_to_fit() for tree in self._successors())

    def _successors(self) -> Iterator[Tree]:
        moves = [
            (present_idx, poss_idx)
            for present_idx, present in enumerate(self.present_types)
            if self.demand[present_idx] != 0
            for poss_idx in range(len(present.possibilities))
        ]
        for row in range(2, len(self.grid) - 2):
            for col in range(2, len(self.grid[0]) - 2):
                for present_idx, poss_idx in moves:
                    candidate = self.copy()
                    if candidate.place_present(present_idx, poss_idx, col, row):
                        yield candidate

    def place_present(
        self, present_idx: int, poss_idx: int, pos_x: int, pos_y: int
    ) -> bool:
        """Place an orientation centred on (pos_x, pos_y).

        Returns False, leaving the tree unchanged, if the present would
        overlap an occupied cell. Enclosed pockets left behind are filled.
        """
        left, top = pos_x - 1, pos_y - 1
        if (
            left < 0
            or top < 0
            or left + SIDE > len(self.grid[0])
            or top + SIDE > len(self.grid)
        ):
            raise IndexError(f"position ({pos_x}, {pos_y}) is outside the tree")

        present = self.present_types[present_idx].possibilities[poss_idx]
        cells = [
            (left + col, top + row, space)
            for row, line in enumerate(present.spaces)
            for col, space in enumerate(line)
        ]

        if any(
            space is Space.OCCUPIED and self.grid[y][x] is Space.OCCUPIED
            for x, y, space in cells
        ):
            return False
        if self.demand[present_idx] == 0:
            raise ValueError(f"no more presents of type {present_idx} are demanded")

        pockets: list[Coord] = []
        for x, y, space in cells:
            if space is Space.OCCUPIED:
                self.grid[y][x] = Space.OCCUPIED
            elif self.grid[y][x] is not Space.OCCUPIED:
                self.grid[y][x] = Space.POCKET
                pockets.append((x, y))

        complete: set[Coord] = set()
        while pockets:
            coord = pockets.pop()
            if coord in complete:
                continue
            found = self._explore_pocket(coord)
            if found is not None:
                complete |= found

        for x, y in complete:
            self.grid[y][x] = Space.OCCUPIED

        self.space_slack -= len(complete)
        self.demand[present_idx] -= 1
        return True

    def _explore_pocket(self, start: Coord) -> set[Coord] | None:
        """Return the pocket cells connected to start, or None if it reaches free space."""
        pocket: set[Coord] = set()
        seen = {start}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            cell = self.grid[y][x]
            if cell is Space.FREE:
                return None
            if cell is Space.POCKET:
                pocket.add((x, y))
                for neighbour in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                    if neighbour not in seen:
                        seen.add(neighbour)
                        queue.append(neighbour)
        return pocket