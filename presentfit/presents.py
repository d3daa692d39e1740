"""Three-by-three presents and the set of their orientations."""

from __future__ import annotations

from dataclasses import dataclass

from .space import Space, parse_space

SIDE = 3

Grid = tuple[tuple[Space, ...], ...]


@dataclass(frozen=True)
class Present:
    """An immutable 3x3 present shape."""

    spaces: Grid

    def rotated(self) -> Present:
        """Return this present turned a quarter turn clockwise."""
        return Present(
            tuple(
                tuple(self.spaces[SIDE - 1 - col][row] for col in range(SIDE))
                for row in range(SIDE)
            )
        )

    def flipped(self) -> Present:
        """Return this present mirrored left to right."""
        return Present(tuple(tuple(reversed(row)) for row in self.spaces))

    def free_space(self) -> int:
        """Count the free cells of the shape."""
        return sum(space is Space.FREE for row in self.spaces for space in row)

    def __str__(self) -> str:
        return "".join("".join(str(s) for s in row) + "\n" for row in self.spaces)

    def __repr__(self) -> str:
        return "\n" + str(self)


def parse_present(text: str) -> Present:
    """Parse up to three lines of up to three symbols; missing cells are free."""
    grid = [[Space.FREE] * SIDE for _ in range(SIDE)]
    lines = text.splitlines()
    if len(lines) > SIDE:
        raise ValueError(f"a present has at most {SIDE} lines, got {len(lines)}")
    for row, line in zip(grid, lines):
        if len(line) > SIDE:
            raise ValueError(f"a present line has at most {SIDE} cells: {line!r}")
        for col, char in enumerate(line):
            row[col] = parse_space(char)
    return Present(tuple(tuple(row) for row in grid))


class PresentPossibilities:
    """All distinct rotations and reflections of one present."""

    def __init__(self, text: str) -> None:
        present = parse_present(text)
        self.free_space: int = present.free_space()

        seen: dict[Present, None] = {present: None}
        for _ in range(3):
            present = present.rotated()
            seen[present] = None
        present = present.flipped()
        seen[present] = None
        for _ in range(3):
            present = present.rotated()
            seen[present] = None

        self.possibilities: list[Present] = list(seen)

    def size(self) -> int:
        """Number of cells the present occupies."""
        return SIDE * SIDE - self.free_space

    def __repr__(self) -> str:
        return (
            f"PresentPossibilities(possibilities={self.possibilities!r}, "
            f"free_space={self.free_space})"
        )