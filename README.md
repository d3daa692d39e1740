# presentfit

A solver for a packing puzzle. You give it a list of 3x3 present shapes and a list of rectangular regions under trees. For each region it decides whether the requested presents fit.

## Input format

The input has several sections, separated by blank lines. Each section except the last describes one present shape:

- The section starts with a one-digit index line such as `0:`. The first three characters, the index line and its newline, are skipped.
- Up to three rows follow. Each row has up to three cells: `#` (occupied), `.` (free) or `o` (pocket). Missing cells count as free.

The last section lists the regions, one per line:

```
0:
###
##.
##.

1:
###
##.
.##

4x4: 0 2
12x5: 1 0
```

A region line has the form `AxB: n0 n1 ...`. `AxB` is the region's two dimensions. The grid is always stored with the longer side as its width, so the order of the two numbers does not matter. After the colon, the line gives how many presents of each shape, in shape order, must go into the region. Malformed lines raise `ValueError`, as do lines with fewer counts than there are shapes.

## Command line

```
presentfit [PATH]
```

The command reads the puzzle from `PATH`, or from `data/input.txt` if no path is given. It prints `Tree PASS` or `Tree FAIL` for each region, then `Part 1: ...` and `Part 2: ...`.

Part 1 counts the regions that pass `Tree.simple_check`. This is an area test: the region's area, less the cells of every requested present, is not zero. Part 2 is always `0`.

## Library use

```python
from presentfit.solver import read_input, solve, solve_pt1
from presentfit.presents import PresentPossibilities, parse_present
from presentfit.tree import Tree

text = read_input("puzzle.txt")
part1, part2 = solve(text)

shapes = [PresentPossibilities("###\n.#.\n.#.")]
tree = Tree("5x5: 2", shapes)
tree.simple_check()   # quick area-based test
tree.try_to_fit()     # exhaustive placement search
```

### Modules

- `presentfit.space`: the `Space` enum (`OCCUPIED`, `POCKET`, `FREE`) and `parse_space`, which maps `#`, `o` and `.` to a `Space`.
- `presentfit.presents`: the frozen `Present` dataclass with `rotated()`, `flipped()` and `free_space()`, plus `parse_present(text)`. `PresentPossibilities(text)` holds every distinct rotation and mirror image of a shape in `possibilities`, the shape's `free_space`, and its `size()`, the number of occupied cells.
- `presentfit.tree`: `Tree(description, present_types)` is a walled grid with the demand for each shape.
  - `simple_check()` runs the area test described above.
  - `try_to_fit()` searches every placement recursively.
  - `place_present(present_idx, poss_idx, pos_x, pos_y)` places one orientation centred on a cell. It returns `False` on overlap. Any enclosed pocket left behind is filled and taken off `space_slack`.
  - `copy()` returns an independent copy.
- `presentfit.solver`: `read_input`, `solve_pt1`, `solve_pt2`, `solve` and the `main` entry point.

## Limitations

- The command line answers part 1 with the area test only. The exhaustive `Tree.try_to_fit` search is available from the library, but the command never runs it.
- The search tries every position and orientation with no pruning beyond the slack count, so it only suits small regions.