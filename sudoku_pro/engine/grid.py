"""Grid type and the rule helpers shared by the solver, carver and judge."""
from typing import Iterator, List, Tuple

from sudoku_pro.common.constants import BLOCK_SIZE, EMPTY, GRID_SIZE

Grid = List[List[int]]
Position = Tuple[int, int]


def make_empty_grid() -> Grid:
    return [[EMPTY] * GRID_SIZE for _ in range(GRID_SIZE)]


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def all_positions() -> List[Position]:
    """All cell positions in row-major order."""
    return [(r, c) for r in range(GRID_SIZE) for c in range(GRID_SIZE)]


def block_origin(row: int, col: int) -> Position:
    return (row // BLOCK_SIZE) * BLOCK_SIZE, (col // BLOCK_SIZE) * BLOCK_SIZE


def iter_units(grid: Grid) -> Iterator[List[int]]:
    """Yield the values of every row, column and block."""
    for row in grid:
        yield list(row)
    for c in range(GRID_SIZE):
        yield [grid[r][c] for r in range(GRID_SIZE)]
    for br in range(0, GRID_SIZE, BLOCK_SIZE):
        for bc in range(0, GRID_SIZE, BLOCK_SIZE):
            yield [
                grid[r][c]
                for r in range(br, br + BLOCK_SIZE)
                for c in range(bc, bc + BLOCK_SIZE)
            ]


def is_placement_legal(grid: Grid, row: int, col: int, value: int) -> bool:
    """
    Check whether `value` can go at (row, col) without repeating in its unit.

    The cell at (row, col) is part of its own row, so callers test empty cells.
    Indices are checked, a negative one never wraps to the far side.

    Args:
        grid (Grid): Current grid state.
        row (int): Row index.
        col (int): Column index.
        value (int): Value to place.

    Returns:
        bool: True if the value is absent from the row, column and block.

    Raises:
        ValueError: If `row` or `col` is not an int in [0, 8].
    """
    validate_position(row, col)
    return _placement_legal(grid, row, col, value)


def _placement_legal(grid: Grid, row: int, col: int, value: int) -> bool:
    # unchecked, for the solver loops that only visit in-range cells
    if value in grid[row]:
        return False

    for r in range(GRID_SIZE):
        if grid[r][col] == value:
            return False

    br, bc = block_origin(row, col)
    for r in range(br, br + BLOCK_SIZE):
        for c in range(bc, bc + BLOCK_SIZE):
            if grid[r][c] == value:
                return False

    return True


def candidates(grid: Grid, row: int, col: int) -> List[int]:
    """Values that are legal at (row, col), in ascending order."""
    return [v for v in range(1, GRID_SIZE + 1) if _placement_legal(grid, row, col, v)]


def validate_grid(grid, name: str = "grid") -> None:
    """
    Raise `ValueError` unless `grid` is a 9x9 list of lists of cell values.

    A cell value is an `int` in 1..9 or `EMPTY`. `bool` is rejected even though
    it is an `int` subclass.
    """
    if not isinstance(grid, list) or len(grid) != GRID_SIZE:
        raise ValueError(f"{name} must be a list of {GRID_SIZE} rows")
    for r, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != GRID_SIZE:
            raise ValueError(f"{name} row {r} must be a list of {GRID_SIZE} cells")
        for c, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name}[{r}][{c}] must be an int, got {type(value).__name__}")
            if value != EMPTY and not 1 <= value <= GRID_SIZE:
                raise ValueError(f"{name}[{r}][{c}] out of range: {value}")


def validate_position(row: int, col: int) -> None:
    for name, index in (("row", row), ("col", col)):
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < GRID_SIZE:
            raise ValueError(f"{name} must be an int in [0, {GRID_SIZE - 1}], got {index!r}")


def count_empty(grid: Grid) -> int:
    return sum(row.count(EMPTY) for row in grid)


def format_grid(grid: Grid) -> str:
    """Render a grid as text with block separators, `.` for empty cells."""
    lines = []
    for r, row in enumerate(grid):
        if r and r % BLOCK_SIZE == 0:
            lines.append("------+-------+------")
        cells = [str(v) if v != EMPTY else "." for v in row]
        groups = [" ".join(cells[i : i + BLOCK_SIZE]) for i in range(0, GRID_SIZE, BLOCK_SIZE)]
        lines.append(" | ".join(groups))
    return "\n".join(lines)
