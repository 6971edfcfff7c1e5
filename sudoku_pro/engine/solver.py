"""Randomized backtracking filler and solution counter."""
import random
from typing import List, Optional, Tuple

from sudoku_pro.common.config import SolverConfig
from sudoku_pro.common.constants import EMPTY, GRID_SIZE
from sudoku_pro.engine.grid import (
    Grid,
    Position,
    candidates,
    clone_grid,
    is_placement_legal,
    make_empty_grid,
    validate_grid,
)
from sudoku_pro.utils.log import get_logger


class GenerationError(RuntimeError):
    """Generation gave up; callers may retry with fresh randomness."""


class _BudgetExceeded(Exception):
    pass


class GridSolver:
    """
    Sudoku grid filler using randomized backtracking.

    - Fills positions in row-major order
    - Tries candidates 1..9 in shuffled order so every fill differs
    - Undoes a placement explicitly when the search below it dead-ends
    - Abandons a fill after `max_steps` placements and retries it
    """

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the solver.

        Args:
            config (SolverConfig): Step budget and retry settings.
            rng (random.Random): Random source. A fresh one is created if None.
        """
        self.config = config or SolverConfig()
        self.rng = rng or random.Random()
        self.logger = get_logger(__name__)
        self._steps = 0

    def generate_complete_grid(self) -> Grid:
        """
        Generate a fully populated grid that satisfies every row, column and
        block constraint.

        Returns:
            Grid: A new solution grid.

        Raises:
            GenerationError: If every attempt exhausted the step budget.
        """
        attempts = self.config.max_retries + 1
        for attempt in range(1, attempts + 1):
            grid = make_empty_grid()
            self._steps = 0
            try:
                if self._fill(grid, 0):
                    self.logger.debug(f"Filled grid in {self._steps} steps (attempt {attempt})")
                    return grid
            except _BudgetExceeded:
                self.logger.warning(
                    f"Fill attempt {attempt}/{attempts} exceeded "
                    f"{self.config.max_steps} steps, retrying"
                )
                continue
            # an empty grid always has a completion
            raise GenerationError("Backtracking search exhausted without a complete grid")
        self.logger.error(f"Giving up grid generation after {attempts} attempts")
        raise GenerationError(f"Grid generation exceeded the step budget {attempts} times")

    def _fill(self, grid: Grid, index: int) -> bool:
        """
        Recursively fill the grid from position `index` (row-major) onward.

        Args:
            grid (Grid): Grid being filled, mutated in place.
            index (int): Flat position of the next cell to fill.

        Returns:
            bool: True if the grid is completely filled.
        """
        if index == GRID_SIZE * GRID_SIZE:
            return True

        r, c = divmod(index, GRID_SIZE)
        nums = list(range(1, GRID_SIZE + 1))
        self.rng.shuffle(nums)

        for v in nums:
            if is_placement_legal(grid, r, c, v):
                self._steps += 1
                if self._steps > self.config.max_steps:
                    raise _BudgetExceeded()
                grid[r][c] = v
                if self._fill(grid, index + 1):
                    return True
                grid[r][c] = EMPTY

        return False

    def solve(self, grid: Grid) -> Optional[Grid]:
        """
        Solve a partial grid.

        Args:
            grid (Grid): Puzzle grid; not modified.

        Returns:
            Grid | None: A completed copy, or None if no completion exists.
        """
        validate_grid(grid)
        work = clone_grid(grid)
        if not _givens_consistent(work):
            return None
        solutions: List[Grid] = []
        _search(work, solutions, limit=1)
        return solutions[0] if solutions else None

    def count_solutions(self, grid: Grid, limit: int = 2) -> int:
        """
        Count completions of a partial grid, stopping once `limit` are found.

        Args:
            grid (Grid): Puzzle grid; not modified.
            limit (int): Upper bound on the count. 2 answers "is it unique".

        Returns:
            int: Number of completions found, at most `limit`.
        """
        validate_grid(grid)
        if limit <= 0:
            return 0
        work = clone_grid(grid)
        if not _givens_consistent(work):
            return 0
        solutions: List[Grid] = []
        _search(work, solutions, limit=limit)
        return len(solutions)


def _givens_consistent(grid: Grid) -> bool:
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            v = grid[r][c]
            if v == EMPTY:
                continue
            grid[r][c] = EMPTY
            legal = is_placement_legal(grid, r, c, v)
            grid[r][c] = v
            if not legal:
                return False
    return True


def _most_constrained(grid: Grid) -> Optional[Tuple[Position, List[int]]]:
    """Empty cell with the fewest candidates, with those candidates."""
    best: Optional[Position] = None
    best_values: List[int] = []
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if grid[r][c] != EMPTY:
                continue
            values = candidates(grid, r, c)
            if best is None or len(values) < len(best_values):
                best, best_values = (r, c), values
                if len(values) <= 1:
                    return best, best_values
    if best is None:
        return None
    return best, best_values


def _search(grid: Grid, solutions: List[Grid], limit: int) -> bool:
    """Depth-first search collecting up to `limit` solutions; True once the limit is hit."""
    cell = _most_constrained(grid)
    if cell is None:
        solutions.append(clone_grid(grid))
        return len(solutions) >= limit

    (r, c), values = cell
    for v in values:
        grid[r][c] = v
        if _search(grid, solutions, limit):
            grid[r][c] = EMPTY
            return True
        grid[r][c] = EMPTY
    return False


def generate_complete_grid(rng: Optional[random.Random] = None) -> Grid:
    """Generate a complete, valid grid with the default solver settings."""
    return GridSolver(rng=rng).generate_complete_grid()
