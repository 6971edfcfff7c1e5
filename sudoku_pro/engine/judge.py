from sudoku_pro.common.constants import EMPTY, GRID_SIZE
from sudoku_pro.engine.grid import Grid, iter_units, validate_grid


class SudokuJudge:
    """
    Judge Sudoku board state.

    - Allows incomplete boards (`EMPTY` cells are skipped)
    - Checks rows, columns and 3x3 blocks for repeated values
    - Compares a board against its solution
    """

    @staticmethod
    def is_valid(board: Grid) -> bool:
        validate_grid(board, "board")
        for unit in iter_units(board):
            nums = [v for v in unit if v != EMPTY]
            if len(nums) != len(set(nums)):
                return False
        return True

    @staticmethod
    def is_complete(board: Grid) -> bool:
        """True if the board has no empty cell and breaks no rule."""
        return SudokuJudge.is_valid(board) and all(EMPTY not in row for row in board)

    @staticmethod
    def is_solved(board: Grid, solution: Grid) -> bool:
        return check_win(board, solution)


def check_win(current_grid: Grid, solution_grid: Grid) -> bool:
    """
    Check whether the player's grid matches the answer key.

    Args:
        current_grid (Grid): The grid as edited by the player.
        solution_grid (Grid): The solution grid returned at puzzle creation.

    Returns:
        bool: True if every cell is filled and equal to the solution.

    Raises:
        ValueError: If either grid is not 9x9 or holds values outside 1..9/EMPTY.
    """
    validate_grid(current_grid, "current_grid")
    validate_grid(solution_grid, "solution_grid")
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            value = current_grid[r][c]
            if value == EMPTY or value != solution_grid[r][c]:
                return False
    return True
