# -*- coding: utf-8 -*-
"""Single-player game session on top of the puzzle engine."""
import time
from typing import Callable, Optional

from sudoku_pro.common.config import Config
from sudoku_pro.common.constants import EMPTY, GRID_SIZE, GameStatus, MoveResult
from sudoku_pro.engine.carver import Puzzle, PuzzleCarver, validate_level
from sudoku_pro.engine.grid import Grid, clone_grid, validate_position
from sudoku_pro.engine.judge import check_win
from sudoku_pro.utils.log import get_logger


def format_time(seconds: float) -> str:
    """Format elapsed seconds as ``MM:SS``."""
    seconds = int(seconds)
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"


class GameSession:
    """
    One player's game: the board being edited, the answer key and the rules
    around them.

    - Given cells can never be edited
    - A wrong value counts a mistake; `max_mistakes` mistakes lose the game
    - The game is won when the board equals the solution
    - The timer runs while the game is being played
    """

    def __init__(
        self,
        level: Optional[int] = None,
        carver: Optional[PuzzleCarver] = None,
        config: Optional[Config] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or Config()
        self.carver = carver or PuzzleCarver(self.config)
        self.level = self.config.game.level if level is None else level
        validate_level(self.level)
        self.max_mistakes = self.config.game.max_mistakes
        self.clock = clock
        self.logger = get_logger(__name__)

        self.puzzle: Optional[Puzzle] = None
        self._board: Grid = []
        self.mistakes = 0
        self.status = GameStatus.PLAYING
        self._started_at = 0.0
        self._stopped_at: Optional[float] = None
        self.new_game()

    def new_game(self, level: Optional[int] = None) -> Puzzle:
        """Start a fresh puzzle, optionally switching difficulty level.

        If generation fails the current game is left untouched.
        """
        if level is None:
            level = self.level
        validate_level(level)
        puzzle = self.carver.create_puzzle(level)
        self.level = level
        self.puzzle = puzzle
        self._board = clone_grid(self.puzzle.puzzle_grid)
        self.mistakes = 0
        self.status = GameStatus.PLAYING
        self._started_at = self.clock()
        self._stopped_at = None
        self.logger.info(f"New game at level {self.level}")
        return self.puzzle

    @property
    def board(self) -> Grid:
        return clone_grid(self._board)

    @property
    def solution(self) -> Grid:
        return clone_grid(self.puzzle.solution_grid)

    @property
    def is_finished(self) -> bool:
        return self.status != GameStatus.PLAYING

    @property
    def elapsed_seconds(self) -> float:
        end = self._stopped_at if self._stopped_at is not None else self.clock()
        return end - self._started_at

    def elapsed_text(self) -> str:
        return format_time(self.elapsed_seconds)

    def is_editable(self, row: int, col: int) -> bool:
        validate_position(row, col)
        return not self.puzzle.is_given(row, col)

    def is_mistake(self, row: int, col: int) -> bool:
        """True for a player-entered value that differs from the solution."""
        validate_position(row, col)
        value = self._board[row][col]
        return (
            not self.puzzle.is_given(row, col)
            and value != EMPTY
            and value != self.puzzle.solution_grid[row][col]
        )

    def place(self, row: int, col: int, value: int) -> MoveResult:
        """
        Write `value` at (row, col).

        Returns:
            MoveResult: `REJECTED` if the game is finished, the cell is a given
            or already holds `value`; otherwise `CORRECT` or `MISTAKE`. A
            mistaken value is still written to the board.
        """
        validate_position(row, col)
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= GRID_SIZE:
            raise ValueError(f"value must be an int in [1, {GRID_SIZE}], got {value!r}")
        if self.is_finished or self.puzzle.is_given(row, col):
            return MoveResult.REJECTED
        if self._board[row][col] == value:
            return MoveResult.REJECTED

        result = MoveResult.CORRECT
        if value != self.puzzle.solution_grid[row][col]:
            result = MoveResult.MISTAKE
            self.mistakes += 1
            self.logger.debug(f"Mistake {self.mistakes}/{self.max_mistakes} at ({row}, {col})")
            if self.mistakes >= self.max_mistakes:
                self._finish(GameStatus.LOST)

        self._board[row][col] = value
        if check_win(self._board, self.puzzle.solution_grid):
            self._finish(GameStatus.WON)
        return result

    def clear(self, row: int, col: int) -> bool:
        """Empty an editable cell. Returns False for givens or a finished game."""
        validate_position(row, col)
        if self.is_finished or self.puzzle.is_given(row, col):
            return False
        self._board[row][col] = EMPTY
        return True

    def reset(self) -> None:
        """Put the board back to the puzzle grid. Mistakes and timer carry on."""
        self._board = clone_grid(self.puzzle.puzzle_grid)

    def reveal(self) -> None:
        """Fill the board with the solution and mark the game won, even a lost one."""
        self._board = clone_grid(self.puzzle.solution_grid)
        self._finish(GameStatus.WON)

    def _finish(self, status: GameStatus) -> None:
        if self.status == status:
            return
        self.status = status
        if self._stopped_at is None:
            self._stopped_at = self.clock()
        self.logger.info(f"Game {status.value} after {self.elapsed_text()}")
