# -*- coding: utf-8 -*-
"""Puzzle carving: turn a solution grid into a playable puzzle."""
from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

from sudoku_pro.common.config import CarverConfig, Config
from sudoku_pro.common.constants import (
    EMPTY,
    MAX_HOLES,
    MAX_LEVEL,
    MIN_LEVEL,
    VALUES,
)
from sudoku_pro.engine.grid import Grid, Position, all_positions, clone_grid, count_empty
from sudoku_pro.engine.solver import GenerationError, GridSolver
from sudoku_pro.utils.log import get_logger
from sudoku_pro.utils.registry import Registry

logger = get_logger(__name__)

CARVERS: Registry = Registry(
    "carvers",
    default_mapping={
        "random": "sudoku_pro.engine.carver.RandomCarver",
        "unique": "sudoku_pro.engine.carver.UniqueCarver",
    },
)


@dataclass
class Puzzle:
    """A carved puzzle and its answer key."""

    level: int
    puzzle_grid: Grid
    solution_grid: Grid
    # positions that were non-empty at creation; never editable
    givens: FrozenSet[Position]

    def is_given(self, row: int, col: int) -> bool:
        return (row, col) in self.givens

    @property
    def empty_count(self) -> int:
        return count_empty(self.puzzle_grid)

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "puzzle_grid": clone_grid(self.puzzle_grid),
            "solution_grid": clone_grid(self.solution_grid),
            "givens": sorted(self.givens),
        }


class Carver(ABC):
    """Base class of removal strategies.

    A carver obtains a solution grid from its solver and clears exactly
    `holes` cells of a copy of it.
    """

    # largest quota the strategy can reliably reach
    max_holes: int = MAX_HOLES

    def __init__(self, solver: GridSolver, rng: random.Random, max_attempts: int = 100):
        self.solver = solver
        self.rng = rng
        self.max_attempts = max_attempts
        self.logger = get_logger(__name__)

    @abstractmethod
    def carve(self, holes: int) -> Tuple[Grid, Grid]:
        """Generate a solution and clear `holes` cells.

        Args:
            holes (`int`): number of cells to clear.

        Returns:
            `Tuple[Grid, Grid]`: (puzzle grid, solution grid)
        """

    @classmethod
    def default_args(cls) -> Dict:
        return {}

    @classmethod
    def build_args(cls, strategy_args: Optional[Dict] = None) -> Dict:
        """Merge `strategy_args` over `default_args`, rejecting unknown names.

        Raises:
            `ValueError`: if a name is not an argument of this strategy.
        """
        args = cls.default_args()
        unknown = sorted(set(strategy_args or {}) - set(args))
        if unknown:
            raise ValueError(
                f"Invalid configuration: `{cls.__name__}` does not accept "
                f"strategy_args {unknown}, expected a subset of {sorted(args)}"
            )
        args.update(strategy_args or {})
        return args


class RandomCarver(Carver):
    """Clear `holes` cells chosen uniformly at random without replacement.

    With `keep_every_value`, selections that would clear every occurrence of
    some value are redrawn, so each value keeps at least one given.
    """

    def __init__(
        self,
        solver: GridSolver,
        rng: random.Random,
        max_attempts: int = 100,
        keep_every_value: bool = True,
    ):
        super().__init__(solver, rng, max_attempts)
        self.keep_every_value = keep_every_value

    def carve(self, holes: int) -> Tuple[Grid, Grid]:
        solution = self.solver.generate_complete_grid()
        positions = all_positions()
        for attempt in range(1, self.max_attempts + 1):
            selected = self.rng.sample(positions, holes)
            if self.keep_every_value and not self._keeps_every_value(solution, selected):
                self.logger.debug(f"Selection {attempt} clears a whole value, redrawing")
                continue
            puzzle = clone_grid(solution)
            for r, c in selected:
                puzzle[r][c] = EMPTY
            return puzzle, solution
        self.logger.error(f"No admissible selection of {holes} cells in {self.max_attempts} draws")
        raise GenerationError(f"Could not select {holes} cells to clear")

    @staticmethod
    def _keeps_every_value(solution: Grid, selected: List[Position]) -> bool:
        cleared = set(selected)
        kept = {
            solution[r][c] for r, c in all_positions() if (r, c) not in cleared
        }
        return kept.issuperset(VALUES)

    @classmethod
    def default_args(cls) -> Dict:
        return {"keep_every_value": True}


class UniqueCarver(Carver):
    """Clear cells one at a time, keeping only removals that leave exactly
    one solution. If a grid runs out of removable cells before reaching the
    quota, a new solution grid is generated."""

    max_holes: int = 54

    def carve(self, holes: int) -> Tuple[Grid, Grid]:
        for attempt in range(1, self.max_attempts + 1):
            solution = self.solver.generate_complete_grid()
            puzzle = clone_grid(solution)
            positions = all_positions()
            self.rng.shuffle(positions)
            cleared = 0
            for r, c in positions:
                if cleared == holes:
                    break
                value = puzzle[r][c]
                puzzle[r][c] = EMPTY
                if self.solver.count_solutions(puzzle, limit=2) == 1:
                    cleared += 1
                else:
                    puzzle[r][c] = value
            if cleared == holes:
                return puzzle, solution
            self.logger.warning(
                f"Attempt {attempt}: only {cleared}/{holes} cells removable "
                "with a unique solution, regenerating"
            )
        self.logger.error(f"Giving up unique carving after {self.max_attempts} attempts")
        raise GenerationError(f"Could not carve {holes} cells with a unique solution")


def validate_level(level) -> None:
    if isinstance(level, bool) or not isinstance(level, int):
        raise ValueError(f"level must be an int, got {type(level).__name__}")
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise ValueError(f"level must be in [{MIN_LEVEL}, {MAX_LEVEL}], got {level}")


def removal_quota(level: int, config: Optional[CarverConfig] = None) -> int:
    """
    Number of cells to clear at `level`.

    Args:
        level (int): Difficulty level in [1, 10].
        config (CarverConfig): Quota settings; defaults if None.

    Returns:
        int: `base_holes + holes_step * (level - 1)`.
    """
    validate_level(level)
    config = config or CarverConfig()
    return config.base_holes + config.holes_step * (level - MIN_LEVEL)


class PuzzleCarver:
    """Entry point that produces a `Puzzle` for a difficulty level."""

    def __init__(self, config: Optional[Config] = None, rng: Optional[random.Random] = None):
        self.config = config or Config()
        self.rng = rng or random.Random(self.config.seed)
        self.solver = GridSolver(self.config.solver, rng=self.rng)

        carver_config = self.config.carver
        carver_cls = CARVERS.get(carver_config.strategy)
        top_quota = removal_quota(MAX_LEVEL, carver_config)
        if top_quota > carver_cls.max_holes:
            raise ValueError(
                f"Carver `{carver_config.strategy}` supports at most "
                f"{carver_cls.max_holes} holes, level {MAX_LEVEL} asks for {top_quota}"
            )
        args = carver_cls.build_args(carver_config.strategy_args)
        self.carver: Carver = carver_cls(
            self.solver, self.rng, max_attempts=carver_config.max_attempts, **args
        )

    def removal_quota(self, level: int) -> int:
        return removal_quota(level, self.config.carver)

    def create_puzzle(self, level: int) -> Puzzle:
        """
        Create a puzzle and its answer key for `level`.

        Args:
            level (int): Difficulty level in [1, 10]; higher clears more cells.

        Returns:
            Puzzle: puzzle grid, solution grid and given positions.

        Raises:
            ValueError: If `level` is not an int in [1, 10].
            GenerationError: If generation gave up; retrying may succeed.
        """
        holes = self.removal_quota(level)
        puzzle_grid, solution_grid = self.carver.carve(holes)
        givens = frozenset(
            (r, c) for r, c in all_positions() if puzzle_grid[r][c] != EMPTY
        )
        logger.info(
            f"Created level {level} puzzle with {holes} empty cells "
            f"({self.config.carver.strategy} carver)"
        )
        return Puzzle(
            level=level,
            puzzle_grid=puzzle_grid,
            solution_grid=solution_grid,
            givens=givens,
        )


def create_puzzle(level: int) -> Puzzle:
    """Create a puzzle for `level` with the default settings."""
    return PuzzleCarver().create_puzzle(level)
