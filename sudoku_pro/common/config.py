# -*- coding: utf-8 -*-
"""Configs for the puzzle engine and game session."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from omegaconf import OmegaConf

from sudoku_pro.common.constants import (
    MAX_HOLES,
    MAX_LEVEL,
    MAX_MISTAKES,
    MIN_GIVENS,
    MIN_LEVEL,
)
from sudoku_pro.utils.log import get_logger, set_log_level

logger = get_logger(__name__)


@dataclass
class SolverConfig:
    """Configs for the randomized backtracking filler."""

    # placement attempts allowed per fill before the attempt is abandoned
    max_steps: int = 200_000
    # extra fill attempts after a budget overrun, each with fresh randomness
    max_retries: int = 3


@dataclass
class CarverConfig:
    """Configs for turning a solution grid into a puzzle."""

    # removal strategy name, see `sudoku_pro.engine.carver.CARVERS`
    strategy: str = "random"
    # empty cells at level 1; each further level adds `holes_step`
    base_holes: int = 28
    holes_step: int = 4
    # redraws (random) or regenerated grids (unique) before giving up
    max_attempts: int = 100
    strategy_args: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GameConfig:
    """Configs for a game session."""

    level: int = MIN_LEVEL
    max_mistakes: int = MAX_MISTAKES


@dataclass
class LogConfig:
    """Configs for logger."""

    level: str = "INFO"  # default log level (DEBUG, INFO, WARNING, ERROR)


@dataclass
class Config:
    """Global Configuration"""

    # seed for the engine random source; None means fresh randomness
    seed: Optional[int] = None

    solver: SolverConfig = field(default_factory=SolverConfig)
    carver: CarverConfig = field(default_factory=CarverConfig)
    game: GameConfig = field(default_factory=GameConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def save(self, config_path: str) -> None:
        """Save config to file."""
        with open(config_path, "w", encoding="utf-8") as f:
            OmegaConf.save(self, f)

    def _check_solver(self) -> None:
        if self.solver.max_steps <= 0:
            raise ValueError("solver.max_steps must be positive")
        if self.solver.max_retries < 0:
            raise ValueError("solver.max_retries must be non-negative")

    def _check_carver(self) -> None:
        # deferred import, the carver module imports this one
        from sudoku_pro.engine.carver import CARVERS

        carver = self.carver
        if carver.base_holes < 0 or carver.holes_step < 0:
            raise ValueError("carver.base_holes and carver.holes_step must be non-negative")
        top_quota = carver.base_holes + carver.holes_step * (MAX_LEVEL - MIN_LEVEL)
        if top_quota > MAX_HOLES:
            raise ValueError(
                f"carver quota at level {MAX_LEVEL} is {top_quota}, "
                f"which leaves fewer than {MIN_GIVENS} givens"
            )
        if carver.max_attempts <= 0:
            raise ValueError("carver.max_attempts must be positive")
        # raises ValueError for unknown names
        carver_cls = CARVERS.get(carver.strategy)
        if top_quota > carver_cls.max_holes:
            raise ValueError(
                f"carver `{carver.strategy}` supports at most {carver_cls.max_holes} holes, "
                f"level {MAX_LEVEL} asks for {top_quota}"
            )
        # unknown strategy_args raise ValueError as well
        carver_cls.build_args(carver.strategy_args)

    def _check_game(self) -> None:
        if not MIN_LEVEL <= self.game.level <= MAX_LEVEL:
            raise ValueError(f"game.level must be in [{MIN_LEVEL}, {MAX_LEVEL}]")
        if self.game.max_mistakes <= 0:
            raise ValueError("game.max_mistakes must be positive")

    def check_and_update(self) -> Config:
        """Check and update the config."""
        self._check_solver()
        self._check_carver()
        self._check_game()
        self.log.level = self.log.level.upper()
        set_log_level(self.log.level)
        logger.debug(f"Config checked: {OmegaConf.to_yaml(OmegaConf.structured(self))}")
        return self


def load_config(config_path: str) -> Config:
    """Load the configuration from the given path."""
    if not os.path.isfile(config_path):
        raise ValueError(f"Invalid configuration: config file `{config_path}` not found")
    schema = OmegaConf.structured(Config)
    try:
        yaml_config = OmegaConf.load(config_path)
        config = OmegaConf.merge(schema, yaml_config)
        return OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
