# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum, EnumMeta

# board geometry

GRID_SIZE = 9
BLOCK_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
EMPTY = 0
VALUES = tuple(range(1, GRID_SIZE + 1))

# difficulty

MIN_LEVEL = 1
MAX_LEVEL = 10
# a 9x9 puzzle needs at least 17 givens to have a unique solution
MIN_GIVENS = 17
MAX_HOLES = CELL_COUNT - MIN_GIVENS

# game rules

MAX_MISTAKES = 3

# env var names
LOG_LEVEL_ENV_VAR = "SUDOKU_PRO_LOG_LEVEL"  # global log level
CONFIG_PATH_ENV_VAR = "SUDOKU_PRO_CONFIG"  # default config file for the launcher


# enumerate types


class CaseInsensitiveEnumMeta(EnumMeta):
    name_aliases = {}

    def __getitem__(cls, name):
        name = cls.name_aliases.get(name.lower(), name)
        return super().__getitem__(name.upper())

    def __getattr__(cls, name):
        if not name.startswith("_"):
            return cls[name.upper()]
        return super().__getattr__(name)

    def __call__(cls, value, *args, **kwargs):
        value = cls.name_aliases.get(value.lower(), value)
        return super().__call__(value.lower(), *args, **kwargs)


class CaseInsensitiveEnum(Enum, metaclass=CaseInsensitiveEnumMeta):
    pass


class GameStatus(CaseInsensitiveEnum):
    """Game Status."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"  # mistake cap reached


class MoveResult(CaseInsensitiveEnum):
    """Outcome of placing a value on the board."""

    CORRECT = "correct"
    MISTAKE = "mistake"
    REJECTED = "rejected"  # given cell, finished game or no-op edit
