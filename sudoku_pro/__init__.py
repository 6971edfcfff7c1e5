# -*- coding: utf-8 -*-
"""Sudoku Pro: puzzle engine and game session."""

from sudoku_pro.engine import (
    EMPTY,
    GenerationError,
    Puzzle,
    check_win,
    create_puzzle,
    generate_complete_grid,
    is_placement_legal,
)

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "GenerationError",
    "Puzzle",
    "check_win",
    "create_puzzle",
    "generate_complete_grid",
    "is_placement_legal",
]
