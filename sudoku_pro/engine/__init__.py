# -*- coding: utf-8 -*-
"""Puzzle engine: grid filler, carver, win check and game session."""
from sudoku_pro.common.constants import EMPTY
from sudoku_pro.engine.carver import (
    CARVERS,
    Carver,
    Puzzle,
    PuzzleCarver,
    create_puzzle,
    removal_quota,
)
from sudoku_pro.engine.game import GameSession, format_time
from sudoku_pro.engine.grid import Grid, is_placement_legal
from sudoku_pro.engine.judge import SudokuJudge, check_win
from sudoku_pro.engine.solver import GenerationError, GridSolver, generate_complete_grid

__all__ = [
    "CARVERS",
    "EMPTY",
    "Carver",
    "GameSession",
    "GenerationError",
    "Grid",
    "GridSolver",
    "Puzzle",
    "PuzzleCarver",
    "SudokuJudge",
    "check_win",
    "create_puzzle",
    "format_time",
    "generate_complete_grid",
    "is_placement_legal",
    "removal_quota",
]
