# -*- coding: utf-8 -*-
"""Launch the puzzle engine from the terminal."""
import argparse
import os
import sys
from typing import List, Optional, TextIO

from sudoku_pro.common.config import Config, load_config
from sudoku_pro.common.constants import (
    CONFIG_PATH_ENV_VAR,
    MAX_LEVEL,
    MIN_LEVEL,
    GameStatus,
    MoveResult,
)
from sudoku_pro.engine.carver import PuzzleCarver
from sudoku_pro.engine.game import GameSession
from sudoku_pro.engine.grid import format_grid
from sudoku_pro.engine.solver import GenerationError
from sudoku_pro.utils.log import get_logger

logger = get_logger(__name__)

PLAY_HELP = """Commands:
  <row> <col> <value>   place a value (rows and columns are 1-9)
  clear <row> <col>     empty a cell
  reset                 restore the puzzle grid
  reveal                show the solution
  new [level]           start a new game
  quit                  leave"""


def _load(config_path: Optional[str], seed: Optional[int] = None) -> Config:
    config_path = config_path or os.environ.get(CONFIG_PATH_ENV_VAR)
    config = load_config(config_path) if config_path else Config()
    if seed is not None:
        config.seed = seed
    return config.check_and_update()


def generate(args, out: TextIO = sys.stdout) -> int:
    config = _load(args.config, args.seed)
    level = args.level or config.game.level
    puzzle = PuzzleCarver(config).create_puzzle(level)
    print(f"Level {level}, {puzzle.empty_count} empty cells\n", file=out)
    print(format_grid(puzzle.puzzle_grid), file=out)
    if not args.no_solution:
        print("\nSolution:\n", file=out)
        print(format_grid(puzzle.solution_grid), file=out)
    return 0


def _status_line(game: GameSession) -> str:
    return (
        f"Level {game.level} | Mistakes {game.mistakes}/{game.max_mistakes} "
        f"| Time {game.elapsed_text()}"
    )


def play(args, stdin: TextIO = sys.stdin, out: TextIO = sys.stdout) -> int:
    config = _load(args.config, args.seed)
    game = GameSession(level=args.level, config=config)
    print(PLAY_HELP, file=out)
    print(f"\n{format_grid(game.board)}\n{_status_line(game)}", file=out)
    for line in stdin:
        parts = line.split()
        if not parts:
            continue
        command = parts[0].lower()
        try:
            if command in ("quit", "exit", "q"):
                break
            elif command == "reset":
                game.reset()
            elif command == "reveal":
                game.reveal()
            elif command == "new":
                try:
                    game.new_game(int(parts[1]) if len(parts) > 1 else None)
                except GenerationError as e:
                    logger.warning(f"Puzzle generation failed: {e}")
                    print("Could not create a new puzzle, the current game goes on.", file=out)
            elif command == "clear" and len(parts) == 3:
                if not game.clear(int(parts[1]) - 1, int(parts[2]) - 1):
                    print("That cell cannot be cleared.", file=out)
            elif len(parts) == 3:
                row, col, value = (int(p) for p in parts)
                result = game.place(row - 1, col - 1, value)
                if result == MoveResult.REJECTED:
                    print("That cell cannot be changed.", file=out)
                elif result == MoveResult.MISTAKE:
                    print("Wrong number!", file=out)
            else:
                print(PLAY_HELP, file=out)
                continue
        except ValueError as e:
            print(f"Invalid input: {e}", file=out)
            continue
        print(f"\n{format_grid(game.board)}\n{_status_line(game)}", file=out)
        if game.status == GameStatus.WON:
            print("Solved! Type `new` for another game or `quit`.", file=out)
        elif game.status == GameStatus.LOST:
            print("Game over, too many mistakes. Type `new` or `quit`.", file=out)
    return 0


def _level(value: str) -> int:
    level = int(value)
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise argparse.ArgumentTypeError(f"level must be in [{MIN_LEVEL}, {MAX_LEVEL}]")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sudoku-pro", description="Sudoku puzzle engine")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--level", type=_level, default=None, help="Difficulty level (1-10).")
    common.add_argument("--config", type=str, default=None, help="Path to a YAML config file.")
    common.add_argument("--seed", type=int, default=None, help="Seed for reproducible puzzles.")

    gen_parser = subparsers.add_parser("generate", parents=[common], help="Print a new puzzle.")
    gen_parser.add_argument(
        "--no-solution", action="store_true", default=False, help="Do not print the solution."
    )
    gen_parser.set_defaults(func=generate)

    play_parser = subparsers.add_parser("play", parents=[common], help="Play in the terminal.")
    play_parser.set_defaults(func=play)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except GenerationError as e:
        logger.error(f"Puzzle generation failed: {e}")
        return 1
    except ValueError as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
