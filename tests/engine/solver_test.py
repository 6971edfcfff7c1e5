import random
import unittest

from sudoku_pro.common.config import SolverConfig
from sudoku_pro.common.constants import EMPTY
from sudoku_pro.engine.grid import clone_grid, make_empty_grid
from sudoku_pro.engine.solver import GenerationError, GridSolver, generate_complete_grid
from tests.tools import CLASSIC_PUZZLE, SOLVED_GRID, assert_solution_grid


class TestGenerateCompleteGrid(unittest.TestCase):
    def test_generated_grid_is_valid(self):
        for _ in range(5):
            assert_solution_grid(generate_complete_grid())

    def test_generated_grid_is_fully_filled(self):
        grid = generate_complete_grid()
        for row in grid:
            self.assertNotIn(EMPTY, row)

    def test_generation_is_randomized(self):
        grids = [generate_complete_grid(random.Random(seed)) for seed in range(4)]
        self.assertGreater(len({str(g) for g in grids}), 1)

    def test_same_seed_same_grid(self):
        self.assertEqual(
            generate_complete_grid(random.Random(7)),
            generate_complete_grid(random.Random(7)),
        )

    def test_budget_exhaustion_raises_generation_error(self):
        # a fill needs at least 81 placements
        solver = GridSolver(SolverConfig(max_steps=10, max_retries=2), rng=random.Random(0))
        with self.assertLogs("sudoku_pro.engine.solver", level="WARNING") as logs:
            with self.assertRaises(GenerationError):
                solver.generate_complete_grid()
        self.assertEqual(sum("exceeded" in line for line in logs.output), 3)

    def test_generation_error_is_runtime_error(self):
        self.assertTrue(issubclass(GenerationError, RuntimeError))


class TestSolve(unittest.TestCase):
    def setUp(self):
        self.solver = GridSolver(rng=random.Random(0))

    def test_solve_classic_puzzle(self):
        puzzle = clone_grid(CLASSIC_PUZZLE)
        self.assertEqual(self.solver.solve(puzzle), SOLVED_GRID)
        # input untouched
        self.assertEqual(puzzle, CLASSIC_PUZZLE)

    def test_solve_empty_grid(self):
        assert_solution_grid(self.solver.solve(make_empty_grid()))

    def test_solve_contradictory_givens(self):
        puzzle = clone_grid(CLASSIC_PUZZLE)
        puzzle[0][2] = 5  # duplicate 5 in row 0
        self.assertIsNone(self.solver.solve(puzzle))
        self.assertEqual(self.solver.count_solutions(puzzle), 0)

    def test_solve_dead_end(self):
        puzzle = make_empty_grid()
        # (0, 0) sees 1..8 in its row and 9 in its column
        puzzle[0][1:9] = [1, 2, 3, 4, 5, 6, 7, 8]
        puzzle[1][0] = 9
        self.assertIsNone(self.solver.solve(puzzle))

    def test_solve_rejects_malformed_grid(self):
        with self.assertRaises(ValueError):
            self.solver.solve([[0] * 9])


class TestCountSolutions(unittest.TestCase):
    def setUp(self):
        self.solver = GridSolver(rng=random.Random(0))

    def test_unique_puzzle(self):
        self.assertEqual(self.solver.count_solutions(CLASSIC_PUZZLE), 1)

    def test_complete_grid_has_one_solution(self):
        self.assertEqual(self.solver.count_solutions(SOLVED_GRID), 1)

    def test_empty_grid_hits_limit(self):
        self.assertEqual(self.solver.count_solutions(make_empty_grid(), limit=5), 5)

    def test_swappable_rectangle_has_two_solutions(self):
        # rows 0 and 3 hold 6 7 and 7 6 in columns 3 and 4
        puzzle = clone_grid(SOLVED_GRID)
        for r, c in ((0, 3), (0, 4), (3, 3), (3, 4)):
            puzzle[r][c] = EMPTY
        self.assertEqual(self.solver.count_solutions(puzzle), 2)
        self.assertEqual(self.solver.count_solutions(puzzle, limit=10), 2)
        # the puzzle is left as it was
        self.assertEqual(puzzle[0][3], EMPTY)

    def test_limit(self):
        self.assertEqual(self.solver.count_solutions(make_empty_grid(), limit=1), 1)
        self.assertEqual(self.solver.count_solutions(make_empty_grid(), limit=0), 0)
