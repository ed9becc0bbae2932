"""Counting properties of the exhaustive backtracking search."""

from pathlib import Path
import sys
import unittest
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nqueens_counter.board import create_board, place_queen
from nqueens_counter.exceptions import InvalidSizeError
from nqueens_counter.search import search, solve
from nqueens_counter.utils import board_is_consistent, conflicts, is_valid_solution

KNOWN_SOLUTIONS = {1: 1, 2: 0, 3: 0, 4: 2, 5: 10, 6: 4, 7: 40, 8: 92}


class SolveTests(unittest.TestCase):
    def test_solution_counts_match_reference(self):
        for size, expected in KNOWN_SOLUTIONS.items():
            with self.subTest(size=size):
                _, solutions = solve(size)
                self.assertEqual(solutions, expected)

    def test_four_queens_placements(self):
        self.assertEqual(solve(4), (38, 2))

    def test_single_queen(self):
        self.assertEqual(solve(1), (1, 1))

    def test_small_unsolvable_boards(self):
        # Row order 0..N-1: N=2 places 2 queens, N=3 places 5.
        self.assertEqual(solve(2), (2, 0))
        self.assertEqual(solve(3), (5, 0))

    def test_placements_lower_bound(self):
        for size in range(1, 9):
            with self.subTest(size=size):
                placements, solutions = solve(size)
                if solutions:
                    self.assertGreaterEqual(placements, solutions * size)

    def test_deterministic(self):
        for size in (5, 6, 8):
            with self.subTest(size=size):
                self.assertEqual(solve(size), solve(size))

    def test_recursion_limit_restored(self):
        original = sys.getrecursionlimit()
        with mock.patch("nqueens_counter.search._STACK_HEADROOM", original + 50):
            self.assertEqual(solve(4), (38, 2))
        self.assertEqual(sys.getrecursionlimit(), original)

    def test_invalid_size(self):
        for size in (0, -3):
            with self.subTest(size=size):
                with self.assertRaises(InvalidSizeError):
                    solve(size)


class SearchInvariantTests(unittest.TestCase):
    def test_board_restored_after_search(self):
        for size in range(1, 9):
            with self.subTest(size=size):
                board = create_board(size)
                search(board)
                self.assertEqual(board.current_column, 0)
                self.assertEqual(board.column_free, [True] * size)
                self.assertEqual(board.diag_up_free, [True] * (2 * size - 1))
                self.assertEqual(board.diag_down_free, [True] * (2 * size - 1))
                self.assertTrue(board_is_consistent(board))
                self.assertEqual(board.solutions, KNOWN_SOLUTIONS[size])

    def test_search_from_partial_placement(self):
        # Solutions of 6-Queens with a queen on row 1 of column 0.
        board = create_board(6)
        place_queen(board, 1)
        search(board)
        self.assertEqual(board.solutions, 1)
        self.assertEqual(board.current_column, 1)
        self.assertTrue(board_is_consistent(board))

    def test_counters_are_per_board(self):
        first = create_board(4)
        second = create_board(5)
        search(first)
        search(second)
        self.assertEqual((first.placements, first.solutions), (38, 2))
        self.assertEqual(second.solutions, 10)


class UtilsTests(unittest.TestCase):
    def test_conflicts(self):
        self.assertEqual(conflicts([1, 3, 0, 2]), 0)
        self.assertEqual(conflicts([0, 0]), 1)
        self.assertEqual(conflicts([0, 1, 2]), 3)

    def test_is_valid_solution(self):
        self.assertTrue(is_valid_solution([1, 3, 0, 2]))
        self.assertTrue(is_valid_solution([0]))
        self.assertFalse(is_valid_solution([]))
        self.assertFalse(is_valid_solution([0, 4, 1, 3]))
        self.assertFalse(is_valid_solution([0, 2, 4, 1, 3, 3]))

    def test_inconsistent_board_detected(self):
        board = create_board(4)
        place_queen(board, 2)
        board.column_free[2] = True
        self.assertFalse(board_is_consistent(board))


if __name__ == "__main__":
    unittest.main()
