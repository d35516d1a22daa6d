import random
import unittest
from collections import deque
from typing import Iterable, List, Set, Tuple

from hex_board import HexBoard
from hex_evaluator import evaluate_hex, is_victory, victory_anchors
from hex_types import Color

Coord = Tuple[int, int]

NEIGHBORS = [(-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0)]


# ----------------------------------------
# Independent verifier (BFS on coordinates)
# ----------------------------------------

def _neighbors(n: int, r: int, c: int) -> Iterable[Coord]:
    for dr, dc in NEIGHBORS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < n and 0 <= nc < n:
            yield (nr, nc)


def bfs_connected(grid: List[List[Color]], color: Color) -> bool:
    """Black joins column 0 to column n-1, White joins row 0 to row n-1."""
    n = len(grid)
    if color is Color.BLACK:
        starts = [(r, 0) for r in range(n) if grid[r][0] is color]
        reached = lambda rc: rc[1] == n - 1
    else:
        starts = [(0, c) for c in range(n) if grid[0][c] is color]
        reached = lambda rc: rc[0] == n - 1

    visited: Set[Coord] = set(starts)
    q = deque(starts)
    while q:
        cur = q.popleft()
        if reached(cur):
            return True
        for nxt in _neighbors(n, *cur):
            if nxt not in visited and grid[nxt[0]][nxt[1]] is color:
                visited.add(nxt)
                q.append(nxt)
    return False


def _paint(board: HexBoard, cells: Iterable[Coord], color: Color) -> None:
    for r, c in cells:
        board.set_vertex_label(board.row_col_to_vertex(r, c), color)


def _grid(board: HexBoard) -> List[List[Color]]:
    n = board.get_playable_dim()
    return [[board.get_vertex_label(board.row_col_to_vertex(r, c)) for c in range(n)] for r in range(n)]


def _random_fill(board: HexBoard, rng: random.Random, stones: int) -> None:
    n = board.get_playable_dim()
    cells = [(r, c) for r in range(n) for c in range(n)]
    rng.shuffle(cells)
    for i, (r, c) in enumerate(cells[:stones]):
        _paint(board, [(r, c)], Color.BLACK if i % 2 == 0 else Color.WHITE)


class VictoryDetectorTests(unittest.TestCase):
    def test_anchor_vertices(self) -> None:
        board = HexBoard(3)
        self.assertEqual(victory_anchors(board, Color.BLACK), (board.abs_pos(1, 0), board.abs_pos(3, 4)))
        self.assertEqual(victory_anchors(board, Color.WHITE), (board.abs_pos(0, 1), board.abs_pos(4, 3)))
        for src, dst in (victory_anchors(board, Color.BLACK), victory_anchors(board, Color.WHITE)):
            self.assertIsNot(board.get_vertex_label(src), Color.BLOCKED)
            self.assertIsNot(board.get_vertex_label(dst), Color.BLOCKED)
        with self.assertRaises(ValueError):
            victory_anchors(board, Color.EMPTY)

    def test_empty_board_has_no_winner(self) -> None:
        for dim in (3, 5, 8):
            board = HexBoard(dim)
            self.assertFalse(board.is_victory(Color.BLACK))
            self.assertFalse(board.is_victory(Color.WHITE))
            self.assertIsNone(board.winner())

    def test_black_wins_with_a_full_row(self) -> None:
        board = HexBoard(5)
        _paint(board, [(2, c) for c in range(5)], Color.BLACK)
        self.assertTrue(is_victory(board, Color.BLACK))
        self.assertFalse(is_victory(board, Color.WHITE))
        self.assertIs(board.winner(), Color.BLACK)

    def test_white_wins_with_a_full_column(self) -> None:
        board = HexBoard(5)
        _paint(board, [(r, 4) for r in range(5)], Color.WHITE)
        self.assertTrue(board.is_victory(Color.WHITE))
        self.assertFalse(board.is_victory(Color.BLACK))

    def test_wrong_color_does_not_count(self) -> None:
        board = HexBoard(4)
        _paint(board, [(1, c) for c in range(4)], Color.WHITE)
        self.assertFalse(board.is_victory(Color.BLACK))

    def test_anti_diagonal_connects_every_side(self) -> None:
        board = HexBoard(3)
        _paint(board, [(0, 2), (1, 1), (2, 0)], Color.BLACK)
        self.assertTrue(board.is_victory(Color.BLACK))

        board = HexBoard(6)
        _paint(board, [(i, 5 - i) for i in range(6)], Color.WHITE)
        self.assertTrue(board.is_victory(Color.WHITE))

    def test_main_diagonal_is_not_connected(self) -> None:
        # (r, c) and (r+1, c+1) are not neighbours on a hex board
        board = HexBoard(4)
        _paint(board, [(i, i) for i in range(4)], Color.BLACK)
        self.assertFalse(board.is_victory(Color.BLACK))

    def test_one_gap_breaks_the_path(self) -> None:
        board = HexBoard(5)
        _paint(board, [(2, c) for c in range(5) if c != 3], Color.BLACK)
        _paint(board, [(2, 3)], Color.WHITE)
        self.assertFalse(board.is_victory(Color.BLACK))

        # going around through the next row restores the connection
        _paint(board, [(3, 2), (3, 3)], Color.BLACK)
        self.assertTrue(board.is_victory(Color.BLACK))

    def test_black_row_along_the_white_wall_wins(self) -> None:
        board = HexBoard(3)
        _paint(board, [(0, 0), (0, 1), (0, 2)], Color.BLACK)
        _paint(board, [(2, 0), (2, 1)], Color.WHITE)
        self.assertTrue(board.is_victory(Color.BLACK))
        self.assertFalse(board.is_victory(Color.WHITE))

    def test_full_board_has_exactly_one_winner(self) -> None:
        rng = random.Random(2024)
        for dim in (3, 4, 5, 7, 9):
            for _ in range(25):
                board = HexBoard(dim)
                _random_fill(board, rng, dim * dim)
                wins = [board.is_victory(Color.BLACK), board.is_victory(Color.WHITE)]
                self.assertEqual(wins.count(True), 1, board.to_array())

    def test_matches_independent_bfs(self) -> None:
        rng = random.Random(7)
        for dim in (3, 4, 6, 8):
            for _ in range(40):
                board = HexBoard(dim)
                _random_fill(board, rng, rng.randrange(dim * dim + 1))
                grid = _grid(board)
                for color in (Color.BLACK, Color.WHITE):
                    self.assertEqual(board.is_victory(color), bfs_connected(grid, color))


class EvaluateHexTests(unittest.TestCase):
    def test_reports_winner_and_move_number(self) -> None:
        moves = [(1, 0), (0, 0), (1, 1), (0, 1), (1, 2)]
        self.assertEqual(evaluate_hex(3, moves), (Color.BLACK, 5))

    def test_white_win(self) -> None:
        moves = [(0, 0), (0, 2), (1, 0), (1, 1), (2, 2), (2, 0)]
        self.assertEqual(evaluate_hex(3, moves), (Color.WHITE, 6))

    def test_no_winner_yet(self) -> None:
        self.assertEqual(evaluate_hex(4, [(0, 0), (3, 3), (1, 1)]), (None, None))
        self.assertEqual(evaluate_hex(4, []), (None, None))

    def test_illegal_moves_raise(self) -> None:
        with self.assertRaises(ValueError):
            evaluate_hex(3, [(0, 0), (0, 0)])
        with self.assertRaises(ValueError):
            evaluate_hex(3, [(0, 3)])


if __name__ == "__main__":
    unittest.main()
