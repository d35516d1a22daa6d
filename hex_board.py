# hex_board.py
#
# A Hex board is a Graph with Color labels and integer weights.
#
# An n×n playable board is stored as an (n+2)×(n+2) grid: the extra ring is
# made of "margin" vertices that stand for the walls. For a 3×3 board:
#
#       * O O O *          * = BLOCKED corner
#       X . . . X          O = White wall (top/bottom)
#       X . . . X          X = Black wall (left/right)
#       X . . . X          . = playable cell
#       * O O O *
#
# Absolute coordinates address the whole grid, relative coordinates only the
# playable area (offset by one in both directions). Cell (r, c) touches
# (r, c±1), (r±1, c), (r+1, c-1) and (r-1, c+1).

from typing import List, Optional

import numpy as np

from hex_graph import Graph, GraphError, InvalidVertexError
from hex_types import Color, Move
import hex_evaluator

EDGE_WEIGHT = 1  # edges only mark adjacency; the weight is never read


class BoardSizeMismatchError(GraphError, ValueError):
    pass


class CoordinateMap:
    """Turns (row, col) into a vertex id, with an optional (row, col) offset."""

    def __init__(self, row_offset: int, col_offset: int, dim: int):
        self.ro = row_offset
        self.co = col_offset
        self.dim = dim

    def __call__(self, row: int, col: int) -> int:
        r, c = row + self.ro, col + self.co
        if not (0 <= r < self.dim and 0 <= c < self.dim):
            raise InvalidVertexError(f"({row}, {col}) is outside the {self.dim}x{self.dim} grid")
        return r * self.dim + c


class HexBoard(Graph):
    def __init__(self, dim: int):
        if dim <= 2:
            raise ValueError("Board size must be greater than 2.")
        super().__init__()
        self.rel_dim = dim          # playable side length
        self.abs_dim = dim + 2      # side length including the margins
        self.abs_pos = CoordinateMap(0, 0, self.abs_dim)
        self.rel_pos = CoordinateMap(1, 1, self.abs_dim)
        self.reset_board()

    # ---------- construction ----------

    def reset_board(self) -> None:
        """Rebuild an empty board: vertices, wall colors, corners and hex edges."""
        self.clear()
        n = self.abs_dim
        pos = self.abs_pos

        for _ in range(n * n):
            self.add_vertex(Color.EMPTY)

        for i in range(n):
            self.set_vertex_label(pos(0, i), Color.WHITE)
            self.set_vertex_label(pos(n - 1, i), Color.WHITE)
            self.set_vertex_label(pos(i, 0), Color.BLACK)
            self.set_vertex_label(pos(i, n - 1), Color.BLACK)

        # corners last, otherwise the walls above would repaint them
        for v in self.corner_vertices():
            self.set_vertex_label(v, Color.BLOCKED)

        for row in range(n):
            for col in range(n):
                if col < n - 1:
                    self.add_edge(pos(row, col), pos(row, col + 1), EDGE_WEIGHT)
                if row < n - 1:
                    self.add_edge(pos(row, col), pos(row + 1, col), EDGE_WEIGHT)
                if col > 0 and row < n - 1:
                    self.add_edge(pos(row, col), pos(row + 1, col - 1), EDGE_WEIGHT)

            # close the right-hand margin column
            if row < n - 1:
                self.add_edge(pos(row, n - 1), pos(row + 1, n - 1), EDGE_WEIGHT)

    # ---------- queries ----------

    def get_playable_dim(self) -> int:
        return self.rel_dim

    def get_abs_dim(self) -> int:
        return self.abs_dim

    def corner_vertices(self) -> List[int]:
        n = self.abs_dim
        return [self.abs_pos(0, 0), self.abs_pos(0, n - 1),
                self.abs_pos(n - 1, 0), self.abs_pos(n - 1, n - 1)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rel_dim and 0 <= col < self.rel_dim

    def row_col_to_vertex(self, row: int, col: int) -> int:
        """Relative (row, col) -> vertex id."""
        return self.rel_pos(row, col)

    def vertex_to_row_col(self, vertex: int) -> Move:
        """Vertex id -> relative (row, col). Margin vertices map outside [0, dim)."""
        self._validate_vertex(vertex)
        return vertex // self.abs_dim - 1, vertex % self.abs_dim - 1

    def get_free_vertices(self) -> List[int]:
        """Every EMPTY playable vertex, scanned row by row."""
        free = []
        for row in range(self.rel_dim):
            for col in range(self.rel_dim):
                v = self.rel_pos(row, col)
                if self.get_vertex_label(v) is Color.EMPTY:
                    free.append(v)
        return free

    def is_victory(self, color: Color) -> bool:
        return hex_evaluator.is_victory(self, color)

    def winner(self) -> Optional[Color]:
        for color in (Color.BLACK, Color.WHITE):
            if self.is_victory(color):
                return color
        return None

    def to_array(self) -> np.ndarray:
        """n×n int8 view of the playable area: 0 empty, 1 black, 2 white."""
        codes = {Color.EMPTY: 0, Color.BLACK: 1, Color.WHITE: 2}
        n = self.rel_dim
        out = np.zeros((n, n), dtype=np.int8)
        for row in range(n):
            for col in range(n):
                out[row, col] = codes[self.get_vertex_label(self.rel_pos(row, col))]
        return out

    # ---------- mutators ----------

    def clone_board_state(self, source: "HexBoard") -> None:
        """Copy every vertex label of `source` (same size) onto this board."""
        if self.get_nodes() != source.get_nodes():
            raise BoardSizeMismatchError(
                f"cannot copy a board with {source.get_nodes()} vertices "
                f"onto one with {self.get_nodes()}"
            )
        for v in range(source.get_nodes()):
            self.set_vertex_label(v, source.get_vertex_label(v))

    def __repr__(self) -> str:
        return f"HexBoard(dim={self.rel_dim})"
