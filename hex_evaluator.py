# hex_evaluator.py
#
# Win checker for the graph board.
#
# Each player's two walls are margin vertices already painted in that
# player's color, so a win is simply a same-colored path from one wall to
# the other. We search it with an iterative depth-first search starting at
# the wall vertex next to the top-left corner and stopping as soon as the
# matching vertex next to the bottom-right corner shows up as a neighbor.

from typing import List, Optional, Tuple

from hex_types import Color, Move


def victory_anchors(board, color: Color) -> Tuple[int, int]:
    """
    Return (src, dst) vertex ids for `color`.
      - Black: left wall (1, 0)  -> right wall (n-2, n-1)
      - White: top wall  (0, 1)  -> bottom wall (n-1, n-2)
    where n is the absolute board dimension (margins included).
    """
    n = board.get_abs_dim()
    pos = board.abs_pos
    if color is Color.BLACK:
        return pos(1, 0), pos(n - 2, n - 1)
    if color is Color.WHITE:
        return pos(0, 1), pos(n - 1, n - 2)
    raise ValueError(f"{color.name} has no walls")


def is_victory(board, color: Color) -> bool:
    """
    True iff a path of `color` connects that color's two walls.

    The destination itself is not checked against `color`; it is a wall
    vertex, so reaching it from a same-colored frontier vertex is enough.
    """
    src, dst = victory_anchors(board, color)

    visited: List[bool] = [False] * board.get_nodes()
    stack: List[int] = [src]

    while stack:
        top = stack.pop()
        for neigh in board.iter_neighbors(top):
            if neigh == dst:
                return True
            if not visited[neigh]:
                visited[neigh] = True
                if board.get_vertex_label(neigh) is color:
                    stack.append(neigh)

    return False


def evaluate_hex(size: int, moves: List[Move]) -> Tuple[Optional[Color], Optional[int]]:
    """
    Replay `moves` on an empty size×size board and report the first win.

    Black plays the odd moves (1st, 3rd, ...), White the even ones.
    Returns (winner, move_index) where move_index is the 1-based number of
    the winning move, or (None, None) if nobody has connected yet.
    Raises ValueError on an out-of-bounds or repeated move.
    """
    from hex_game import HexGame  # hex_game -> hex_board -> this module

    game = HexGame(size)
    for i, (r, c) in enumerate(moves, start=1):
        outcome = game.play(r, c)
        if outcome.is_error:
            raise ValueError(f"Move {i} is illegal: {(r, c)} ({outcome})")
        if outcome.is_win:
            return game.winner(), i
    return None, None


if __name__ == "__main__":
    # Black walks straight across row 1 of a 3x3 while White fills row 0.
    example = [(1, 0), (0, 0), (1, 1), (0, 1), (1, 2)]
    print("Example (3x3):", evaluate_hex(3, example))
