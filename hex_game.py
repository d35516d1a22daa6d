# hex_game.py
#
# Rules engine: one board, one turn flag, one mutating operation (play).
#
#   game = HexGame(7)
#   outcome = game.play(3, 3)     # Outcome.NO_WIN, now White to move
#
# play() reports bad input (out of bounds / occupied) through its return
# value and leaves the game untouched, so a caller can simply ask again.

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from hex_board import HexBoard
from hex_types import Color, Move, Outcome


class GameOverError(ValueError):
    pass


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    BLACK_WON = "black_won"
    WHITE_WON = "white_won"


@dataclass
class GameState:
    black_to_move: bool = True
    status: GameStatus = GameStatus.IN_PROGRESS
    moves: List[Move] = field(default_factory=list)  # successful plays, oldest first


class HexGame:
    def __init__(self, dim: int = 11):
        self.board = HexBoard(dim)
        self.state = GameState()

    def reset_board(self) -> None:
        self.board.reset_board()
        self.state = GameState()

    # ---------- turn information ----------

    def get_current_player(self) -> int:
        return 1 if self.state.black_to_move else 2

    def get_current_player_symbol(self) -> Color:
        return Color.BLACK if self.state.black_to_move else Color.WHITE

    def get_playable_dim(self) -> int:
        return self.board.get_playable_dim()

    def get_free_vertices(self) -> List[int]:
        return self.board.get_free_vertices()

    @property
    def moves(self) -> List[Move]:
        return self.state.moves

    def is_over(self) -> bool:
        return self.state.status is not GameStatus.IN_PROGRESS

    def winner(self) -> Optional[Color]:
        if self.state.status is GameStatus.BLACK_WON:
            return Color.BLACK
        if self.state.status is GameStatus.WHITE_WON:
            return Color.WHITE
        return None

    # ---------- the move ----------

    def play(self, row: int, col: int) -> Outcome:
        """
        Try to place the current player's stone at relative (row, col).

        Returns OUT_OF_BOUNDS / ALREADY_OCCUPIED without touching the game,
        BLACK_WINS / WHITE_WINS when the move connects the mover's walls
        (the turn is not passed), and NO_WIN otherwise.
        Raises GameOverError if the game already has a winner.
        """
        if self.is_over():
            raise GameOverError("Game finished; call reset_board() first.")

        board = self.board
        if not board.in_bounds(row, col):
            return Outcome.OUT_OF_BOUNDS

        vertex = board.row_col_to_vertex(row, col)
        if board.get_vertex_label(vertex) is not Color.EMPTY:
            return Outcome.ALREADY_OCCUPIED

        me = self.get_current_player_symbol()
        board.set_vertex_label(vertex, me)
        self.state.moves.append((row, col))

        if board.is_victory(me):
            self.state.status = GameStatus.BLACK_WON if me is Color.BLACK else GameStatus.WHITE_WON
            return Outcome.win_for(me)

        self.state.black_to_move = not self.state.black_to_move
        return Outcome.NO_WIN

    def __repr__(self) -> str:
        return (f"HexGame(dim={self.get_playable_dim()}, moves={len(self.state.moves)}, "
                f"status={self.state.status.value})")
