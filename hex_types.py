# hex_types.py
#
# Cell colors and play outcomes shared by the board, the win checker and the players.
#   - Black moves first and connects the Left and Right walls.
#   - White moves second and connects the Top and Bottom walls.

from enum import Enum
from typing import Tuple

Move = Tuple[int, int]


class Color(Enum):
    EMPTY = "."
    BLACK = "X"     # player 1, also the left/right margin columns
    WHITE = "O"     # player 2, also the top/bottom margin rows
    BLOCKED = "*"   # the four corners; nobody can use them

    @property
    def symbol(self) -> str:
        return self.value

    def opponent(self) -> "Color":
        if self is Color.BLACK:
            return Color.WHITE
        if self is Color.WHITE:
            return Color.BLACK
        raise ValueError(f"{self.name} is not a player color")

    def __str__(self) -> str:
        return self.value


class Outcome(Enum):
    """Result of one call to HexGame.play()."""
    ALREADY_OCCUPIED = -2
    OUT_OF_BOUNDS = -1
    NO_WIN = 0
    BLACK_WINS = 1
    WHITE_WINS = 2

    @property
    def is_error(self) -> bool:
        return self.value < 0

    @property
    def is_win(self) -> bool:
        return self.value > 0

    @classmethod
    def win_for(cls, color: Color) -> "Outcome":
        if color is Color.BLACK:
            return cls.BLACK_WINS
        if color is Color.WHITE:
            return cls.WHITE_WINS
        raise ValueError(f"{color.name} cannot win")

    def __str__(self) -> str:
        return _OUTCOME_MESSAGES[self]


_OUTCOME_MESSAGES = {
    Outcome.ALREADY_OCCUPIED: "Position already taken.",
    Outcome.OUT_OF_BOUNDS: "Position out of bounds.",
    Outcome.NO_WIN: "Successful play, no winner.",
    Outcome.BLACK_WINS: "Black wins!",
    Outcome.WHITE_WINS: "White wins!",
}
