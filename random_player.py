# random_player.py
# A minimal Hex "AI": choose_move(game, rng) -> (row, col)

import random
from typing import Optional

from hex_game import HexGame
from hex_types import Move


def choose_move(game: HexGame, rng: Optional[random.Random] = None) -> Move:
    """Return a random free cell.
    Parameters
    ----------
    game   : HexGame to move in (not modified)
    rng    : optional random.Random instance for reproducibility
    """
    if rng is None:
        rng = random
    available = game.get_free_vertices()

    if not available:
        raise ValueError("Board is full – no legal moves remain.")
    return game.board.vertex_to_row_col(rng.choice(available))
