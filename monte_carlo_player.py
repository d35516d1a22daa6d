# monte_carlo_player.py
#
# Strategy:
#   1. Enumerate every free cell of the board.
#   2. For each cell, pretend we play it and finish the game `trials` times
#      with uniformly random moves, counting how often we win.
#   3. Play the cell with the most wins (first one on ties).
#
# A random finish fills the whole board: Hex cannot end in a draw, so the
# full board always has exactly one winner and one search settles it.
# Playouts run on a private scratch board that is reset cell by cell between
# trials instead of being rebuilt.

import logging
import multiprocessing as mp
import os
import random
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from hex_board import HexBoard
from hex_game import HexGame
from hex_types import Color, Move

logger = logging.getLogger(__name__)

DEFAULT_TRIALS = int(os.environ.get("HEX_MC_TRIALS", "1000"))

ProgressFn = Callable[[int, int], None]


@dataclass
class MonteCarloStats:
    board_size: int
    player: str          # "Black" or "White"
    candidates: int
    trials: int
    playouts: int        # candidates * trials
    best_vertex: int
    best_wins: int
    workers: int
    duration: float      # seconds


_last_stats: Optional[MonteCarloStats] = None


def get_last_stats() -> Optional[MonteCarloStats]:
    """
    Return statistics from the last call to choose_move, or None if
    choose_move has not been called yet.
    """
    return _last_stats


def select_best(free: List[int], scores: np.ndarray) -> Optional[int]:
    """
    First vertex with the strictly highest score, or None when nothing won
    a single playout.
    """
    if len(free) == 0:
        return None
    best = int(np.argmax(scores))
    if scores[best] <= 0:
        return None
    return free[best]


class MonteCarloEvaluator:
    """
    Scores every free vertex of a board by random playouts.

    Parameters
    ----------
    dim      : playable side length of the boards this evaluator will see
    trials   : playouts per candidate (HEX_MC_TRIALS by default)
    rng      : random.Random used for shuffling; a fresh unseeded one if None
    workers  : >1 spreads candidates over a process pool
    progress : optional callback(done, total) after each candidate
    """

    def __init__(
        self,
        dim: int,
        trials: Optional[int] = None,
        rng: Optional[random.Random] = None,
        workers: int = 1,
        progress: Optional[ProgressFn] = None,
    ):
        if trials is None:
            trials = DEFAULT_TRIALS
        if trials <= 0:
            raise ValueError("Number of trials is not positive.")
        if workers <= 0:
            raise ValueError("Number of workers is not positive.")
        self.trials = trials
        self.rng = rng if rng is not None else random.Random()
        self.workers = workers
        self.progress = progress
        self.scratch = HexBoard(dim)

    def simulate(self, board: HexBoard, mover: Color, candidate: int, free: List[int]) -> int:
        """
        Number of random finishes (out of self.trials) that `mover` wins
        after playing `candidate` on `board`.

        The opponent moves first in every finish. On return every vertex of
        `free` is EMPTY again on the scratch board.
        """
        opponent = mover.opponent()
        pool = [v for v in free if v != candidate]
        scratch = self.scratch

        scratch.clone_board_state(board)
        scratch.set_vertex_label(candidate, mover)

        wins = 0
        for _ in range(self.trials):
            self.rng.shuffle(pool)
            for j, v in enumerate(pool):
                scratch.set_vertex_label(v, opponent if j % 2 == 0 else mover)

            if scratch.is_victory(mover):
                wins += 1

            # undo the finish but keep the candidate
            for v in pool:
                scratch.set_vertex_label(v, Color.EMPTY)

        scratch.set_vertex_label(candidate, Color.EMPTY)
        return wins

    def evaluate(self, board: HexBoard, mover: Color) -> Tuple[List[int], np.ndarray]:
        """
        Return (free, scores): the free vertices in row-major order and the
        win count of each one.
        """
        free = board.get_free_vertices()
        if not free:
            raise ValueError("No legal moves left (board is full).")

        if self.workers > 1 and len(free) > 1:
            return free, self._evaluate_parallel(board, mover, free)

        scores = np.zeros(len(free), dtype=np.int64)
        for i, v in enumerate(free):
            scores[i] = self.simulate(board, mover, v, free)
            logger.debug("candidate %s: %d/%d wins", board.vertex_to_row_col(v), scores[i], self.trials)
            if self.progress is not None:
                self.progress(i + 1, len(free))
        return free, scores

    def best_move(self, board: HexBoard, mover: Color) -> Optional[int]:
        """Best vertex for `mover`, or None if every candidate scored zero."""
        free, scores = self.evaluate(board, mover)
        return select_best(free, scores)

    def _evaluate_parallel(self, board: HexBoard, mover: Color, free: List[int]) -> np.ndarray:
        # One task per candidate, each with its own scratch board and seed.
        # Seeds are drawn in candidate order, so a seeded run gives the same
        # scores for any worker count above one.
        labels = [board.get_vertex_label(v) for v in range(board.get_nodes())]
        tasks: List[Dict[str, Any]] = [
            {
                "dim": board.get_playable_dim(),
                "labels": labels,
                "mover": mover,
                "candidate": v,
                "free": free,
                "trials": self.trials,
                "seed": self.rng.getrandbits(64),
            }
            for v in free
        ]

        # spawn behaves the same on every platform
        ctx = mp.get_context("spawn")
        scores = np.zeros(len(free), dtype=np.int64)
        with ctx.Pool(processes=min(self.workers, len(tasks))) as pool:
            for i, wins in enumerate(pool.imap(_simulate_task, tasks)):
                scores[i] = wins
                if self.progress is not None:
                    self.progress(i + 1, len(free))
        return scores


def _simulate_task(payload: Dict[str, Any]) -> int:
    """Worker entry point: rebuild the position and score one candidate."""
    board = HexBoard(payload["dim"])
    for v, label in enumerate(payload["labels"]):
        board.set_vertex_label(v, label)

    evaluator = MonteCarloEvaluator(
        payload["dim"],
        trials=payload["trials"],
        rng=random.Random(payload["seed"]),
    )
    return evaluator.simulate(board, payload["mover"], payload["candidate"], payload["free"])


def choose_move(
    game: HexGame,
    rng: Optional[random.Random] = None,
    trials: Optional[int] = None,
    workers: int = 1,
) -> Move:
    """
    Parameters
    ----------
    game    : HexGame to move in (not modified)
    rng     : optional random.Random instance supplied by the arena
    trials  : playouts per candidate (HEX_MC_TRIALS by default)
    workers : processes used to score candidates
    """
    global _last_stats

    start = time.perf_counter()
    mover = game.get_current_player_symbol()
    evaluator = MonteCarloEvaluator(game.get_playable_dim(), trials, rng, workers)

    free, scores = evaluator.evaluate(game.board, mover)
    vertex = select_best(free, scores)
    if vertex is None:
        # every finish was lost; any cell is as good as another
        logger.info("no candidate won a playout, falling back to the first free cell")
        vertex = free[0]

    duration = time.perf_counter() - start
    _last_stats = MonteCarloStats(
        board_size=game.get_playable_dim(),
        player="Black" if mover is Color.BLACK else "White",
        candidates=len(free),
        trials=evaluator.trials,
        playouts=len(free) * evaluator.trials,
        best_vertex=vertex,
        best_wins=int(scores[free.index(vertex)]),
        workers=workers,
        duration=duration,
    )

    move = game.board.vertex_to_row_col(vertex)
    logger.info("%s plays %s (%d/%d wins, %.2fs)", _last_stats.player, move,
                _last_stats.best_wins, evaluator.trials, duration)
    return move
