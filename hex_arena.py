# hex_arena.py
#
# Pit two black-box player modules against each other.
# A player module exposes choose_move(game, rng, ...) -> (row, col).

import argparse
import csv
import importlib
import inspect
import logging
import random
import time
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, Dict, List, Optional

from hex_evaluator import evaluate_hex
from hex_game import HexGame
from hex_types import Color, Move

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "game_index", "seed", "size", "trials",
    "player_black", "player_white",
    "winner_color", "winner_player", "termination",
    "num_moves", "duration", "moves",
]


@dataclass
class GameRecord:
    winner: str                 # 'Black', 'White' or 'Draw'
    termination: str            # 'connection', 'illegal_move', 'error' or 'full_board'
    moves: List[Move] = field(default_factory=list)
    duration: float = 0.0


@dataclass
class MatchSummary:
    games: int = 0
    draws: int = 0
    p1_total: int = 0
    p2_total: int = 0
    p1_black: int = 0
    p1_white: int = 0
    p2_black: int = 0
    p2_white: int = 0
    records: List[GameRecord] = field(default_factory=list)


def load_player(module_name: str) -> ModuleType:
    """Dynamically import a player module by name."""
    try:
        mod = importlib.import_module(module_name)
    except ImportError as e:
        raise SystemExit(f"Cannot import player module '{module_name}': {e}")
    if not hasattr(mod, "choose_move"):
        raise SystemExit(f"Player module '{module_name}' lacks a choose_move() function.")
    return mod


def _call_choose_move(
    mod: ModuleType,
    game: HexGame,
    rng: random.Random,
    trials: Optional[int],
    workers: int,
) -> Move:
    """
    Call mod.choose_move with compatible args.
    (game, rng) are always passed positionally; trials/workers only go to
    players whose choose_move accepts them.
    """
    params = inspect.signature(mod.choose_move).parameters
    kwargs: Dict[str, Any] = {}
    if trials is not None and "trials" in params:
        kwargs["trials"] = trials
    if workers > 1 and "workers" in params:
        kwargs["workers"] = workers
    return mod.choose_move(game, rng, **kwargs)


# -----------------------------------------------------------
# One complete game of Hex between two black-box player mods
# -----------------------------------------------------------

def play_single_game(
    size: int,
    black_mod: ModuleType,
    white_mod: ModuleType,
    rng: random.Random,
    trials: Optional[int] = None,
    workers: int = 1,
) -> GameRecord:
    game = HexGame(size)
    start = time.perf_counter()

    def finish(winner: str, termination: str) -> GameRecord:
        return GameRecord(winner, termination, list(game.moves), time.perf_counter() - start)

    while True:
        black_turn = game.get_current_player() == 1
        to_move_mod = black_mod if black_turn else white_mod
        mover, other = ('Black', 'White') if black_turn else ('White', 'Black')

        try:
            r, c = _call_choose_move(to_move_mod, game, rng, trials, workers)
        except Exception as err:                # crash = immediate loss
            print(f"⚠️  {mover} program raised {err.__class__.__name__}: {err}")
            return finish(other, "error")

        outcome = game.play(r, c)
        if outcome.is_error:
            print(f"⚠️  {mover} played illegal move {(r, c)} ({outcome}). {other} wins.")
            return finish(other, "illegal_move")
        if outcome.is_win:
            return finish(mover, "connection")
        if not game.get_free_vertices():
            return finish('Draw', "full_board")  # cannot happen in Hex


def verify_record(size: int, record: GameRecord) -> None:
    """Replay a connection win from scratch and make sure it ends the same way."""
    if record.termination != "connection":
        return
    winner, idx = evaluate_hex(size, record.moves)
    expected = Color.BLACK if record.winner == 'Black' else Color.WHITE
    if winner is not expected or idx != len(record.moves):
        raise RuntimeError(f"replay disagrees: {winner} at move {idx}, recorded {record.winner} "
                           f"after {len(record.moves)} moves")


def _open_csv_writer(path: str):
    f = open(path, "w", newline="")
    writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
    writer.writeheader()
    return writer, f


# -----------------------------------------------------------
# Match runner
# -----------------------------------------------------------

def run_match(
    size: int,
    games: int,
    player1_mod: ModuleType,
    player2_mod: ModuleType,
    mode: str,
    seed: int,
    trials: Optional[int] = None,
    workers: int = 1,
    csv_path: Optional[str] = None,
    verify: bool = False,
) -> MatchSummary:
    if mode not in ("p1_black", "p2_black", "alternate"):
        raise ValueError("mode must be one of: p1_black, p2_black, alternate")

    rng = random.Random(seed)
    summary = MatchSummary(games=games)

    writer, csv_file = _open_csv_writer(csv_path) if csv_path else (None, None)
    try:
        for g in range(1, games + 1):
            # decide colours
            p1_is_black = mode == "p1_black" or (mode == "alternate" and g % 2 == 1)
            black_mod, white_mod = (player1_mod, player2_mod) if p1_is_black else (player2_mod, player1_mod)

            record = play_single_game(size, black_mod, white_mod, rng, trials=trials, workers=workers)
            if verify:
                verify_record(size, record)
            summary.records.append(record)
            logger.info("game %d/%d: %s wins by %s after %d moves", g, games,
                        record.winner, record.termination, len(record.moves))

            # bookkeeping
            if record.winner == 'Black':
                if p1_is_black:
                    summary.p1_total += 1; summary.p1_black += 1
                else:
                    summary.p2_total += 1; summary.p2_black += 1
            elif record.winner == 'White':
                if p1_is_black:
                    summary.p2_total += 1; summary.p2_white += 1
                else:
                    summary.p1_total += 1; summary.p1_white += 1
            else:
                summary.draws += 1

            if writer is not None:
                winner_mod = {'Black': black_mod, 'White': white_mod}.get(record.winner)
                writer.writerow({
                    "game_index": g,
                    "seed": seed,
                    "size": size,
                    "trials": "" if trials is None else trials,
                    "player_black": black_mod.__name__,
                    "player_white": white_mod.__name__,
                    "winner_color": record.winner,
                    "winner_player": winner_mod.__name__ if winner_mod is not None else "",
                    "termination": record.termination,
                    "num_moves": len(record.moves),
                    "duration": f"{record.duration:.3f}",
                    "moves": ";".join(f"{r},{c}" for r, c in record.moves),
                })
    finally:
        if csv_file is not None:
            csv_file.close()

    return summary


def print_report(summary: MatchSummary, mode: str) -> None:
    games = summary.games

    def pct(x: int) -> str:
        return f"{(100.0 * x / games):.1f}%" if games else "-"

    per_color = games // 2 if mode == 'alternate' else games
    print("\n=== Results ===")
    print(f"Total games      : {games}")
    print(f"Draws            : {summary.draws} ({pct(summary.draws)})")
    print(f"Player1 wins     : {summary.p1_total} ({pct(summary.p1_total)})")
    print(f"Player2 wins     : {summary.p2_total} ({pct(summary.p2_total)})")
    print("----- split by color -----")
    print(f"Player1 as Black : {summary.p1_black} / {per_color} ({pct(summary.p1_black)})")
    print(f"Player1 as White : {summary.p1_white} / {per_color} ({pct(summary.p1_white)})")
    print(f"Player2 as Black : {summary.p2_black} / {per_color} ({pct(summary.p2_black)})")
    print(f"Player2 as White : {summary.p2_white} / {per_color} ({pct(summary.p2_white)})")


# -----------------------------------------------------------
# Command-line interface
# -----------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Hex arena: pit two black-box players against each other")
    ap.add_argument("--player1", default="monte_carlo_player", help="module name for player 1 (importable)")
    ap.add_argument("--player2", default="random_player", help="module name for player 2 (importable)")
    ap.add_argument("--size", type=int, default=7, help="playable board size n (n×n)")
    ap.add_argument("--games", type=int, default=10, help="number of games to play")
    ap.add_argument("--mode", choices=["p1_black", "p2_black", "alternate"],
                    default="alternate", help="color assignment scheme")
    ap.add_argument("--seed", type=int, default=42, help="RNG seed for reproducibility")
    ap.add_argument("--trials", type=int, default=None,
                    help="Monte Carlo playouts per candidate (default: $HEX_MC_TRIALS or 1000)")
    ap.add_argument("--workers", type=int, default=1, help="processes per Monte Carlo search")
    ap.add_argument("--csv", default=None, help="write one row per game to this CSV file")
    ap.add_argument("--verify", action="store_true", help="replay every win to double-check it")
    ap.add_argument("--verbose", action="store_true", help="log every game and every search")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.size <= 2:
        ap.error("--size must be greater than 2")

    p1 = load_player(args.player1)
    p2 = load_player(args.player2)

    summary = run_match(
        size=args.size,
        games=args.games,
        player1_mod=p1,
        player2_mod=p2,
        mode=args.mode,
        seed=args.seed,
        trials=args.trials,
        workers=args.workers,
        csv_path=args.csv,
        verify=args.verify,
    )
    print_report(summary, args.mode)
    if args.csv:
        print(f"Wrote: {args.csv}")


if __name__ == "__main__":
    main()

# run with: python3 hex_arena.py --player1 monte_carlo_player --player2 random_player --size 5 --games 10 --trials 200
