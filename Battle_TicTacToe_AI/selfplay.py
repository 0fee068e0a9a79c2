"""Strategy-vs-strategy arena: play many games and summarize the results."""

from __future__ import annotations

import argparse
import random
import statistics
from collections import Counter
from typing import List, Optional, Tuple

try:
    from Board import Board, other_symbol
    from GameConfig import DIFFICULTIES, SUPPORTED_SIZES
    from engine import referee, rules
    from ai import strategies
    from utils.logger import log_event, silent
except ImportError:
    from .Board import Board, other_symbol
    from .GameConfig import DIFFICULTIES, SUPPORTED_SIZES
    from .engine import referee, rules
    from .ai import strategies
    from .utils.logger import log_event, silent


def play_game(board_size: int, x_strategy, o_strategy, logger=silent) -> Tuple[Optional[str], List[tuple]]:
    """
    Play one game on a fresh board, X moving first.
    Returns (winning symbol or None for a draw, list of (symbol, move)).
    """
    board = Board(size=board_size)
    players = {"X": x_strategy, "O": o_strategy}
    to_play = "X"
    moves: List[tuple] = []

    while True:
        move = players[to_play].select_move(board)
        if move is None:
            logger("Result: Draw (no legal move)")
            return None, moves
        referee.check_move(move, board)
        board.place(*move, to_play)
        moves.append((to_play, move))
        logger(f"Move {len(moves)}: {to_play} {move}")

        if rules.check_win(board, to_play):
            logger(f"Winner: {to_play}")
            return to_play, moves
        if rules.is_full(board):
            logger("Result: Draw (board full)")
            return None, moves
        to_play = other_symbol(to_play)


def build_strategy(difficulty: str, symbol: str, rng: random.Random, stats=None):
    return strategies.make_strategy(difficulty, symbol, other_symbol(symbol), rng=rng, stats=stats)


def run_arena(
    board_size: int,
    first: str,
    second: str,
    games: int,
    *,
    swap: bool = False,
    seed: int | None = None,
    logger=silent,
    collect_stats: bool = False,
) -> dict:
    """
    Pit difficulty `first` against `second` for `games` games.
    `first` plays X unless `swap` alternates sides every other game.
    Wins are tallied per role ("first" / "second") so identical difficulties stay distinct.
    """
    rng = random.Random(seed)
    agent_wins = Counter()
    draws = 0
    lengths = []
    labels = {"first": first, "second": second}
    stats = {"first": [], "second": []} if collect_stats else None

    for game_index in range(games):
        x_agent, o_agent = ("second", "first") if swap and game_index % 2 == 1 else ("first", "second")
        x_strategy = build_strategy(labels[x_agent], "X", rng, stats=stats[x_agent] if stats else None)
        o_strategy = build_strategy(labels[o_agent], "O", rng, stats=stats[o_agent] if stats else None)

        winner, moves = play_game(board_size, x_strategy, o_strategy, logger=logger)
        lengths.append(len(moves))
        if winner is None:
            draws += 1
        else:
            agent_wins[x_agent if winner == "X" else o_agent] += 1

    summary = {
        "games": games,
        "wins": {"first": agent_wins["first"], "second": agent_wins["second"]},
        "draws": draws,
        "avg_length": statistics.mean(lengths) if lengths else 0.0,
    }
    if stats:
        summary["nodes_mean"] = {
            agent: statistics.mean(s["nodes"] for s in entries) if entries else 0.0
            for agent, entries in stats.items()
        }
    return summary


def main():
    parser = argparse.ArgumentParser(description="Tic-tac-toe strategy arena")
    parser.add_argument("--games", type=int, default=20, help="Number of games to play")
    parser.add_argument("--board-size", type=int, choices=SUPPORTED_SIZES, default=3, help="Board size")
    parser.add_argument("--first", choices=DIFFICULTIES, default="Hard", help="Difficulty for the first agent (plays X)")
    parser.add_argument("--second", choices=DIFFICULTIES, default="Easy", help="Difficulty for the second agent")
    parser.add_argument("--swap-sides", action="store_true", help="Alternate X/O between agents each game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for arena randomness (optional)")
    parser.add_argument("--verbose", action="store_true", help="Log every move")
    parser.add_argument("--collect-stats", action="store_true", help="Summarize minimax node counts")
    args = parser.parse_args()

    summary = run_arena(
        args.board_size,
        args.first,
        args.second,
        args.games,
        swap=args.swap_sides,
        seed=args.seed,
        logger=log_event if args.verbose else silent,
        collect_stats=args.collect_stats,
    )
    log_event(
        f"{summary['games']} games on {args.board_size}x{args.board_size}: "
        f"{args.first} (first) {summary['wins']['first']} wins, "
        f"{args.second} (second) {summary['wins']['second']} wins, "
        f"{summary['draws']} draws, avg length {summary['avg_length']:.1f}"
    )
    if "nodes_mean" in summary:
        labels = {"first": args.first, "second": args.second}
        for agent, nodes in summary["nodes_mean"].items():
            log_event(f"{labels[agent]} ({agent}): mean nodes per move {nodes:.0f}")


if __name__ == "__main__":
    main()
