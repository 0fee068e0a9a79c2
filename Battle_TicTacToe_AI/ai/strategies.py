"""Move-selection strategies sharing one interface, chosen by difficulty."""

import random

from . import search_heuristic, search_minimax, search_random


class Strategy:
    def __init__(self, ai_symbol, human_symbol):
        self.ai_symbol = ai_symbol
        self.human_symbol = human_symbol

    def select_move(self, board):
        """Return (row, col) for the AI, or None if no move is available."""
        raise NotImplementedError


class RandomStrategy(Strategy):
    def __init__(self, ai_symbol, human_symbol, rng=None):
        super().__init__(ai_symbol, human_symbol)
        self.rng = rng or random.Random()

    def select_move(self, board):
        return search_random.choose_move(board, rng=self.rng)


class HeuristicStrategy(RandomStrategy):
    """Win now, else block, else random."""

    def select_move(self, board):
        return search_heuristic.choose_move(board, self.ai_symbol, self.human_symbol, rng=self.rng)


class MinimaxStrategy(Strategy):
    def __init__(self, ai_symbol, human_symbol, depth=None, prune=True, stats=None):
        super().__init__(ai_symbol, human_symbol)
        self.depth = depth
        self.prune = prune
        self.stats = stats

    def select_move(self, board):
        return search_minimax.choose_move(
            board,
            self.ai_symbol,
            self.human_symbol,
            depth=self.depth,
            prune=self.prune,
            stats=self.stats,
        )


def make_strategy(difficulty, ai_symbol, human_symbol, rng=None, depth=None, stats=None):
    """Map a difficulty label to a strategy; unknown labels play randomly."""
    if difficulty == "Medium":
        return HeuristicStrategy(ai_symbol, human_symbol, rng=rng)
    if difficulty in ("Hard", "Impossible"):
        # Both labels share the same search and depth cap.
        return MinimaxStrategy(ai_symbol, human_symbol, depth=depth, stats=stats)
    return RandomStrategy(ai_symbol, human_symbol, rng=rng)
