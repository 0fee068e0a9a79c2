"""Depth-limited minimax with alpha-beta pruning ("Hard" and "Impossible")."""

import time

from . import move_selector

try:
    from engine import rules
except ImportError:
    from Battle_TicTacToe_AI.engine import rules


INF = 10 ** 9
WIN_SCORE = 10
DEPTH_BY_SIZE = {3: 6, 5: 4, 9: 2}
DEFAULT_DEPTH = 3  # unsupported board sizes


def depth_for_size(size):
    """Search depth cap keeping larger boards responsive."""
    return DEPTH_BY_SIZE.get(size, DEFAULT_DEPTH)


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, ai_symbol, human_symbol, max_depth, prune=True, stats=None):
        if ai_symbol == human_symbol:
            raise ValueError("ai_symbol and human_symbol must differ")
        self.ai_symbol = ai_symbol
        self.human_symbol = human_symbol
        self.max_depth = max_depth
        self.prune = prune
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None

    def choose_move(self, board):
        """
        Return the root move with the strictly greatest score, or None if the board is full.
        Ties go to the first move in enumeration order.
        """
        self.node_counter = 0
        self.start_time = time.time()

        best_score = -INF
        best_move = None
        for move, score in self.score_moves(board):
            if score > best_score:
                best_score = score
                best_move = move

        if self.stats_list is not None:
            self._record_stats()
        return best_move

    def score_moves(self, board):
        """Score every available root move for the AI, in enumeration order."""
        scored = []
        for row, col in move_selector.available_moves(board):
            board._push_stone(row, col, self.ai_symbol)
            try:
                score = self._minimax(board, False, 1, -INF, INF)
            finally:
                board._pop_stone(row, col)
            scored.append(((row, col), score))
        return scored

    def _minimax(self, board, maximizing, depth, alpha, beta):
        self.node_counter += 1

        # Terminal checks come before the depth cutoff so a win on the last ply still counts.
        if rules.check_win(board, self.ai_symbol):
            return WIN_SCORE - depth
        if rules.check_win(board, self.human_symbol):
            return depth - WIN_SCORE
        if board.is_full() or depth >= self.max_depth:
            return 0

        best = -INF if maximizing else INF
        mark = self.ai_symbol if maximizing else self.human_symbol

        for row, col in move_selector.available_moves(board):
            board._push_stone(row, col, mark)
            try:
                score = self._minimax(board, not maximizing, depth + 1, alpha, beta)
            finally:
                board._pop_stone(row, col)

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, best)
            else:
                best = min(best, score)
                beta = min(beta, best)

            if self.prune and beta <= alpha:
                break
        return best

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "symbol": self.ai_symbol,
            "depth": self.max_depth,
            "pruned": self.prune,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, ai_symbol, human_symbol, depth=None, prune=True, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    The depth cap defaults to the per-size table.
    """
    searcher = MinimaxSearcher(
        ai_symbol=ai_symbol,
        human_symbol=human_symbol,
        max_depth=depth_for_size(board.size) if depth is None else depth,
        prune=prune,
        stats=stats,
    )
    return searcher.choose_move(board)
