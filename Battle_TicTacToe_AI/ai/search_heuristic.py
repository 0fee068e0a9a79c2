"""One-ply lookahead: take an immediate win, else block, else play randomly ("Medium")."""

from . import move_selector
from . import search_random

try:
    from engine import rules
except ImportError:
    from Battle_TicTacToe_AI.engine import rules


def find_immediate_win(board, symbol):
    """First empty cell (row-major) where `symbol` would complete a line, or None."""
    for row, col in move_selector.available_moves(board):
        with rules.simulate(board, row, col, symbol):
            if rules.check_win(board, symbol):
                return (row, col)
    return None


def find_immediate_block(board, opponent):
    """First cell where the opponent would win on their next move."""
    return find_immediate_win(board, opponent)


def choose_move(board, ai_symbol, human_symbol, rng=None):
    # Win check precedes block check.
    win_move = find_immediate_win(board, ai_symbol)
    if win_move is not None:
        return win_move
    block_move = find_immediate_block(board, human_symbol)
    if block_move is not None:
        return block_move
    return search_random.choose_move(board, rng=rng)
