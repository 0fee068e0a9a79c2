"""Uniform random move choice ("Easy")."""

import random

from . import move_selector


def choose_move(board, rng=None):
    """Return a uniformly sampled empty cell, or None when the board is full."""
    moves = move_selector.available_moves(board)
    if not moves:
        return None
    rng = rng or random
    return rng.choice(moves)
