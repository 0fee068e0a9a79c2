"""Legal move enumeration (every empty cell, row-major)."""

try:
    from Board import EMPTY
except ImportError:
    from Battle_TicTacToe_AI.Board import EMPTY


def available_moves(board):
    """
    Return every empty cell as (row, col) in row-major order.
    Recomputed on each call; callers may mutate the board between calls.
    """
    size = board.size
    cells = board.cells
    return [(r, c) for r in range(size) for c in range(size) if cells[r][c] == EMPTY]
