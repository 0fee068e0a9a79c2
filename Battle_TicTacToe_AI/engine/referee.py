"""Move validation for real (non-speculative) moves."""


def check_move(move, board):
    """
    Validate a move against bounds and occupancy.
    Raises ValueError on invalid moves; returns True otherwise.
    """
    try:
        row, col = move
        row, col = int(row), int(col)
    except (TypeError, ValueError) as exc:
        raise ValueError("Move must be a (row, col) pair of integers") from exc

    if not board.in_bounds(row, col):
        raise ValueError("Move out of bounds")
    if not board.is_empty(row, col):
        raise ValueError("Cell already occupied")
    return True
