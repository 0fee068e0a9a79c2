"""Win and draw detection for N-in-a-row on a square board."""

from contextlib import contextmanager

try:
    from Board import Board
except ImportError:
    from Battle_TicTacToe_AI.Board import Board


@contextmanager
def simulate(board: Board, row: int, col: int, symbol: str):
    """Place a speculative mark for the duration of the block, then remove it."""
    board._push_stone(row, col, symbol)
    try:
        yield
    finally:
        board._pop_stone(row, col)


def _run_in_line(board: Board, symbol: str, coords) -> bool:
    # Run counter resets on any other cell, so short wins anywhere in a long line count.
    count = 0
    for r, c in coords:
        count = count + 1 if board.cells[r][c] == symbol else 0
        if count >= board.win_length:
            return True
    return False


def _window_filled(board: Board, symbol: str, row: int, col: int, d_col: int) -> bool:
    for k in range(board.win_length):
        if board.cells[row + k][col + k * d_col] != symbol:
            return False
    return True


def check_win(board: Board, symbol: str) -> bool:
    """True iff `symbol` holds win_length consecutive cells in any direction."""
    size = board.size
    n = board.win_length
    if n > size:
        return False

    for r in range(size):
        if _run_in_line(board, symbol, ((r, c) for c in range(size))):
            return True
    for c in range(size):
        if _run_in_line(board, symbol, ((r, c) for r in range(size))):
            return True

    # Diagonals (top-left to bottom-right)
    for r in range(size - n + 1):
        for c in range(size - n + 1):
            if _window_filled(board, symbol, r, c, 1):
                return True

    # Anti-diagonals (top-right to bottom-left)
    for r in range(size - n + 1):
        for c in range(n - 1, size):
            if _window_filled(board, symbol, r, c, -1):
                return True
    return False


def is_full(board: Board) -> bool:
    return board.is_full()


def winner(board: Board, symbols=("X", "O")):
    """Return the first symbol with a winning line, or None."""
    for symbol in symbols:
        if check_win(board, symbol):
            return symbol
    return None


def is_draw(board: Board, first: str, second: str) -> bool:
    """Full board with no winning line for either symbol."""
    return is_full(board) and not check_win(board, first) and not check_win(board, second)


def is_win_after_move(board: Board, row: int, col: int, symbol: str) -> bool:
    """Assumes the mark is already placed at (row, col)."""
    return board.cells[row][col] == symbol and check_win(board, symbol)
