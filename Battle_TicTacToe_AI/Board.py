"""Board state container for N-in-a-row play on a square grid."""

EMPTY = " "
SYMBOLS = ("X", "O")

WIN_LENGTHS = {3: 3, 5: 4, 9: 5}


def win_length_for(size):
    """Consecutive marks needed to win on a board of the given side."""
    return 3 if size == 3 else (4 if size == 5 else 5)


def other_symbol(symbol):
    return "O" if symbol == "X" else "X"


class Board:
    def __init__(self, size=3, win_length=None):
        # Store cells as EMPTY, "X" or "O", addressed cells[row][col]
        self.size = size
        self.win_length = win_length if win_length is not None else win_length_for(size)
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.move_count = 0

    def reset(self, size=None, win_length=None):
        """Clear every cell, optionally switching to a new size."""
        if size is not None:
            self.size = size
            self.win_length = win_length if win_length is not None else win_length_for(size)
        elif win_length is not None:
            self.win_length = win_length
        self.cells = [[EMPTY] * self.size for _ in range(self.size)]
        self.move_count = 0

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def get(self, row, col):
        return self.cells[row][col]

    def set_cell(self, row, col, mark):
        """Raw cell write; writing EMPTY reverts an earlier mark."""
        previous = self.cells[row][col]
        self.cells[row][col] = mark
        if previous == EMPTY and mark != EMPTY:
            self.move_count += 1
        elif previous != EMPTY and mark == EMPTY:
            self.move_count -= 1

    def place(self, row, col, mark):
        """Place a mark for a real move; raise if symbol, bounds or occupancy is wrong."""
        if mark not in SYMBOLS:
            raise ValueError(f"mark must be one of {SYMBOLS}")
        if not self.in_bounds(row, col):
            raise ValueError("move out of bounds")
        if self.cells[row][col] != EMPTY:
            raise ValueError("cell already occupied")
        self.set_cell(row, col, mark)

    def is_full(self):
        return self.move_count >= self.size * self.size

    def _push_stone(self, row, col, mark):
        # Speculative placement for search; must be paired with _pop_stone.
        self.set_cell(row, col, mark)

    def _pop_stone(self, row, col):
        self.set_cell(row, col, EMPTY)

    def clone(self):
        new_board = Board(self.size, self.win_length)
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        return new_board

    def snapshot(self):
        """Return a copy of the cell grid for before/after comparisons."""
        return [row[:] for row in self.cells]

    @classmethod
    def from_rows(cls, rows, win_length=None):
        """Build a board from strings or lists, using '_' or ' ' for empty cells."""
        size = len(rows)
        board = cls(size, win_length)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError("board rows must form a square grid")
            for c, value in enumerate(row):
                if value in ("_", ".", EMPTY):
                    continue
                board.place(r, c, value)
        return board

    def __str__(self):
        header = "   " + " ".join(str(c) for c in range(self.size))
        lines = [header]
        for r, row in enumerate(self.cells):
            lines.append(f"{r:2d} " + " ".join(v if v != EMPTY else "." for v in row))
        return "\n".join(lines)
