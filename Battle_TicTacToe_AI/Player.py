"""Input adapters that supply the human's moves to the game loop."""


class Player:
    def __init__(self, symbol):
        self.symbol = symbol

    def next_move(self, board):
        """Return (row, col) for the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, symbol, input_fn=input, output_fn=print):
        super().__init__(symbol)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def next_move(self, board):
        """Text-input player; raises ValueError on malformed input."""
        self.output_fn(str(board))
        raw = self.input_fn(f"[{self.symbol}] Enter move as 'row col' (0-indexed): ").strip()
        try:
            row_str, col_str = raw.replace(",", " ").split()
            return int(row_str), int(col_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class GuiHumanPlayer(Player):
    def __init__(self, symbol, view):
        super().__init__(symbol)
        self.view = view

    def next_move(self, board):
        return self.view.wait_for_move(board, self.symbol)
