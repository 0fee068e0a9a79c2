"""Turn management for a human-vs-AI match: one decision in flight at a time."""

import enum
from dataclasses import dataclass

try:
    from Board import Board
    from GameConfig import GameConfig
    from engine import referee, rules
    from ai import strategies
except ImportError:
    from Battle_TicTacToe_AI.Board import Board
    from Battle_TicTacToe_AI.GameConfig import GameConfig
    from Battle_TicTacToe_AI.engine import referee, rules
    from Battle_TicTacToe_AI.ai import strategies


class GameState(enum.Enum):
    AWAITING_HUMAN = "awaiting_human"
    AWAITING_AI = "awaiting_ai"
    GAME_OVER = "game_over"


class Outcome(enum.Enum):
    NONE = "none"
    HUMAN_WIN = "human_win"
    AI_WIN = "ai_win"
    DRAW = "draw"


OUTCOME_MESSAGES = {
    Outcome.HUMAN_WIN: "You win!",
    Outcome.AI_WIN: "AI wins!",
    Outcome.DRAW: "Draw!",
}


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    game_over: bool
    outcome: Outcome = Outcome.NONE
    move: tuple | None = None


class TicTacToeGame:
    def __init__(self, config: GameConfig, logger=print, strategy=None, rng=None, stats=None):
        self.config = config
        self.board = Board(size=config.size, win_length=config.win_length)
        self.strategy = strategy or strategies.make_strategy(
            config.difficulty, config.ai_symbol, config.human_symbol, rng=rng, stats=stats
        )
        self.logger = logger
        self.rng = rng
        self.stats = stats
        self.state = GameState.AWAITING_HUMAN
        self.outcome = Outcome.NONE
        self.move_index = 0
        self.last_move = None

    # Read-only queries for rendering
    def board_size(self):
        return self.board.size

    def is_cell_empty(self, row, col):
        return self.board.is_empty(row, col)

    @property
    def game_over(self):
        return self.state is GameState.GAME_OVER

    def reset(self):
        """Start a fresh match with the same configuration."""
        self.board.reset(self.config.size, self.config.win_length)
        self.state = GameState.AWAITING_HUMAN
        self.outcome = Outcome.NONE
        self.move_index = 0
        self.last_move = None

    def reconfigure(self, **changes):
        """Return a new game (and board) for changed size, difficulty or symbol."""
        config = self.config.with_changes(**changes)
        return TicTacToeGame(config, logger=self.logger, rng=self.rng, stats=self.stats)

    def submit_human_move(self, row, col) -> MoveResult:
        if self.state is not GameState.AWAITING_HUMAN:
            self.logger(f"Ignored human move {(row, col)}: not the human's turn ({self.state.value})")
            return MoveResult(accepted=False, game_over=self.game_over, outcome=self.outcome)

        try:
            referee.check_move((row, col), self.board)
        except ValueError as exc:
            self.logger(f"Rejected human move {(row, col)}: {exc}")
            return MoveResult(accepted=False, game_over=False, outcome=self.outcome)

        move = (int(row), int(col))
        self._apply(move, self.config.human_symbol, Outcome.HUMAN_WIN, GameState.AWAITING_AI)
        return MoveResult(accepted=True, game_over=self.game_over, outcome=self.outcome, move=move)

    def request_ai_move(self):
        """Let the strategy move; returns (row, col) or None if nothing was played."""
        if self.state is not GameState.AWAITING_AI:
            self.logger(f"Ignored AI move request: not the AI's turn ({self.state.value})")
            return None

        move = self.strategy.select_move(self.board)
        if move is None:
            self.logger("Result: Draw (no legal move for AI)")
            self._finish(Outcome.DRAW)
            return None

        # Strategies only return empty cells; validate anyway so a bad strategy cannot corrupt the board.
        referee.check_move(move, self.board)
        self._apply(move, self.config.ai_symbol, Outcome.AI_WIN, GameState.AWAITING_HUMAN)
        return move

    def play_turn(self, row, col) -> MoveResult:
        """Human move followed by the AI reply when the game goes on."""
        result = self.submit_human_move(row, col)
        if not result.accepted or result.game_over:
            return result
        ai_move = self.request_ai_move()
        return MoveResult(accepted=True, game_over=self.game_over, outcome=self.outcome, move=ai_move)

    def play(self, human, renderer=None):
        """Drive a full match with a Player supplying human moves. Returns the Outcome."""
        while not self.game_over:
            if renderer:
                renderer(self.board, self.last_move, self.state, self.outcome)
            if self.state is GameState.AWAITING_HUMAN:
                try:
                    row, col = human.next_move(self.board)
                except ValueError as exc:
                    self.logger(f"Invalid input: {exc}")
                    continue
                self.submit_human_move(row, col)
            else:
                self.request_ai_move()

        if renderer:
            renderer(self.board, self.last_move, self.state, self.outcome)
        return self.outcome

    def _apply(self, move, symbol, win_outcome, next_state):
        row, col = move
        self.board.place(row, col, symbol)
        self.last_move = move
        who = "Human" if symbol == self.config.human_symbol else "AI"
        self.logger(f"Move {self.move_index + 1}: {who} {symbol} {move}")
        self.move_index += 1

        if rules.check_win(self.board, symbol):
            self._finish(win_outcome)
        elif rules.is_full(self.board):
            self._finish(Outcome.DRAW)
        else:
            self.state = next_state

    def _finish(self, outcome):
        self.state = GameState.GAME_OVER
        self.outcome = outcome
        self.logger(f"Result: {OUTCOME_MESSAGES[outcome]}")


def configure(size, difficulty, human_symbol, logger=print, rng=None, stats=None):
    """Build a fresh game for the given choices."""
    config = GameConfig.create(size=size, difficulty=difficulty, human_symbol=human_symbol)
    return TicTacToeGame(config, logger=logger, rng=rng, stats=stats)
