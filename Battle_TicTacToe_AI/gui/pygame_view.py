"""Pygame-based board renderer and input helper."""

import time

try:
    from TicTacToeGame import OUTCOME_MESSAGES, GameState, Outcome
except ImportError:
    from Battle_TicTacToe_AI.TicTacToeGame import OUTCOME_MESSAGES, GameState, Outcome


class WindowClosed(Exception):
    """Raised from input waits when the user closes the window."""


class ConfigChange(Exception):
    """Raised from input waits when the user asks for a different size, difficulty or symbol."""

    def __init__(self, **changes):
        super().__init__(", ".join(f"{k}={v}" for k, v in changes.items()))
        self.changes = changes


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_CELL = (209, 179, 135)
    COLOR_GRID = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_X = (40, 60, 160)
    COLOR_O = (170, 30, 30)
    COLOR_RED = (200, 0, 0)

    PANEL_HEIGHT = 100
    RESULT_PAUSE = 0.3

    SIZE_CYCLE = (3, 5, 9)
    DIFFICULTY_CYCLE = ("Easy", "Medium", "Hard", "Impossible")

    def __init__(self, config, window_size=700):
        import pygame

        self._pygame = pygame
        self.window_size = window_size
        self.config = config

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size + self.PANEL_HEIGHT))
        pygame.display.set_caption("Tic Tac Toe - AI")

        # Fonts
        self.font_medium = pygame.font.Font(None, 36)
        self.font_small = pygame.font.Font(None, 26)
        self.set_config(config)

    def set_config(self, config):
        """Adopt a new configuration; the grid is rebuilt for its size."""
        self.config = config
        self.board_size = config.size
        self.tile_size = self.window_size / self.board_size
        # Mark font adapts to board size for readability
        self.font_mark = self._pygame.font.Font(None, max(28, int(self.tile_size * 0.9)))

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _cell_rect(self, row, col):
        return self._pygame.Rect(
            int(col * self.tile_size),
            int(self.PANEL_HEIGHT + row * self.tile_size),
            int(self.tile_size) + 1,
            int(self.tile_size) + 1,
        )

    def _draw_grid(self, board):
        pygame = self._pygame
        for row in range(board.size):
            for col in range(board.size):
                rect = self._cell_rect(row, col)
                pygame.draw.rect(self.screen, self.COLOR_CELL, rect)
                pygame.draw.rect(self.screen, self.COLOR_GRID, rect, 2)
                mark = board.cells[row][col]
                if mark in ("X", "O"):
                    color = self.COLOR_X if mark == "X" else self.COLOR_O
                    self._draw_text(mark, self.font_mark, color, rect.center)

    def _draw_last_move_marker(self, last_move):
        if not last_move:
            return
        row, col = last_move
        rect = self._cell_rect(row, col)
        self._pygame.draw.rect(self.screen, self.COLOR_RED, rect, 3)

    def _draw_info_panel(self, state, outcome):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)

        cfg = self.config
        settings_line = (
            f"[D] AI Difficulty: {cfg.difficulty}   [S] Board Size: {cfg.size}x{cfg.size}"
            f"   [P] You Are: {cfg.human_symbol}"
        )
        self._draw_text(settings_line, self.font_small, self.COLOR_TEXT, (self.window_size / 2, 25))

        if state is GameState.GAME_OVER:
            msg = OUTCOME_MESSAGES.get(outcome, "Game Over") + "  (click for a new game)"
        elif state is GameState.AWAITING_AI:
            msg = "AI is thinking..."
        else:
            msg = f"Your move ({cfg.human_symbol}), {cfg.win_length} in a row wins"
        self._draw_text(msg, self.font_medium, self.COLOR_TEXT, (self.window_size / 2, 70))

    def render(self, board, last_move=None, state=None, outcome=Outcome.NONE):
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_grid(board)
        self._draw_last_move_marker(last_move)
        self._draw_info_panel(state, outcome)
        self._pygame.display.flip()

    def _get_coords_from_mouse(self, pos):
        mx, my = pos
        if my < self.PANEL_HEIGHT:
            return None
        row = int((my - self.PANEL_HEIGHT) // self.tile_size)
        col = int(mx // self.tile_size)
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return row, col
        return None

    def _config_change_for_key(self, key):
        pygame = self._pygame
        cfg = self.config
        if key == pygame.K_d:
            idx = self.DIFFICULTY_CYCLE.index(cfg.difficulty)
            return ConfigChange(difficulty=self.DIFFICULTY_CYCLE[(idx + 1) % len(self.DIFFICULTY_CYCLE)])
        if key == pygame.K_s:
            idx = self.SIZE_CYCLE.index(cfg.size)
            return ConfigChange(size=self.SIZE_CYCLE[(idx + 1) % len(self.SIZE_CYCLE)])
        if key == pygame.K_p:
            return ConfigChange(human_symbol=cfg.ai_symbol)
        return None

    def _next_event(self):
        """Block until a cell click, settings key or window close."""
        pygame = self._pygame
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise WindowClosed("Window closed")
                if event.type == pygame.KEYDOWN:
                    change = self._config_change_for_key(event.key)
                    if change is not None:
                        raise change
                if event.type == pygame.MOUSEBUTTONDOWN:
                    coords = self._get_coords_from_mouse(event.pos)
                    if coords:
                        return coords
            pygame.time.delay(10)

    def wait_for_move(self, board, symbol):
        return self._next_event()

    def wait_for_dismiss(self):
        """Pause on the result screen until the user clicks a cell."""
        time.sleep(self.RESULT_PAUSE)
        self._pygame.event.clear()
        self._next_event()

    def close(self):
        self._pygame.quit()
