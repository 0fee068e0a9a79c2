"""Battle_TicTacToe_AI package exports."""

from .Board import Board
from .GameConfig import GameConfig
from .TicTacToeGame import TicTacToeGame, GameState, MoveResult, Outcome, configure
from .Player import Player, HumanPlayer, GuiHumanPlayer

# Subpackages for rules, AI search, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "GameConfig",
    "TicTacToeGame",
    "GameState",
    "MoveResult",
    "Outcome",
    "configure",
    "Player",
    "HumanPlayer",
    "GuiHumanPlayer",
    "ai",
    "engine",
    "gui",
    "utils",
]
