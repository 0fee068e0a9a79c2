"""Per-match configuration and settings file loading."""

from dataclasses import dataclass
from pathlib import Path

import yaml

try:
    from Board import SYMBOLS, WIN_LENGTHS, other_symbol, win_length_for
except ImportError:
    from Battle_TicTacToe_AI.Board import SYMBOLS, WIN_LENGTHS, other_symbol, win_length_for


PROJECT_DIR = Path(__file__).resolve().parent

SUPPORTED_SIZES = tuple(WIN_LENGTHS)
DIFFICULTIES = ("Easy", "Medium", "Hard", "Impossible")

DEFAULT_SETTINGS = {
    "board_size": 3,
    "difficulty": "Hard",
    "human_symbol": "X",
    "seed": None,
}


@dataclass(frozen=True)
class GameConfig:
    size: int
    win_length: int
    human_symbol: str
    ai_symbol: str
    difficulty: str

    @classmethod
    def create(cls, size=3, difficulty="Hard", human_symbol="X"):
        """Validate the choices and derive win length and the AI's symbol."""
        if size not in SUPPORTED_SIZES:
            raise ValueError(f"Unsupported board size {size}; expected one of {SUPPORTED_SIZES}")
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty {difficulty!r}; expected one of {DIFFICULTIES}")
        if human_symbol not in SYMBOLS:
            raise ValueError(f"Symbol must be one of {SYMBOLS}")
        return cls(
            size=size,
            win_length=win_length_for(size),
            human_symbol=human_symbol,
            ai_symbol=other_symbol(human_symbol),
            difficulty=difficulty,
        )

    def with_changes(self, **changes):
        """New config with some choices changed; derived fields are recomputed."""
        size = changes.pop("size", self.size)
        difficulty = changes.pop("difficulty", self.difficulty)
        human_symbol = changes.pop("human_symbol", self.human_symbol)
        if changes:
            raise TypeError(f"Unexpected config fields: {sorted(changes)}")
        return GameConfig.create(size=size, difficulty=difficulty, human_symbol=human_symbol)


def parse_size(value):
    """Accept 3, "3" or "3x3"."""
    if isinstance(value, int):
        return value
    text = str(value).strip().lower()
    if "x" in text:
        text = text.split("x", 1)[0]
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"Invalid board size {value!r}") from exc


def resolve_project_path(path):
    """Resolve a repo-relative path when invoked from outside the package directory."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path="config/settings.yaml"):
    """Load settings YAML over the defaults; a missing file yields the defaults."""
    settings = dict(DEFAULT_SETTINGS)
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return settings
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")
    settings.update({k: v for k, v in data.items() if k in DEFAULT_SETTINGS})
    return settings


def config_from_settings(settings):
    return GameConfig.create(
        size=parse_size(settings["board_size"]),
        difficulty=settings["difficulty"],
        human_symbol=settings["human_symbol"],
    )
