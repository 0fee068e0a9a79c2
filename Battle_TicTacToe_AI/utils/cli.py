"""CLI options for board size, difficulty, symbol and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Tic-Tac-Toe AI (human vs computer)")
    parser.add_argument("--board-size", help="Board size: 3, 5 or 9 (also accepts 3x3, 5x5, 9x9)")
    parser.add_argument(
        "--difficulty",
        choices=["Easy", "Medium", "Hard", "Impossible"],
        default=None,
        help="AI difficulty (default from settings)",
    )
    parser.add_argument("--symbol", choices=["X", "O"], default=None, help="Symbol for the human player")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--gui", action="store_true", help="Enable pygame GUI (mouse input for human)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for Easy/Medium randomness (optional)")
    parser.add_argument("--stats", action="store_true", help="Log search statistics (nodes/time) after each AI move")
    return parser.parse_args(argv)
