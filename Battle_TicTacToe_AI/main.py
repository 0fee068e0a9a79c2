"""Entry point for human-vs-AI matches. Load config, build the game, run the front-end."""

import random

try:
    from utils.cli import parse_args
    from utils.logger import log_event
    from GameConfig import config_from_settings, load_settings
    from TicTacToeGame import TicTacToeGame
    from Player import HumanPlayer, GuiHumanPlayer
except ImportError:
    from Battle_TicTacToe_AI.utils.cli import parse_args
    from Battle_TicTacToe_AI.utils.logger import log_event
    from Battle_TicTacToe_AI.GameConfig import config_from_settings, load_settings
    from Battle_TicTacToe_AI.TicTacToeGame import TicTacToeGame
    from Battle_TicTacToe_AI.Player import HumanPlayer, GuiHumanPlayer


def build_game(args, settings):
    """Merge CLI overrides into file settings and create the game."""
    if args.board_size is not None:
        settings["board_size"] = args.board_size
    if args.difficulty is not None:
        settings["difficulty"] = args.difficulty
    if args.symbol is not None:
        settings["human_symbol"] = args.symbol
    seed = args.seed if args.seed is not None else settings.get("seed")

    config = config_from_settings(settings)
    rng = random.Random(seed)
    stats = [] if args.stats else None
    return TicTacToeGame(config, logger=log_event, rng=rng, stats=stats), stats


def run_terminal(game, stats=None):
    human = HumanPlayer(game.config.human_symbol)
    outcome = game.play(human)
    print(game.board)
    if stats:
        for entry in stats:
            log_event(f"Search depth={entry['depth']} nodes={entry['nodes']} time={entry['time']:.3f}s")
    return outcome


def run_gui(game):
    try:
        from gui.pygame_view import ConfigChange, PygameView, WindowClosed
    except ImportError:
        from Battle_TicTacToe_AI.gui.pygame_view import ConfigChange, PygameView, WindowClosed

    view = PygameView(game.config)
    try:
        while True:
            human = GuiHumanPlayer(game.config.human_symbol, view=view)
            try:
                game.play(human, renderer=view.render)
                view.wait_for_dismiss()
                game.reset()
            except ConfigChange as change:
                log_event(f"Reconfigure: {change}")
                game = game.reconfigure(**change.changes)
                view.set_config(game.config)
    except WindowClosed:
        log_event("Window closed")
    finally:
        view.close()


def main():
    args = parse_args()
    settings = load_settings(args.settings)
    game, stats = build_game(args, settings)
    log_event(
        f"New game: {game.config.size}x{game.config.size}, {game.config.win_length} in a row, "
        f"difficulty={game.config.difficulty}, you are {game.config.human_symbol}"
    )

    if args.gui:
        run_gui(game)
    else:
        run_terminal(game, stats)


if __name__ == "__main__":
    main()
