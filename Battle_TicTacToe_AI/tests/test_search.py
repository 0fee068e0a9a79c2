"""Move enumeration, random and heuristic strategies, and the make/unmake invariant."""

import random

import pytest

from Battle_TicTacToe_AI.Board import Board
from Battle_TicTacToe_AI.ai import move_selector, search_heuristic, search_random, strategies


def test_available_moves_row_major_and_fresh():
    b = Board.from_rows(["X_O", "_X_", "O__"])
    assert move_selector.available_moves(b) == [(0, 1), (1, 0), (1, 2), (2, 1), (2, 2)]

    b.place(1, 0, "O")
    assert move_selector.available_moves(b) == [(0, 1), (1, 2), (2, 1), (2, 2)]


def test_available_moves_empty_when_full():
    b = Board.from_rows(["XOX", "XOO", "OXX"])
    assert move_selector.available_moves(b) == []


def test_random_move_is_legal_and_seeded():
    b = Board.from_rows(["X_O", "_X_", "O__"])
    legal = set(move_selector.available_moves(b))
    first = search_random.choose_move(b, rng=random.Random(7))
    again = search_random.choose_move(b, rng=random.Random(7))
    assert first in legal
    assert first == again


def test_random_move_none_on_full_board():
    b = Board.from_rows(["XOX", "XOO", "OXX"])
    assert search_random.choose_move(b, rng=random.Random(0)) is None


def test_medium_wins_before_blocking():
    # (0,2) would block X, but (1,2) completes O's own row.
    b = Board.from_rows(["XX_", "OO_", "___"])
    assert search_heuristic.choose_move(b, ai_symbol="O", human_symbol="X") == (1, 2)


def test_medium_blocks_human_threat():
    b = Board.from_rows(["XX_", "O__", "___"])
    assert search_heuristic.choose_move(b, ai_symbol="O", human_symbol="X") == (0, 2)


def test_medium_win_found_after_earlier_threat_cell():
    # X threatens (0,1), which comes first in row-major order; O still takes its win at (1,2).
    b = Board.from_rows(["X_X", "OO_", "X__"])
    assert search_heuristic.choose_move(b, ai_symbol="O", human_symbol="X") == (1, 2)


def test_medium_falls_back_to_random():
    b = Board.from_rows(["X__", "___", "___"])
    mv = search_heuristic.choose_move(b, ai_symbol="O", human_symbol="X", rng=random.Random(3))
    assert b.is_empty(*mv)


def test_medium_on_5x5_blocks_four():
    b = Board(size=5)
    for c in range(1, 4):
        b.place(4, c, "X")
    b.place(0, 0, "O")
    mv = search_heuristic.choose_move(b, ai_symbol="O", human_symbol="X")
    assert mv == (4, 0)


def _boards():
    return [
        Board.from_rows(["___", "___", "___"]),
        Board.from_rows(["XX_", "OO_", "___"]),
        Board.from_rows(["O_X", "_X_", "__O"]),
        Board.from_rows(["XO_", "_X_", "O__"]),
    ]


@pytest.mark.parametrize("difficulty", ["Easy", "Medium", "Hard", "Impossible"])
def test_strategies_leave_board_unchanged(difficulty):
    for b in _boards():
        before_cells = b.snapshot()
        before_count = b.move_count
        strategy = strategies.make_strategy(difficulty, "O", "X", rng=random.Random(0))

        mv = strategy.select_move(b)

        assert b.cells == before_cells
        assert b.move_count == before_count
        assert b.is_empty(*mv)


@pytest.mark.parametrize("difficulty", ["Easy", "Medium", "Hard", "Impossible"])
def test_strategies_return_none_on_full_board(difficulty):
    b = Board.from_rows(["XOX", "XOO", "OXX"])
    strategy = strategies.make_strategy(difficulty, "O", "X", rng=random.Random(0))
    assert strategy.select_move(b) is None


def test_make_strategy_dispatch():
    assert isinstance(strategies.make_strategy("Easy", "O", "X"), strategies.RandomStrategy)
    assert isinstance(strategies.make_strategy("Medium", "O", "X"), strategies.HeuristicStrategy)
    assert isinstance(strategies.make_strategy("Hard", "O", "X"), strategies.MinimaxStrategy)
    assert isinstance(strategies.make_strategy("Impossible", "O", "X"), strategies.MinimaxStrategy)
    # Unknown labels play randomly.
    fallback = strategies.make_strategy("Nightmare", "O", "X")
    assert type(fallback) is strategies.RandomStrategy


def test_base_strategy_is_abstract():
    with pytest.raises(NotImplementedError):
        strategies.Strategy("O", "X").select_move(Board())
