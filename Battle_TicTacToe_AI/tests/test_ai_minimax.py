"""Tests for minimax move selection, scoring and alpha-beta pruning."""

import pytest

from Battle_TicTacToe_AI.Board import Board
from Battle_TicTacToe_AI.ai import move_selector, search_minimax
from Battle_TicTacToe_AI.engine import rules

INF = search_minimax.INF


def _searcher(depth=6, prune=True, stats=None, ai="O", human="X"):
    return search_minimax.MinimaxSearcher(ai_symbol=ai, human_symbol=human, max_depth=depth, prune=prune, stats=stats)


def test_depth_cap_by_board_size():
    assert search_minimax.depth_for_size(3) == 6
    assert search_minimax.depth_for_size(5) == 4
    assert search_minimax.depth_for_size(9) == 2
    # Unsupported sizes fall back to a default instead of failing.
    assert search_minimax.depth_for_size(4) == 3
    assert search_minimax.depth_for_size(7) == 3


def test_symbols_must_differ():
    with pytest.raises(ValueError):
        search_minimax.MinimaxSearcher(ai_symbol="X", human_symbol="X", max_depth=2)


def test_minimax_prefers_immediate_win_and_does_not_mutate_board():
    b = Board.from_rows(["X_X", "OO_", "X__"])
    before_cells = b.snapshot()
    before_count = b.move_count

    mv = search_minimax.choose_move(b, ai_symbol="O", human_symbol="X")

    assert mv == (1, 2)
    assert b.cells == before_cells
    assert b.move_count == before_count
    assert b.is_empty(*mv)


def test_minimax_blocks_when_it_cannot_win():
    b = Board.from_rows(["XX_", "O__", "___"])
    assert search_minimax.choose_move(b, ai_symbol="O", human_symbol="X") == (0, 2)


def test_minimax_plays_as_x_too():
    b = Board.from_rows(["OO_", "XX_", "___"])
    assert search_minimax.choose_move(b, ai_symbol="X", human_symbol="O") == (1, 2)


def test_minimax_returns_none_on_full_board():
    b = Board.from_rows(["XOX", "XOO", "OXX"])
    assert search_minimax.choose_move(b, ai_symbol="O", human_symbol="X") is None


def test_terminal_scores_prefer_faster_wins_and_slower_losses():
    ai_won = Board.from_rows(["OOO", "XX_", "___"])
    s = _searcher()
    assert s._minimax(ai_won, True, 2, -INF, INF) == 8
    assert s._minimax(ai_won, True, 4, -INF, INF) == 6
    assert s._minimax(ai_won, True, 2, -INF, INF) > s._minimax(ai_won, True, 4, -INF, INF)

    human_won = Board.from_rows(["XXX", "OO_", "___"])
    assert s._minimax(human_won, False, 2, -INF, INF) == -8
    assert s._minimax(human_won, False, 4, -INF, INF) == -6


def test_depth_limit_scores_neutral():
    b = Board.from_rows(["X__", "_O_", "___"])
    assert _searcher(depth=2)._minimax(b, True, 2, -INF, INF) == 0


def test_forced_win_scores_lower_than_immediate_win():
    # O can fork at (2,0); every other move lets X complete the anti-diagonal there.
    fork = Board.from_rows(["O_X", "_X_", "__O"])
    scores = dict(_searcher().score_moves(fork))
    assert scores[(2, 0)] == 7
    assert all(score == -8 for mv, score in scores.items() if mv != (2, 0))
    assert _searcher().choose_move(fork) == (2, 0)

    immediate = Board.from_rows(["X_X", "OO_", "X__"])
    assert dict(_searcher().score_moves(immediate))[(1, 2)] == 9
    assert 9 > scores[(2, 0)]


def test_minimax_is_deterministic():
    b = Board.from_rows(["X__", "___", "___"])
    moves = {search_minimax.choose_move(b, ai_symbol="O", human_symbol="X") for _ in range(3)}
    assert len(moves) == 1


def test_ties_go_to_first_move_in_enumeration_order():
    # Depth 1 returns 0 for every non-winning move, so the first empty cell wins the tie.
    b = Board.from_rows(["_X_", "___", "___"])
    s = _searcher(depth=1)
    assert s.choose_move(b) == move_selector.available_moves(b)[0] == (0, 0)


@pytest.mark.parametrize(
    "rows, depth",
    [
        (["___", "___", "___"], 4),
        (["X__", "_O_", "___"], 6),
        (["O_X", "_X_", "__O"], 6),
        (["XO_", "_X_", "O__"], 6),
        (["XOXOX", "XOXOX", "OOO__", "XXOX_", "OX_O_"], 4),
    ],
)
def test_alpha_beta_matches_plain_minimax(rows, depth):
    b = Board.from_rows(rows)
    pruned_stats, plain_stats = [], []
    pruned = _searcher(depth=depth, prune=True, stats=pruned_stats)
    plain = _searcher(depth=depth, prune=False, stats=plain_stats)

    assert pruned.score_moves(b) == plain.score_moves(b)
    assert pruned.choose_move(b) == plain.choose_move(b)
    assert pruned_stats[-1]["nodes"] <= plain_stats[-1]["nodes"]


def test_stats_recorded_per_decision():
    stats = []
    b = Board.from_rows(["X__", "___", "___"])
    search_minimax.choose_move(b, ai_symbol="O", human_symbol="X", stats=stats)
    assert len(stats) == 1
    entry = stats[0]
    assert entry["depth"] == 6
    assert entry["symbol"] == "O"
    assert entry["nodes"] > 0
    assert entry["time"] > 0


def test_five_by_five_takes_immediate_win():
    b = Board.from_rows(["XOXOX", "XOXOX", "OOO__", "XXOX_", "OX_O_"])
    assert b.win_length == 4
    assert search_minimax.choose_move(b, ai_symbol="O", human_symbol="X") == (2, 3)


def _assert_ai_never_loses(board, searcher, ai, human):
    move = searcher.choose_move(board)
    board.place(*move, ai)
    try:
        if rules.check_win(board, ai) or board.is_full():
            return
        for r, c in move_selector.available_moves(board):
            board.place(r, c, human)
            try:
                assert not rules.check_win(board, human), f"AI lost after human reply {(r, c)}:\n{board}"
                if not board.is_full():
                    _assert_ai_never_loses(board, searcher, ai, human)
            finally:
                board._pop_stone(r, c)
    finally:
        board._pop_stone(*move)


def test_ai_moving_first_never_loses_on_3x3():
    b = Board(size=3)
    searcher = _searcher(depth=search_minimax.depth_for_size(3), ai="X", human="O")
    _assert_ai_never_loses(b, searcher, ai="X", human="O")
    assert b.move_count == 0
