import random

import pytest
from hypothesis import given, strategies as st

from logic.ai_player import AIPlayer
from logic.game_state import Mark
from logic.win_checker import WinChecker

X, O = Mark.X, Mark.O
_ = None

boards = st.lists(st.sampled_from([None, X, O]), min_size=9, max_size=9)


@pytest.fixture
def ai():
    return AIPlayer(rng=random.Random(42))


def test_full_board_has_no_move(ai):
    board = [X, O, X, X, O, O, O, X, X]
    assert ai.select_move(board, O) is None
    assert ai.last_rule is None


def test_takes_the_win(ai):
    board = [X, X, _,
             O, O, _,
             _, _, _]
    # Winning beats blocking X at 2
    assert ai.select_move(board, O) == 5
    assert ai.last_rule == "win"


def test_blocks_the_other_mark(ai):
    board = [X, X, _,
             _, O, _,
             _, _, _]
    assert ai.select_move(board, O) == 2
    assert ai.last_rule == "block"


def test_blocks_a_column_when_playing_x(ai):
    board = [O, X, _,
             O, _, X,
             _, _, _]
    assert ai.select_move(board, X) == 6
    assert ai.last_rule == "block"


def test_lowest_winning_index_is_taken(ai):
    board = [O, _, O,
             _, _, _,
             O, _, _]
    # O wins at 1 and at 3; the scan is ascending
    assert ai.select_move(board, O) == 1


def test_takes_center(ai):
    board = [X, _, _,
             _, _, _,
             _, _, _]
    assert ai.select_move(board, O) == 4
    assert ai.last_rule == "center"


def test_empty_board_takes_center(ai):
    assert ai.select_move([None] * 9, X) == 4


def test_takes_a_free_corner(ai):
    board = [_, _, _,
             _, X, _,
             _, _, _]
    assert ai.select_move(board, O) in {0, 2, 6, 8}
    assert ai.last_rule == "corner"


def test_corner_choice_only_uses_free_corners(ai):
    board = [X, _, _,
             _, O, _,
             _, _, X]
    assert ai.select_move(board, O) in {2, 6}


def test_corner_choice_is_reproducible_with_seed():
    board = [_, _, _,
             _, X, _,
             _, _, _]
    picks_a = [AIPlayer(rng=random.Random(7)).select_move(board, O) for _ in range(5)]
    picks_b = [AIPlayer(rng=random.Random(7)).select_move(board, O) for _ in range(5)]
    assert picks_a == picks_b


def test_takes_a_side_when_center_and_corners_are_gone(ai):
    board = [X, _, O,
             O, X, X,
             X, O, O]
    assert ai.select_move(board, X) == 1
    assert ai.last_rule == "side"


def test_uses_injected_win_checker():
    class CountingChecker(WinChecker):
        calls = 0

        def evaluate(self, board):
            CountingChecker.calls += 1
            return super().evaluate(board)

    ai = AIPlayer(rng=random.Random(0), win_checker=CountingChecker())
    ai.select_move([None] * 9, X)
    assert CountingChecker.calls > 0


@given(boards, st.sampled_from([X, O]), st.integers(min_value=0, max_value=1000))
def test_move_is_none_iff_no_moves_else_legal(board, mark, seed):
    ai = AIPlayer(rng=random.Random(seed))
    moves = WinChecker().available_moves(board)
    move = ai.select_move(board, mark)
    if not moves:
        assert move is None
    else:
        assert move in moves


@given(boards, st.sampled_from([X, O]))
def test_board_is_not_modified(board, mark):
    before = list(board)
    AIPlayer(rng=random.Random(0)).select_move(board, mark)
    assert board == before
