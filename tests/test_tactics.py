import numpy as np
import pytest

from tictactoe_engine.game_basics import CORNERS, Mark, deserialize_board, empty_board, place
from tictactoe_engine.tactics import choose_ai_move, immediate_winning_moves


def test_win_now_beats_block():
    # O O _ / X X _ / _ _ _  -> O completes the top row rather than blocking 5
    b = deserialize_board("220110000")
    assert choose_ai_move(b, Mark.O) == 2


def test_block_beats_center():
    # X X _ / O _ _ / _ _ _  -> center is open but X threatens 2
    b = deserialize_board("110200000")
    assert choose_ai_move(b, Mark.O) == 2


def test_center_when_no_threats():
    b = deserialize_board("100000000")
    assert choose_ai_move(b, Mark.O) == 4


def test_first_winning_index_is_chosen():
    # O can win at 2 (top row) and at 6 (left column); ascending order picks 2
    b = deserialize_board("220211010")
    assert immediate_winning_moves(b, Mark.O) == [2, 6]
    assert choose_ai_move(b, Mark.O) == 2


def test_first_blocking_index_is_chosen():
    # X threatens 2 and 6; O has no win, blocks the lower index
    b = deserialize_board("110120000")
    assert immediate_winning_moves(b, Mark.O) == []
    assert immediate_winning_moves(b, Mark.X) == [2, 6]
    assert choose_ai_move(b, Mark.O) == 2


@pytest.mark.parametrize("seed", range(20))
def test_corner_when_center_taken(seed):
    b = place(empty_board(), 4, Mark.X)
    move = choose_ai_move(b, Mark.O, np.random.default_rng(seed))
    assert move in CORNERS


def test_corner_pick_only_free_corners():
    # X O _ / _ X _ / _ _ O : no threats for either side
    b = deserialize_board("120010002")
    assert immediate_winning_moves(b, Mark.X) == []
    assert immediate_winning_moves(b, Mark.O) == []
    picks = {choose_ai_move(b, Mark.X, np.random.default_rng(s)) for s in range(40)}
    assert picks <= {2, 6}
    assert picks == {2, 6}


@pytest.mark.parametrize("seed", range(20))
def test_edge_fallback_when_center_and_corners_taken(seed):
    # X O X / _ X _ / O X O : only edges 3 and 5 are free and neither completes a line
    b = deserialize_board("121010212")
    assert immediate_winning_moves(b, Mark.O) == []
    assert immediate_winning_moves(b, Mark.X) == []
    move = choose_ai_move(b, Mark.O, np.random.default_rng(seed))
    assert move in (3, 5)


def test_seeded_choice_is_reproducible():
    b = place(empty_board(), 4, Mark.X)
    a = [choose_ai_move(b, Mark.O, np.random.default_rng(7)) for _ in range(5)]
    assert len(set(a)) == 1


def test_default_rng_is_used_when_none_given():
    b = place(empty_board(), 4, Mark.X)
    assert choose_ai_move(b, Mark.O) in CORNERS


@pytest.mark.parametrize("raw", ["121122212", "111220000", "222110100"])
def test_finished_board_is_a_caller_error(raw):
    with pytest.raises(ValueError):
        choose_ai_move(deserialize_board(raw), Mark.O)
