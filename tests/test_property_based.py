from typing import List

import pytest
try:
    from hypothesis import assume, given, settings, strategies as st  # type: ignore
    HAS_HYP = True
except ModuleNotFoundError:  # pragma: no cover - test infra
    HAS_HYP = False
    import pytest as _pytest  # type: ignore
    _pytest.skip("Hypothesis not installed", allow_module_level=True)

import numpy as np

from tictactoe_engine.controller import CellOccupied, GameController, GameOver, MoveError
from tictactoe_engine.game_basics import WIN_PATTERNS, Mark, legal_moves, outcome_of
from tictactoe_engine.tactics import choose_ai_move


def _count_lines(board: List[int], p: int) -> int:
    return sum(1 for pat in WIN_PATTERNS if all(board[i] == p for i in pat))


@given(st.lists(st.integers(min_value=0, max_value=2), min_size=9, max_size=9))
def test_outcome_of_definition_random(board: List[int]):
    x, o = _count_lines(board, 1), _count_lines(board, 2)
    assume(not (x and o))
    out = outcome_of(board)
    if x or o:
        assert out.winner is (Mark.X if x else Mark.O)
    elif 0 not in board:
        assert out.is_terminal and out.winner is None
    else:
        assert not out.is_terminal


@settings(max_examples=200)
@given(st.lists(st.integers(min_value=0, max_value=8), min_size=1, max_size=30))
def test_random_click_sequences_keep_invariants(clicks: List[int]):
    c = GameController()
    for idx in clicks:
        before = c.state
        try:
            c.apply_move(idx)
        except MoveError as exc:
            assert c.state == before
            if before.outcome.is_terminal:
                assert isinstance(exc, GameOver)
            else:
                assert isinstance(exc, CellOccupied)
            continue
        after = c.state
        assert after.outcome == outcome_of(after.board)
        if after.outcome.is_terminal:
            assert after.current_turn is before.current_turn
            assert after.scoreboard.games == before.scoreboard.games + 1
        else:
            assert after.current_turn is before.current_turn.opponent
            assert after.scoreboard == before.scoreboard
    assert c.state.scoreboard.games <= 1


@given(
    st.lists(st.integers(min_value=0, max_value=2), min_size=9, max_size=9),
    st.sampled_from([Mark.X, Mark.O]),
    st.integers(min_value=0, max_value=2**32 - 1),
)
def test_ai_always_picks_a_legal_cell(board: List[int], mark: Mark, seed: int):
    assume(not outcome_of(board).is_terminal)
    move = choose_ai_move(board, mark, np.random.default_rng(seed))
    assert move in legal_moves(board)
