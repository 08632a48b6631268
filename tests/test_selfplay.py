import numpy as np
import pytest

from tictactoe_engine.controller import GameController, Mode
from tictactoe_engine.selfplay import play_one, run_selfplay


def test_totals_match_game_count():
    sb = run_selfplay(games=25, seed=1)
    assert sb.games == 25


def test_same_seed_same_tally():
    assert run_selfplay(games=30, seed=42) == run_selfplay(games=30, seed=42)


def test_zero_games():
    assert run_selfplay(games=0, seed=0).games == 0


def test_negative_games_rejected():
    with pytest.raises(ValueError):
        run_selfplay(games=-1)


def test_play_one_reaches_terminal_state():
    rng = np.random.default_rng(5)
    c = GameController(mode=Mode.PLAYER_VS_AI, rng=rng)
    play_one(c, rng)
    assert c.state.outcome.is_terminal
    assert c.state.scoreboard.games == 1
