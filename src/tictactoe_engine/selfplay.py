"""
Self-play: the heuristic opponent (O) against a uniformly random X.
Both sides move through GameController.apply_move and share one seeded
generator, so a given seed always yields the same tally.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .controller import GameController, Mode, Scoreboard
from .game_basics import legal_moves


def play_one(controller: GameController, rng: np.random.Generator) -> None:
    while not controller.state.outcome.is_terminal:
        if controller.ai_to_move:
            pending = controller.plan_ai_move()
            controller.play_pending(pending)
        else:
            moves = legal_moves(controller.state.board)
            controller.apply_move(int(rng.choice(moves)))


def run_selfplay(games: int = 100, seed: Optional[int] = None) -> Scoreboard:
    if games < 0:
        raise ValueError(f"games must be >= 0, got {games}")
    rng = np.random.default_rng(seed)
    controller = GameController(mode=Mode.PLAYER_VS_AI, rng=rng)
    for g in range(games):
        if g:
            controller.new_game()
        play_one(controller, rng)
    sb = controller.state.scoreboard
    logging.info("Self-play over %d games: random X=%d heuristic O=%d ties=%d",
                 games, sb.wins_x, sb.wins_o, sb.ties)
    return sb
