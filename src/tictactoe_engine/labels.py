"""Display names and status text for presentations. Holds no state."""
from __future__ import annotations

from .controller import MatchState, Mode, Scoreboard
from .game_basics import Mark, Status


def player_label(mode: Mode, mark: Mark) -> str:
    if mode is Mode.PLAYER_VS_AI:
        return "Player" if mark is Mark.X else "AI"
    return f"Player {mark.name}"


def status_line(state: MatchState) -> str:
    outcome = state.outcome
    if outcome.status is Status.TIED:
        return "It's a Tie!"
    if outcome.status is Status.WON:
        return f"{player_label(state.mode, outcome.winner)} Wins!"
    return f"Current Turn: {player_label(state.mode, state.current_turn)}"


def score_line(scoreboard: Scoreboard) -> str:
    return f"X: {scoreboard.wins_x} | Ties: {scoreboard.ties} | O: {scoreboard.wins_o}"
