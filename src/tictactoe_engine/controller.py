"""
Game controller: owns the match state and is its only mutation point.

Every change builds a new frozen MatchState and swaps it in whole, so a
reader never observes a board whose outcome, turn or scores lag behind it.
The outcome is always recomputed from the board; callers cannot set it.

Automated replies are planned as PendingMove values stamped with the match
epoch. The epoch advances on every new game or mode switch, and a pending
move from an older epoch is dropped instead of landing on a fresh board.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

import numpy as np

from .game_basics import (
    EMPTY,
    IN_PROGRESS,
    Board,
    Mark,
    Outcome,
    Status,
    empty_board,
    outcome_of,
    place,
)
from .tactics import choose_ai_move


class Mode(Enum):
    PLAYER_VS_PLAYER = "pvp"
    PLAYER_VS_AI = "ai"


class MoveError(ValueError):
    """A routine move rejection; the state is left untouched."""

    def __init__(self, index: int, message: str):
        super().__init__(message)
        self.index = index


class CellOccupied(MoveError):
    def __init__(self, index: int):
        super().__init__(index, f"Cell {index} is already occupied")


class GameOver(MoveError):
    def __init__(self, index: int):
        super().__init__(index, "Game is already over")


class InvalidCell(MoveError):
    def __init__(self, index: int):
        super().__init__(index, f"Invalid cell {index}. Must be 0-8.")


@dataclass(frozen=True)
class Scoreboard:
    wins_x: int = 0
    wins_o: int = 0
    ties: int = 0

    def record(self, outcome: Outcome) -> "Scoreboard":
        if outcome.status is Status.TIED:
            return replace(self, ties=self.ties + 1)
        if outcome.status is Status.WON:
            if outcome.winner is Mark.X:
                return replace(self, wins_x=self.wins_x + 1)
            return replace(self, wins_o=self.wins_o + 1)
        return self

    @property
    def games(self) -> int:
        return self.wins_x + self.wins_o + self.ties


@dataclass(frozen=True)
class MatchState:
    board: Board = field(default_factory=empty_board)
    current_turn: Mark = Mark.X
    outcome: Outcome = IN_PROGRESS
    mode: Mode = Mode.PLAYER_VS_PLAYER
    scoreboard: Scoreboard = field(default_factory=Scoreboard)
    epoch: int = 0


@dataclass(frozen=True)
class PendingMove:
    cell: int
    mark: Mark
    epoch: int


class GameController:
    ai_mark = Mark.O

    def __init__(
        self,
        mode: Mode = Mode.PLAYER_VS_PLAYER,
        rng: Optional[np.random.Generator] = None,
    ):
        self._state = MatchState(mode=Mode(mode))
        self._rng = rng if rng is not None else np.random.default_rng()

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def ai_to_move(self) -> bool:
        s = self._state
        return (
            s.mode is Mode.PLAYER_VS_AI
            and s.current_turn is self.ai_mark
            and not s.outcome.is_terminal
        )

    def apply_move(self, cell_index: int) -> None:
        """Place the current player's mark at `cell_index`.

        Raises GameOver once the match is decided, CellOccupied for a taken
        cell and InvalidCell for an index outside 0-8. On the move that
        decides the match the scoreboard is updated and the mover keeps the
        turn; otherwise the turn passes to the other mark.
        """
        s = self._state
        if s.outcome.is_terminal:
            raise GameOver(cell_index)
        if not 0 <= cell_index < 9:
            raise InvalidCell(cell_index)
        if s.board[cell_index] != EMPTY:
            raise CellOccupied(cell_index)

        board = place(s.board, cell_index, s.current_turn)
        outcome = outcome_of(board)
        if outcome.is_terminal:
            self._state = replace(
                s,
                board=board,
                outcome=outcome,
                scoreboard=s.scoreboard.record(outcome),
            )
            logging.info("Match over: %s", outcome)
        else:
            self._state = replace(s, board=board, outcome=outcome, current_turn=s.current_turn.opponent)
        logging.debug("%s -> %d", s.current_turn, cell_index)

    def new_game(self) -> None:
        s = self._state
        self._state = replace(
            s,
            board=empty_board(),
            current_turn=Mark.X,
            outcome=IN_PROGRESS,
            epoch=s.epoch + 1,
        )

    def reset_scores(self) -> None:
        self._state = replace(self._state, scoreboard=Scoreboard())

    def set_mode(self, mode: Mode) -> None:
        s = self._state
        self._state = replace(
            s,
            mode=Mode(mode),
            board=empty_board(),
            current_turn=Mark.X,
            outcome=IN_PROGRESS,
            epoch=s.epoch + 1,
        )

    def plan_ai_move(self) -> PendingMove:
        if not self.ai_to_move:
            raise RuntimeError("It is not the AI's turn")
        s = self._state
        cell = choose_ai_move(s.board, self.ai_mark, self._rng)
        return PendingMove(cell=cell, mark=self.ai_mark, epoch=s.epoch)

    def play_pending(self, pending: PendingMove) -> bool:
        """Apply a planned AI move unless the match moved on since it was planned."""
        if pending.epoch != self._state.epoch:
            logging.debug("Dropping stale AI move %d (epoch %d, now %d)",
                          pending.cell, pending.epoch, self._state.epoch)
            return False
        if not self.ai_to_move:
            logging.debug("Dropping AI move %d: not the AI's turn", pending.cell)
            return False
        try:
            self.apply_move(pending.cell)
        except MoveError as exc:
            logging.debug("Dropping AI move %d: %s", pending.cell, exc)
            return False
        return True
