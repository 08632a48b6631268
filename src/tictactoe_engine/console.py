"""
Terminal presentation for a match.

Reads MatchState snapshots and forwards the four input events to the
controller. Rejected moves are ignored, like clicks on a disabled cell.
The AI's reply is held back by `ai_delay` seconds for pacing only; the
planned move carries its epoch so a reply planned before a new game or
mode switch is dropped.
"""
from __future__ import annotations

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from .controller import GameController, Mode, MoveError, PendingMove
from .game_basics import format_board
from .labels import score_line, status_line

HELP = "Commands: 1-9 play a cell, n new game, r reset scores, m pvp|ai switch mode, q quit"


class ConsoleGame:
    def __init__(
        self,
        controller: GameController,
        ai_delay: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
        out: Optional[TextIO] = None,
    ):
        self.controller = controller
        self.ai_delay = ai_delay
        self._sleep = sleep
        self._out = out if out is not None else sys.stdout
        self.pending: Optional[PendingMove] = None

    # input events

    def cell_clicked(self, index: int) -> bool:
        if self.controller.ai_to_move:
            logging.debug("Ignoring click on %d while the AI is to move", index)
            return False
        try:
            self.controller.apply_move(index)
        except MoveError as exc:
            logging.debug("Ignoring click on %d: %s", index, exc)
            return False
        self._schedule_ai()
        return True

    def mode_selected(self, mode: Mode) -> None:
        self.pending = None
        self.controller.set_mode(mode)

    def new_game_requested(self) -> None:
        self.pending = None
        self.controller.new_game()

    def scores_reset_requested(self) -> None:
        self.controller.reset_scores()

    # AI pacing

    def _schedule_ai(self) -> None:
        if self.controller.ai_to_move:
            self.pending = self.controller.plan_ai_move()

    def run_pending(self) -> bool:
        """Wait out the pacing delay, then apply the scheduled AI move if still current."""
        pending, self.pending = self.pending, None
        if pending is None:
            return False
        if self.ai_delay > 0:
            self._sleep(self.ai_delay)
        return self.controller.play_pending(pending)

    # rendering

    def render(self) -> str:
        state = self.controller.state
        lines = [
            format_board(state.board),
            "",
            status_line(state),
            score_line(state.scoreboard),
        ]
        if state.mode is Mode.PLAYER_VS_AI:
            lines.append("You're playing as X against the AI (O)")
        return "\n".join(lines)

    def show(self) -> None:
        print(self.render() + "\n", file=self._out)

    def handle_command(self, line: str) -> bool:
        """Dispatch one line of input. Returns False when the player quits."""
        cmd = line.strip().lower()
        if not cmd:
            return True
        if cmd in ("q", "quit"):
            return False
        if cmd in ("n", "new"):
            self.new_game_requested()
        elif cmd in ("r", "reset"):
            self.scores_reset_requested()
        elif cmd.startswith("m"):
            parts = cmd.split()
            if len(parts) != 2 or parts[1] not in ("pvp", "ai"):
                print("Usage: m pvp|ai", file=self._out)
                return True
            self.mode_selected(Mode(parts[1]))
        elif cmd.isdecimal() and 1 <= int(cmd) <= 9:
            self.cell_clicked(int(cmd) - 1)
        else:
            print(HELP, file=self._out)
            return True
        self.show()
        if self.pending is not None and self.run_pending():
            self.show()
        return True

    def run(self, input_fn: Callable[[str], str] = input) -> None:
        print(HELP, file=self._out)
        self.show()
        while True:
            try:
                line = input_fn("> ")
            except EOFError:
                break
            if not self.handle_command(line):
                break
