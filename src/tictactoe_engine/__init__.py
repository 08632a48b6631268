"""tictactoe_engine package.

Board evaluation, the match controller, the heuristic opponent, and a
terminal front end.

Convenience imports are exposed for common workflows.
"""

from .controller import (
    CellOccupied,
    GameController,
    GameOver,
    InvalidCell,
    MatchState,
    Mode,
    MoveError,
    PendingMove,
    Scoreboard,
)
from .game_basics import Mark, Outcome, Status, legal_moves, line_winner, outcome_of
from .tactics import choose_ai_move

__all__ = [
    "GameController",
    "MatchState",
    "Mode",
    "Scoreboard",
    "PendingMove",
    "MoveError",
    "CellOccupied",
    "GameOver",
    "InvalidCell",
    "Mark",
    "Outcome",
    "Status",
    "legal_moves",
    "line_winner",
    "outcome_of",
    "choose_ai_move",
]
