"""
Game basics: board representation, serialization, winner/tie checks, legal moves.
Notes:
- A board is a tuple of 9 cells in row-major order: 0=empty, 1=X, 2=O. X always starts.
- Boards are immutable snapshots; `place` returns a new board.
- The outcome is derived from the cells alone, never stored separately.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple

Board = Tuple[int, ...]

EMPTY = 0
CENTER = 4
CORNERS = (0, 2, 6, 8)

WIN_PATTERNS = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
]


class Mark(IntEnum):
    X = 1
    O = 2

    @property
    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self) -> str:
        return self.name


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Optional[Mark] = None

    @classmethod
    def won(cls, mark: Mark) -> "Outcome":
        return cls(Status.WON, Mark(mark))

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.IN_PROGRESS

    def __str__(self) -> str:
        if self.status is Status.WON:
            return f"won_{self.winner.name}"
        return self.status.value


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
TIED = Outcome(Status.TIED)


def empty_board() -> Board:
    return (EMPTY,) * 9


def serialize_board(board: Sequence[int]) -> str:
    return ''.join(str(int(cell)) for cell in board)


def deserialize_board(board_str: str) -> Board:
    raw = board_str.strip()
    if len(raw) != 9 or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    return tuple(int(c) for c in raw)


def place(board: Sequence[int], index: int, mark: Mark) -> Board:
    lst = list(board)
    lst[index] = int(mark)
    return tuple(lst)


def winning_line(board: Sequence[int]) -> Optional[Tuple[int, int, int]]:
    for pattern in WIN_PATTERNS:
        a, b, c = pattern
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return pattern
    return None


def line_winner(board: Sequence[int]) -> Optional[Mark]:
    """Mark owning the first completed triple, or None.

    Boards with two different completed triples cannot arise through
    `GameController.apply_move`, so no attempt is made to arbitrate them.
    """
    line = winning_line(board)
    if line is None:
        return None
    return Mark(board[line[0]])


def is_full(board: Sequence[int]) -> bool:
    return EMPTY not in board


def outcome_of(board: Sequence[int]) -> Outcome:
    w = line_winner(board)
    if w is not None:
        return Outcome.won(w)
    if is_full(board):
        return TIED
    return IN_PROGRESS


def legal_moves(board: Sequence[int]) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def side_to_move(board: Sequence[int]) -> Mark:
    x = sum(1 for v in board if v == Mark.X)
    o = sum(1 for v in board if v == Mark.O)
    return Mark.X if x == o else Mark.O


def is_valid_state(board: Sequence[int]) -> bool:
    """True if the board can arise from alternating play with X first."""
    x = sum(1 for v in board if v == Mark.X)
    o = sum(1 for v in board if v == Mark.O)
    if not (x == o or x == o + 1):
        return False

    def count_wins(p: int) -> int:
        return sum(1 for pat in WIN_PATTERNS if all(board[i] == p for i in pat))

    x_wins, o_wins = count_wins(Mark.X), count_wins(Mark.O)
    if x_wins and o_wins:
        return False
    if x_wins and x != o + 1:
        return False
    if o_wins and x != o:
        return False
    return True


def format_board(board: Sequence[int]) -> str:
    symbols = {EMPTY: ' ', Mark.X: 'X', Mark.O: 'O'}
    rows = []
    for r in range(3):
        cells = board[r * 3:(r + 1) * 3]
        rows.append(' ' + ' | '.join(symbols[v] for v in cells))
    return '\n---+---+---\n'.join(rows)
