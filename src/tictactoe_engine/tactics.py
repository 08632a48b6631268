"""
Tactics and the heuristic opponent: immediate wins/blocks, center, corners.
Notes:
- The opponent looks one ply ahead only; it is deliberately beatable.
- Candidates are scanned in ascending index order so ties break reproducibly.
- Random branches draw from an injectable numpy Generator.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .game_basics import CENTER, CORNERS, Mark, legal_moves, line_winner, outcome_of, place


def immediate_winning_moves(board: Sequence[int], player: Mark) -> List[int]:
    wins: List[int] = []
    for i in legal_moves(board):
        if line_winner(place(board, i, player)) == player:
            wins.append(i)
    return wins


def choose_ai_move(
    board: Sequence[int],
    ai_mark: Mark,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Pick a cell for `ai_mark` by fixed priority.

    Order: win now, block the opponent, take the center, a random free
    corner, then any random free cell. Raises ValueError on a board that
    is already decided or has no free cell.
    """
    if outcome_of(board).is_terminal:
        raise ValueError("choose_ai_move called on a finished board")
    moves = legal_moves(board)
    ai_mark = Mark(ai_mark)

    wins = immediate_winning_moves(board, ai_mark)
    if wins:
        return wins[0]

    blocks = immediate_winning_moves(board, ai_mark.opponent)
    if blocks:
        return blocks[0]

    if CENTER in moves:
        return CENTER

    if rng is None:
        rng = np.random.default_rng()
    corners = [i for i in CORNERS if i in moves]
    if corners:
        return int(rng.choice(corners))
    return int(rng.choice(moves))
