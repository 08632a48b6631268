from __future__ import annotations

import argparse
import logging
from typing import Optional

import numpy as np

from . import settings
from .console import ConsoleGame
from .controller import GameController, Mode
from .game_basics import (
    Mark,
    deserialize_board,
    is_valid_state,
    legal_moves,
    outcome_of,
    side_to_move,
)
from .selfplay import run_selfplay
from .tactics import choose_ai_move, immediate_winning_moves


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe engine CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the AI's random choices (default: $TTT_SEED, else unseeded)",
    )

    p_play = sub.add_parser("play", help="Play in the terminal")
    p_play.add_argument(
        "--mode",
        choices=list(settings.MODES),
        default=None,
        help="pvp (two humans) or ai (you are X against the AI); default: $TTT_MODE or pvp",
    )
    p_play.add_argument(
        "--ai-delay",
        type=float,
        default=None,
        help="Seconds before the AI's reply is shown (default: $TTT_AI_DELAY or 0.5)",
    )

    p_sug = sub.add_parser("suggest", help="Show the heuristic opponent's move for a board")
    p_sug.add_argument("--board", required=True, help="Board string, e.g., 110200000 (0=empty,1=X,2=O)")
    p_sug.add_argument(
        "--mark",
        type=int,
        choices=[1, 2],
        default=None,
        help="Mark to move (1=X, 2=O); inferred from piece counts if omitted",
    )

    p_out = sub.add_parser("outcome", help="Classify a board as in progress, won or tied")
    p_out.add_argument("--board", required=True, help="Board string, e.g., 111220000")

    p_self = sub.add_parser("selfplay", help="Heuristic opponent (O) against a random X")
    p_self.add_argument("--games", type=int, default=100, help="Number of games (default: 100)")

    return p


def _set_global_seed(seed: Optional[int]) -> None:
    if seed is None:
        return
    import random

    random.seed(seed)
    np.random.seed(seed)


def _print_info() -> None:
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    print(f"numpy={np.__version__}")


def _parse_board(raw: str):
    try:
        b = deserialize_board(raw)
    except ValueError:
        logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
        return None
    if not is_valid_state(b):
        logging.error("Board is not a valid reachable state.")
        return None
    return b


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        from importlib.metadata import PackageNotFoundError, version as _ver

        try:
            print(_ver("tictactoe-engine"))
        except PackageNotFoundError:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    seed = ns.seed if ns.seed is not None else settings.default_seed()
    _set_global_seed(seed)

    if ns.cmd == "play":
        mode = Mode(ns.mode or settings.default_mode())
        delay = ns.ai_delay if ns.ai_delay is not None else settings.ai_delay()
        if delay < 0:
            logging.error("--ai-delay must be >= 0: %s", delay)
            return 2
        controller = GameController(mode=mode, rng=np.random.default_rng(seed))
        try:
            ConsoleGame(controller, ai_delay=delay).run()
        except KeyboardInterrupt:
            pass
        sb = controller.state.scoreboard
        logging.info("Final score X=%d O=%d ties=%d", sb.wins_x, sb.wins_o, sb.ties)
        return 0

    if ns.cmd == "suggest":
        b = _parse_board(ns.board)
        if b is None:
            return 2
        if outcome_of(b).is_terminal:
            logging.error("Board is already decided; there is no move to suggest.")
            return 2
        mark = Mark(ns.mark) if ns.mark is not None else side_to_move(b)
        move = choose_ai_move(b, mark, np.random.default_rng(seed))
        logging.info(
            "to_move=%s move=%d wins=%s blocks=%s",
            mark,
            move,
            immediate_winning_moves(b, mark),
            immediate_winning_moves(b, mark.opponent),
        )
        return 0

    if ns.cmd == "outcome":
        b = _parse_board(ns.board)
        if b is None:
            return 2
        logging.info("outcome=%s legal=%s", outcome_of(b), legal_moves(b))
        return 0

    if ns.cmd == "selfplay":
        if ns.games < 0:
            logging.error("--games must be >= 0: %s", ns.games)
            return 2
        run_selfplay(ns.games, seed)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
