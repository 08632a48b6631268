"""Runtime settings.

Environment-first, with defaults that work from any CWD. CLI flags
override whatever is read here.
"""

from __future__ import annotations

import logging
import os

DEFAULT_AI_DELAY = 0.5
DEFAULT_MODE = "pvp"
MODES = ("pvp", "ai")


def ai_delay() -> float:
    """Seconds the console waits before showing the AI's reply.

    Order: env var TTT_AI_DELAY -> DEFAULT_AI_DELAY. Negative or
    unparsable values fall back to the default.
    """
    raw = os.getenv("TTT_AI_DELAY")
    if not raw:
        return DEFAULT_AI_DELAY
    try:
        value = float(raw)
    except ValueError:
        logging.warning("Ignoring TTT_AI_DELAY=%r (not a number)", raw)
        return DEFAULT_AI_DELAY
    if value < 0:
        logging.warning("Ignoring TTT_AI_DELAY=%r (negative)", raw)
        return DEFAULT_AI_DELAY
    return value


def default_mode() -> str:
    p = (os.getenv("TTT_MODE") or DEFAULT_MODE).strip().lower()
    if p not in MODES:
        logging.warning("Ignoring TTT_MODE=%r (expected one of %s)", p, ", ".join(MODES))
        return DEFAULT_MODE
    return p


def default_seed() -> int | None:
    raw = os.getenv("TTT_SEED")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logging.warning("Ignoring TTT_SEED=%r (not an integer)", raw)
        return None
