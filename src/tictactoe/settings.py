"""Environment-driven settings for the command line front end.

Values are read at call time, so tests and shells can override them per run.
"""

from __future__ import annotations

import os

DEFAULT_PLAYERS = "3"

_TRUTHY = {"1", "true", "yes", "on"}


def default_players() -> str:
    """Menu choice used when no --players flag is given.

    Order: env var TTT_PLAYERS -> "3" (Computer vs Computer).
    The value is not validated here; the menu parser does that.
    """
    env = os.getenv("TTT_PLAYERS")
    return env if env else DEFAULT_PLAYERS


def verbose_from_env() -> bool:
    return os.getenv("TTT_VERBOSE", "").strip().lower() in _TRUTHY
