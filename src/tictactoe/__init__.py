"""tictactoe package.

Board state, turn alternation, text rendering, and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .board import (
    Board,
    HorizontalPos,
    Mark,
    VerticalPos,
    all_positions,
    deserialize_board,
    horizontal_positions,
    serialize_board,
    vertical_positions,
)
from .game import Game, PlayerKind
from .ui import PlayerParseError, Ui, parse_game_players, render_board, render_cell, render_row

__all__ = [
    "Board",
    "HorizontalPos",
    "VerticalPos",
    "Mark",
    "all_positions",
    "horizontal_positions",
    "vertical_positions",
    "serialize_board",
    "deserialize_board",
    "Game",
    "PlayerKind",
    "Ui",
    "PlayerParseError",
    "parse_game_players",
    "render_cell",
    "render_row",
    "render_board",
]
