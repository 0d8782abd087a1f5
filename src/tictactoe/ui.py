"""
Text front end: board rendering and the player-selection menu.

Rendering is a pure function of the board. Rows are drawn top to bottom,
cells left to right, with "|" between cells and a dashed line between rows.
"""
from __future__ import annotations

from typing import Tuple

from .board import Board, HorizontalPos, VerticalPos, horizontal_positions, vertical_positions
from .game import Game, PlayerKind

CELL_SEPARATOR = "|"
ROW_SEPARATOR = "\n-----\n"

MENU = "\n".join([
    "Choose game players:",
    "  1) Human vs Computer",
    "  2) Human vs Human",
    "  3) Computer vs Computer",
])

_MENU_CHOICES = {
    "1": (PlayerKind.HUMAN, PlayerKind.COMPUTER),
    "2": (PlayerKind.HUMAN, PlayerKind.HUMAN),
    "3": (PlayerKind.COMPUTER, PlayerKind.COMPUTER),
}


class PlayerParseError(ValueError):
    """Raised when a menu choice does not name a player pairing."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw)
        self.raw = raw

    def __str__(self) -> str:
        return f"Unable to parse game players from string index: {self.raw}"


def parse_game_players(raw: str) -> Tuple[PlayerKind, PlayerKind]:
    # exact match only: " 1" or "1\n" are rejected
    try:
        return _MENU_CHOICES[raw]
    except KeyError:
        raise PlayerParseError(raw) from None


def render_cell(board: Board, x: HorizontalPos, y: VerticalPos) -> str:
    mark = board.get_cell(x, y)
    return " " if mark is None else mark.value


def render_row(board: Board, y: VerticalPos) -> str:
    return CELL_SEPARATOR.join(render_cell(board, x, y) for x in horizontal_positions())


def render_board(board: Board) -> str:
    return ROW_SEPARATOR.join(render_row(board, y) for y in vertical_positions())


class Ui:
    """Owns a game and shows its board."""

    def __init__(self, game: Game | None = None) -> None:
        self.game = game if game is not None else Game()

    def show_cell(self, x: HorizontalPos, y: VerticalPos) -> str:
        return render_cell(self.game.board, x, y)

    def show_row(self, y: VerticalPos) -> str:
        return render_row(self.game.board, y)

    def show_board(self) -> str:
        return render_board(self.game.board)

    def parse_game_players(self, raw: str) -> Tuple[PlayerKind, PlayerKind]:
        return parse_game_players(raw)
