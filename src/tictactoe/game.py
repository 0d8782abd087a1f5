"""
Game state: two player designations, a board, and whose mark comes next.
Teaching notes:
- X always starts; every call to next_mark hands out the current mark and flips the turn.
- fetch_move pairs the mark with a placeholder cell index. Real move selection
  (parsing human input, a computer strategy) is not part of this core.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Tuple

from .board import Board, Mark

logger = logging.getLogger(__name__)

BoardCell = int

PLACEHOLDER_CELL: BoardCell = 0


class PlayerKind(Enum):
    COMPUTER = 'computer'
    HUMAN = 'human'


class Game:
    def __init__(self, player_1: PlayerKind = PlayerKind.COMPUTER,
                 player_2: PlayerKind = PlayerKind.COMPUTER) -> None:
        self.player_1 = player_1
        self.player_2 = player_2
        self.board = Board()
        self._x_to_move = True
        logger.debug("New game: %s vs %s", player_1.value, player_2.value)

    @property
    def players(self) -> Tuple[PlayerKind, PlayerKind]:
        return self.player_1, self.player_2

    def next_mark(self) -> Mark:
        mark = Mark.X if self._x_to_move else Mark.O
        self._x_to_move = not self._x_to_move
        return mark

    def fetch_move(self) -> Tuple[BoardCell, Mark]:
        return PLACEHOLDER_CELL, self.next_mark()
