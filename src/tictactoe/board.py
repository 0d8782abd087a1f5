"""
Board representation: positions, marks and the write-once cell map.
Teaching notes:
- A position is a (horizontal, vertical) pair of small enums, so it hashes by value.
- Cells are write-once: the first mark placed on a cell stays for the board's lifetime.
- The 9-char string form (0=empty, 1=X, 2=O, row-major from top-left) is the
  same encoding the rest of the tooling uses.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Mark(Enum):
    X = 'X'
    O = 'O'

    def __str__(self) -> str:
        return self.value


class HorizontalPos(Enum):
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'


class VerticalPos(Enum):
    TOP = 'top'
    CENTER = 'center'
    BOTTOM = 'bottom'


Position = Tuple[HorizontalPos, VerticalPos]


def horizontal_positions() -> List[HorizontalPos]:
    return [HorizontalPos.LEFT, HorizontalPos.CENTER, HorizontalPos.RIGHT]


def vertical_positions() -> List[VerticalPos]:
    return [VerticalPos.TOP, VerticalPos.CENTER, VerticalPos.BOTTOM]


def all_positions() -> List[Position]:
    """All 9 positions in row-major order (top row first, left to right)."""
    return [(x, y) for y in vertical_positions() for x in horizontal_positions()]


class Board:
    """A 3x3 grid holding at most one mark per cell."""

    def __init__(self) -> None:
        self._cells: Dict[Position, Mark] = {}

    def get_cell(self, x: HorizontalPos, y: VerticalPos) -> Optional[Mark]:
        return self._cells.get((x, y))

    def set_cell(self, x: HorizontalPos, y: VerticalPos, mark: Mark) -> None:
        """Mark an empty cell. Writes to an occupied cell are ignored."""
        if (x, y) in self._cells:
            logger.debug("Ignoring %s at (%s, %s): cell holds %s",
                         mark, x.value, y.value, self._cells[(x, y)])
            return
        self._cells[(x, y)] = mark

    def is_empty(self, x: HorizontalPos, y: VerticalPos) -> bool:
        return (x, y) not in self._cells

    def marked_cells(self) -> Iterator[Tuple[Position, Mark]]:
        for pos in all_positions():
            mark = self._cells.get(pos)
            if mark is not None:
                yield pos, mark

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({serialize_board(self)!r})"


_MARK_DIGITS = {Mark.X: '1', Mark.O: '2'}
_DIGIT_MARKS = {'1': Mark.X, '2': Mark.O}


def serialize_board(board: Board) -> str:
    out = []
    for x_y in all_positions():
        mark = board.get_cell(*x_y)
        out.append('0' if mark is None else _MARK_DIGITS[mark])
    return ''.join(out)


def deserialize_board(board_str: str) -> Board:
    if len(board_str) != 9 or any(c not in "012" for c in board_str):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    board = Board()
    for (x, y), c in zip(all_positions(), board_str):
        if c != '0':
            board.set_cell(x, y, _DIGIT_MARKS[c])
    return board
