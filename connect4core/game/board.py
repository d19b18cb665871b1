"""
board.py - Board representation and gravity-constrained insertion

The Board only knows about cells. It never decides whose turn it is or
whether a game is over; that belongs to the GameController in rules.py.
"""

import operator
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from connect4core.debug import debug
from connect4core.utils import (DEFAULT_WIDTH, DEFAULT_HEIGHT, Cell, MoveError,
                                Player, Position, validate_dimensions)


@dataclass(frozen=True)
class DropResult:
    """Outcome of Board.drop: a position on success, an error otherwise."""
    position: Optional[Position] = None
    error: Optional[MoveError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Board:
    """
    A width x height Connect Four grid.

    The grid is an int8 numpy array indexed [row, column] holding Cell
    values, row 0 being the floor. Occupied cells in a column always form
    a contiguous run from the floor because drop() is the only mutator.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        validate_dimensions(width, height)
        self.width = width
        self.height = height
        debug.debug(f"Initializing {width}x{height} board", "board")
        self.reset()

    def reset(self) -> None:
        """Empty every cell."""
        self._grid = np.full((self.height, self.width), Cell.EMPTY.value, dtype=np.int8)
        # Number of discs per column, i.e. the row the next disc lands on
        self._heights = [0] * self.width
        self._occupied = 0

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board with the same contents
        """
        new_board = Board.__new__(Board)
        new_board.width = self.width
        new_board.height = self.height
        new_board._grid = self._grid.copy()
        new_board._heights = self._heights.copy()
        new_board._occupied = self._occupied
        return new_board

    def in_bounds(self, position: Position) -> bool:
        column, row = position
        return 0 <= column < self.width and 0 <= row < self.height

    def is_valid_column(self, column: int) -> bool:
        return 0 <= column < self.width

    def drop(self, column: int, player: Player) -> DropResult:
        """
        Drop a disc for `player` into `column`.

        The disc lands on the lowest empty row. Exactly one cell changes on
        success and nothing changes on failure.

        Args:
            column: Column index (0-indexed)
            player: Owner of the disc

        Returns:
            DropResult with the landing Position, or INVALID_COLUMN /
            COLUMN_FULL as the error
        """
        column = operator.index(column)

        if not self.is_valid_column(column):
            debug.debug(f"Rejected drop: column {column} out of bounds", "board")
            return DropResult(error=MoveError.INVALID_COLUMN)

        row = self._heights[column]
        if row >= self.height:
            debug.debug(f"Rejected drop: column {column} is full", "board")
            return DropResult(error=MoveError.COLUMN_FULL)

        self._grid[row, column] = Cell.of(player).value
        self._heights[column] = row + 1
        self._occupied += 1

        position = Position(column, row)
        debug.trace(f"Placed {player} disc at {tuple(position)}", "board")
        return DropResult(position=position)

    def cell_at(self, position: Position) -> Cell:
        """
        Content of the cell at `position`.

        Positions outside the grid yield Cell.BOUNDARY instead of raising,
        so scans can walk off the edge and simply stop matching.
        """
        if not self.in_bounds(position):
            return Cell.BOUNDARY
        column, row = position
        return Cell(int(self._grid[row, column]))

    def column_height(self, column: int) -> int:
        """Number of discs in `column`."""
        if not self.is_valid_column(column):
            raise ValueError(f"Column {column} out of range 0..{self.width - 1}")
        return self._heights[column]

    def is_column_full(self, column: int) -> bool:
        return self.column_height(column) >= self.height

    def valid_columns(self) -> List[int]:
        """Columns that can still take a disc."""
        return [c for c in range(self.width) if self._heights[c] < self.height]

    @property
    def occupied_count(self) -> int:
        return self._occupied

    @property
    def size(self) -> int:
        return self.width * self.height

    def is_full(self) -> bool:
        return self._occupied == self.size

    def to_array(self) -> np.ndarray:
        """
        Snapshot of the grid as an int8 array indexed [row, column].

        The copy is detached from the board and marked read-only.
        """
        snapshot = self._grid.copy()
        snapshot.flags.writeable = False
        return snapshot

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            np.array_equal(self._grid, other._grid)

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, discs={self._occupied})"
