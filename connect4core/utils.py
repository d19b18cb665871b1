"""
utils.py - Constants, enumerations and small value types for connect4core

Everything here is plain data shared by the board, the line scanner and the
game controller. Nothing in this module knows how a disc is drawn.
"""

from enum import Enum, auto
from typing import NamedTuple, Optional, Tuple

# Game constants
DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
CONNECT_N = 4  # Number of discs in a row to win


class Player(Enum):
    """The two sides of a game. FIRST always opens."""
    FIRST = 1
    SECOND = 2

    def other(self) -> 'Player':
        """Get the other player."""
        return Player.SECOND if self is Player.FIRST else Player.FIRST

    def __str__(self):
        return self.name.capitalize()


class Cell(Enum):
    """
    Content of one board slot.

    EMPTY, FIRST and SECOND are the values a real cell can hold; the enum
    values double as the int8 codes stored in the board grid. BOUNDARY is
    what the board answers for positions outside the grid: it belongs to
    nobody, so it never matches an occupied cell and ends any run.
    """
    BOUNDARY = -1
    EMPTY = 0
    FIRST = 1
    SECOND = 2

    @classmethod
    def of(cls, player: Player) -> 'Cell':
        """The cell occupied by `player`."""
        return cls(player.value)

    @property
    def owner(self) -> Optional[Player]:
        """The player occupying this cell, or None for EMPTY / BOUNDARY."""
        if self is Cell.FIRST:
            return Player.FIRST
        if self is Cell.SECOND:
            return Player.SECOND
        return None

    @property
    def is_occupied(self) -> bool:
        return self.owner is not None


class Position(NamedTuple):
    """Board coordinate. Row 0 is the floor; rows count upward."""
    column: int
    row: int

    def step(self, direction: Tuple[int, int], distance: int = 1) -> 'Position':
        dc, dr = direction
        return Position(self.column + dc * distance, self.row + dr * distance)


class Move(NamedTuple):
    column: int
    player: Player


class Direction(Enum):
    """The four lines a disc can complete."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()    # bottom-left to top-right
    DIAGONAL_DOWN = auto()  # top-left to bottom-right

    @property
    def vector(self) -> Tuple[int, int]:
        return DIRECTION_VECTORS[self]


# Direction vectors as (column, row) steps
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (1, -1),
}


class MoveError(Enum):
    """Reasons a move can be rejected. None of them are fatal."""
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_ALREADY_OVER = auto()

    def describe(self, column: Optional[int] = None) -> str:
        if self is MoveError.INVALID_COLUMN:
            return f"Column {column} is off the board"
        if self is MoveError.COLUMN_FULL:
            return f"Column {column} is full"
        return "The game is already over"


class IllegalMoveError(Exception):
    """Raised by MoveResult.raise_for_error() for callers that prefer exceptions."""

    def __init__(self, error: MoveError, column: Optional[int] = None):
        super().__init__(error.describe(column))
        self.error = error
        self.column = column


def validate_dimensions(width: int, height: int) -> None:
    """Reject board sizes that cannot hold a game."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Board {name} must be an int, got {type(value).__name__}")
        if value < 1:
            raise ValueError(f"Board {name} must be positive, got {value}")
