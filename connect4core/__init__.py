"""
connect4core - Connect Four game state machine

This package provides the rules of Connect Four as plain state transitions
and queries: gravity-constrained drops, turn alternation, and four-in-a-row
and draw detection. Drawing the board, animating discs and reading input
are left to whatever presentation layer drives it.
"""

__version__ = '0.1.0'

from connect4core.game.rules import GameController, GameState, GameStatus, MoveResult, new_game
from connect4core.utils import Cell, IllegalMoveError, MoveError, Player, Position

__all__ = ['new_game', 'GameController', 'GameState', 'GameStatus', 'MoveResult',
           'Cell', 'Player', 'Position', 'MoveError', 'IllegalMoveError']
