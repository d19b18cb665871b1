"""
connect4core.game - Board, win detection and turn sequencing

Board holds the grid, LineScanner finds wins through the last disc, and
GameController ties them together for a single game.
"""

from connect4core.game.board import Board, DropResult
from connect4core.game.scanner import LineScanner
from connect4core.game.rules import (ConnectFourEnv, GameController, GameState,
                                     GameStatus, MoveResult, new_game)

__all__ = ['Board', 'DropResult', 'LineScanner', 'GameController', 'GameState',
           'GameStatus', 'MoveResult', 'ConnectFourEnv', 'new_game']
