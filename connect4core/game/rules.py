"""
rules.py - Turn sequencing, game state and the Gymnasium adapter

This module provides:
1. GameController, the façade a presentation layer drives move by move
2. GameState / MoveResult, the immutable values it hands back
3. ConnectFourEnv, a gymnasium-compatible wrapper around a GameController
"""

import operator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4core.debug import debug
from connect4core.game.board import Board
from connect4core.game.scanner import LineScanner
from connect4core.utils import (CONNECT_N, DEFAULT_HEIGHT, DEFAULT_WIDTH, Cell,
                                IllegalMoveError, Move, MoveError, Player, Position)


class GameStatus(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of where a game stands.

    IN_PROGRESS carries the player to move; WON carries the winner and the
    positions of the winning line; DRAW carries nothing. Use the
    constructors below rather than building one by hand.
    """
    status: GameStatus
    current_player: Optional[Player] = None
    winner: Optional[Player] = None
    winning_line: Tuple[Position, ...] = ()

    @classmethod
    def in_progress(cls, player: Player) -> 'GameState':
        return cls(GameStatus.IN_PROGRESS, current_player=player)

    @classmethod
    def won(cls, player: Player, line: List[Position]) -> 'GameState':
        return cls(GameStatus.WON, winner=player, winning_line=tuple(line))

    @classmethod
    def draw(cls) -> 'GameState':
        return cls(GameStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal()

    def __str__(self) -> str:
        if self.status is GameStatus.IN_PROGRESS:
            return f"In progress, {self.current_player} to move"
        if self.status is GameStatus.WON:
            line = ", ".join(f"({p.column},{p.row})" for p in self.winning_line)
            return f"{self.winner} wins with [{line}]"
        return "Draw"


@dataclass(frozen=True)
class MoveResult:
    """What play_move reports back: the landing position and new state, or an error."""
    column: int
    state: GameState
    position: Optional[Position] = None
    error: Optional[MoveError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> 'MoveResult':
        """Raise IllegalMoveError if the move was rejected, else return self."""
        if self.error is not None:
            raise IllegalMoveError(self.error, self.column)
        return self


class GameController:
    """
    Owns one Board and the GameState of a single game.

    Rejected moves (off-board column, full column, finished game) come back
    as MoveResult values with the error set and leave the game untouched.
    Not safe for concurrent use; callers serialize moves.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 connect_n: int = CONNECT_N):
        debug.debug(f"Initializing GameController ({width}x{height}, connect {connect_n})",
                    "game")
        self.board = Board(width, height)
        self.scanner = LineScanner(self.board, connect_n)
        self._state = GameState.in_progress(Player.FIRST)
        self._history: List[Move] = []
        self._last_position: Optional[Position] = None

    def reset(self) -> None:
        """Start a new game on an empty board of the same size."""
        debug.debug("Resetting game", "game")
        self.board.reset()
        self._state = GameState.in_progress(Player.FIRST)
        self._history = []
        self._last_position = None

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    def current_state(self) -> GameState:
        return self._state

    def cell_at(self, position: Position) -> Cell:
        return self.board.cell_at(position)

    def play_move(self, column: int) -> MoveResult:
        """
        Drop the current player's disc into `column`.

        Args:
            column: Column to play (0-indexed)

        Returns:
            MoveResult with the landing position and resulting state, or
            with the error set and the state unchanged
        """
        column = operator.index(column)
        state = self._state

        if state.is_terminal:
            debug.debug(f"Rejected move in column {column}: game is over ({state})", "game")
            return MoveResult(column, state, error=MoveError.GAME_ALREADY_OVER)

        player = state.current_player
        dropped = self.board.drop(column, player)
        if not dropped.ok:
            return MoveResult(column, state, error=dropped.error)

        position = dropped.position
        self._history.append(Move(column, player))
        self._last_position = position

        line = self.scanner.find_win(position, player)
        if line is not None:
            self._state = GameState.won(player, line)
            debug.info(f"{player} wins after move at {tuple(position)}", "game")
        elif self.board.is_full():
            self._state = GameState.draw()
            debug.info("Game ends in a draw", "game")
        else:
            self._state = GameState.in_progress(player.other())

        return MoveResult(column, self._state, position=position)

    def is_game_over(self) -> bool:
        return self._state.is_terminal

    @property
    def current_player(self) -> Optional[Player]:
        return self._state.current_player

    @property
    def winner(self) -> Optional[Player]:
        return self._state.winner

    @property
    def last_move(self) -> Optional[Position]:
        return self._last_position

    @property
    def move_history(self) -> List[Move]:
        return list(self._history)

    @property
    def move_count(self) -> int:
        return len(self._history)

    def valid_columns(self) -> List[int]:
        """Columns that would accept a disc right now; empty once the game is over."""
        if self.is_game_over():
            return []
        return self.board.valid_columns()


def new_game(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> GameController:
    """Create a controller for a fresh game, FIRST to move."""
    return GameController(width, height)


class ConnectFourEnv(gym.Env):
    """
    Connect Four following the Gymnasium interface.

    Both players act through the same env, alternating. Observations are
    the int8 board grid indexed [row, column] with row 0 at the floor.
    Rewards are from the first player's point of view.
    """

    metadata = {'render_modes': []}

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT):
        debug.debug("Initializing ConnectFourEnv", "env")
        self.game = GameController(width, height)

        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(height, width), dtype=np.int8
        )

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.game.reset()
        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play `action` for whichever player is to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = self.game.play_move(int(action))

        if not result.ok:
            debug.warning(f"Invalid action {action}: {result.error.name}", "env")
            info = self._get_info()
            info['error'] = result.error.name
            return self._get_observation(), self.reward_invalid_move, False, True, info

        state = result.state
        reward = self.reward_step
        if state.status is GameStatus.WON:
            reward = self.reward_win if state.winner is Player.FIRST else self.reward_lose
        elif state.status is GameStatus.DRAW:
            reward = self.reward_draw

        return self._get_observation(), reward, state.is_terminal, False, self._get_info()

    def _get_observation(self) -> np.ndarray:
        return self.game.board.to_array()

    def _get_info(self) -> Dict[str, Any]:
        state = self.game.current_state()
        valid_columns = self.game.valid_columns()
        return {
            'valid_moves': valid_columns,
            'num_valid_moves': len(valid_columns),
            'current_player': state.current_player.value if state.current_player else None,
            'game_status': state.status.name,
            'winner': state.winner.value if state.winner else None,
            'winning_line': [tuple(p) for p in state.winning_line],
            'moves_made': self.game.move_count,
            'last_move': tuple(self.game.last_move) if self.game.last_move else None,
        }
