"""Tests for ConnectFourEnv."""

import sys
from pathlib import Path

import numpy as np

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect4core.game.rules import ConnectFourEnv
from connect4core.utils import Cell


def test_env_initialization():
    """Test action and observation spaces follow the board size."""
    env = ConnectFourEnv(width=7, height=6)
    assert env.action_space.n == 7
    assert env.observation_space.shape == (6, 7)

    env = ConnectFourEnv(width=5, height=4)
    assert env.action_space.n == 5
    assert env.observation_space.shape == (4, 5)


def test_env_reset():
    """Test reset returns an empty board and FIRST to move."""
    env = ConnectFourEnv()
    obs, info = env.reset(seed=123)
    assert obs.shape == (6, 7)
    assert obs.dtype == np.int8
    assert np.all(obs == Cell.EMPTY.value)
    assert env.observation_space.contains(obs)
    assert info['current_player'] == 1
    assert info['valid_moves'] == list(range(7))
    assert info['game_status'] == 'IN_PROGRESS'


def test_env_step():
    """Test a step drops a disc on the floor and switches players."""
    env = ConnectFourEnv()
    env.reset()
    obs, reward, terminated, truncated, info = env.step(0)
    assert obs[0, 0] == Cell.FIRST.value
    assert reward == env.reward_step
    assert not terminated and not truncated
    assert info['current_player'] == 2
    assert info['last_move'] == (0, 0)
    assert info['moves_made'] == 1


def test_env_first_player_win():
    """Test a FIRST win ends the episode with the win reward."""
    env = ConnectFourEnv()
    env.reset()
    for action in [0, 6, 1, 6, 2, 6]:
        env.step(action)
    obs, reward, terminated, truncated, info = env.step(3)

    assert terminated and not truncated
    assert reward == env.reward_win
    assert info['winner'] == 1
    assert info['winning_line'] == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert info['valid_moves'] == []


def test_env_second_player_win():
    """Test a SECOND win gives the losing reward."""
    env = ConnectFourEnv()
    env.reset()
    for action in [0, 1, 0, 1, 0, 1, 6]:
        env.step(action)
    _, reward, terminated, _, info = env.step(np.int64(1))
    assert terminated
    assert reward == env.reward_lose
    assert info['winner'] == 2


def test_env_invalid_action():
    """Test a full column truncates with the invalid-move penalty."""
    env = ConnectFourEnv()
    env.reset()
    for _ in range(6):
        env.step(0)
    obs, reward, terminated, truncated, info = env.step(0)
    assert truncated and not terminated
    assert reward == env.reward_invalid_move
    assert info['error'] == 'COLUMN_FULL'
    assert info['moves_made'] == 6


def test_env_reset_after_game():
    """Test reset starts a new game after a finished one."""
    env = ConnectFourEnv()
    env.reset()
    for action in [0, 6, 1, 6, 2, 6, 3]:
        env.step(action)
    obs, info = env.reset()
    assert np.all(obs == 0)
    assert info['game_status'] == 'IN_PROGRESS'
    assert info['winning_line'] == []
