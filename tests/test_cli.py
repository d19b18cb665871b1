"""Tests for the command-line interface."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect4core.debug import DebugLevel, debug
from connect4core.interfaces.cli import main, parse_moves


@pytest.fixture(autouse=True)
def restore_debug_level():
    level = debug.level
    yield
    debug.configure(level=level)


def test_parse_moves():
    """Test column lists parse and junk is refused."""
    assert parse_moves("0,6, 1") == [0, 6, 1]
    assert parse_moves("") == []
    with pytest.raises(ValueError):
        parse_moves("0,x")


def test_replay_reports_win(capsys):
    """Test replaying the textbook horizontal win."""
    assert main(['replay', '--moves', '0,6,1,6,2,6,3']) == 0
    out = capsys.readouterr().out
    assert "Move 1: First -> column 0, landed at (0, 0)" in out
    assert "Move 2: Second -> column 6, landed at (6, 0)" in out
    assert "Final state: First wins with [(0,0), (1,0), (2,0), (3,0)]" in out


def test_replay_reports_rejections(capsys):
    """Test rejected moves are reported and the game continues."""
    assert main(['replay', '--moves', '9,0', '--width', '7']) == 0
    out = capsys.readouterr().out
    assert "Move 1: column 9 rejected (INVALID_COLUMN)" in out
    assert "Move 2: First -> column 0" in out
    assert "Final state: In progress, Second to move" in out


def test_replay_bad_input(capsys):
    """Test malformed move lists and board sizes exit with an error code."""
    assert main(['replay', '--moves', 'a,b']) == 2
    assert main(['replay', '--moves', '0', '--width', '0']) == 2
    out = capsys.readouterr().out
    assert "Error parsing moves" in out
    assert "Error creating board" in out


def test_debug_level_flag(capsys):
    """Test the global logging flag reaches the debug manager."""
    assert main(['--debug-level', 'error', 'replay', '--moves', '3']) == 0
    assert debug.level is DebugLevel.ERROR


def test_benchmark(capsys):
    """Test the benchmark runs to completion."""
    assert main(['benchmark', '--iterations', '30', '--seed', '7']) == 0
    out = capsys.readouterr().out
    assert "Dropping 30 discs" in out
    assert "Performing 30 win scans" in out
    assert "Played 3 games" in out


def test_no_command(capsys):
    """Test running without a command prints usage help."""
    assert main([]) == 1
    assert "Please specify a command" in capsys.readouterr().out
