"""
cli.py - Command-line interface for exercising the Connect Four core

Two commands:
    replay     apply a comma-separated list of columns and report each outcome
    benchmark  time drops, win scans and whole random games
"""

import argparse
import random
import sys
from typing import List, Optional

from connect4core.debug import DebugLevel, debug
from connect4core.game.board import Board
from connect4core.game.rules import GameController
from connect4core.game.scanner import LineScanner
from connect4core.utils import DEFAULT_HEIGHT, DEFAULT_WIDTH, Player


def parse_moves(moves_str: str) -> List[int]:
    """Parse "0,6,1" into [0, 6, 1]. Raises ValueError on junk."""
    moves_str = moves_str.strip()
    if not moves_str:
        return []
    return [int(part) for part in moves_str.split(',')]


class SimpleCLI:
    """Simple command-line interface for the Connect Four core."""

    def __init__(self):
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='connect4core',
                                         description='Connect Four core CLI')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--debug-level', default=None,
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', default=None, help='Also log to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        replay_parser = subparsers.add_parser('replay', help='Replay a sequence of moves')
        replay_parser.add_argument('--moves', required=True,
                                   help='Comma-separated columns, e.g. 0,6,1,6,2,6,3')
        replay_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH)
        replay_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT)

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of iterations for benchmarking')
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Seed for the random column picker')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        elif self.args.debug_level:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI and return a process exit code."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'replay':
            return self.replay()
        if self.args.command == 'benchmark':
            return self.benchmark()

        print("Please specify a command. Use --help for options.")
        return 1

    def replay(self) -> int:
        try:
            moves = parse_moves(self.args.moves)
        except ValueError as e:
            print(f"Error parsing moves: {e}")
            return 2

        try:
            game = GameController(self.args.width, self.args.height)
        except (TypeError, ValueError) as e:
            print(f"Error creating board: {e}")
            return 2

        for turn, column in enumerate(moves, start=1):
            player = game.current_player
            result = game.play_move(column)
            if result.ok:
                print(f"Move {turn}: {player} -> column {column}, "
                      f"landed at ({result.position.column}, {result.position.row})")
            else:
                print(f"Move {turn}: column {column} rejected ({result.error.name}): "
                      f"{result.error.describe(column)}")

        print(f"Final state: {game.current_state()}")
        return 0

    def benchmark(self) -> int:
        iterations = self.args.iterations
        if iterations < 1:
            print("Iterations must be positive.")
            return 2

        rng = random.Random(self.args.seed)
        print(f"Running benchmark with {iterations} iterations...")

        # Drops, resetting whenever the board fills up
        board = Board()
        debug.start_timer("drops")
        drops = 0
        for _ in range(iterations):
            if board.is_full():
                board.reset()
            board.drop(rng.choice(board.valid_columns()), Player.FIRST)
            drops += 1
        drops_time = debug.end_timer("drops", "cli")
        print(f"Dropping {drops} discs: {drops_time:.6f} seconds total, "
              f"{drops_time / drops * 1000:.6f} ms per drop")

        # Win scans on a half-filled board
        board = Board()
        player = Player.FIRST
        positions = []
        for _ in range(board.size // 2):
            result = board.drop(rng.choice(board.valid_columns()), player)
            positions.append((result.position, player))
            player = player.other()
        scanner = LineScanner(board)
        debug.start_timer("win_scan")
        for i in range(iterations):
            position, owner = positions[i % len(positions)]
            scanner.find_win(position, owner)
        scan_time = debug.end_timer("win_scan", "cli")
        print(f"Performing {iterations} win scans: {scan_time:.6f} seconds total, "
              f"{scan_time / iterations * 1000:.6f} ms per scan")

        # Whole games with random columns
        games = max(1, iterations // 10)
        total_moves = 0
        game = GameController()
        debug.start_timer("games")
        for _ in range(games):
            game.reset()
            while not game.is_game_over():
                game.play_move(rng.choice(game.valid_columns()))
            total_moves += game.move_count
        games_time = debug.end_timer("games", "cli")
        print(f"Played {games} games with {total_moves} total moves: "
              f"{games_time:.6f} seconds total, "
              f"{games_time / games * 1000:.6f} ms per game, "
              f"{games_time / total_moves * 1000:.6f} ms per move")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
