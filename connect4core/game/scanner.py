"""
scanner.py - Win detection through the last placed disc

A win can only be completed by the disc that was just dropped, so the
scanner looks at the four lines through that disc and nothing else.
Edges need no special handling: the board answers Cell.BOUNDARY off the
grid, which never matches a player's cell and ends the walk.
"""

from typing import List, Optional, Tuple

from connect4core.debug import debug
from connect4core.game.board import Board
from connect4core.utils import CONNECT_N, Cell, Direction, Player, Position


class LineScanner:
    """Counts same-owner runs radiating from a position on a Board."""

    def __init__(self, board: Board, connect_n: int = CONNECT_N):
        if connect_n < 1:
            raise ValueError(f"connect_n must be at least 1, got {connect_n}")
        self.board = board
        self.connect_n = connect_n

    def _walk(self, start: Position, target: Cell, vector: Tuple[int, int]) -> int:
        """Number of consecutive `target` cells after `start` along `vector`."""
        count = 0
        position = start.step(vector)
        while self.board.cell_at(position) == target:
            count += 1
            position = position.step(vector)
        return count

    def _extent(self, position: Position, player: Player,
                direction: Direction) -> Tuple[int, int]:
        target = Cell.of(player)
        dc, dr = direction.vector
        forward = self._walk(position, target, (dc, dr))
        backward = self._walk(position, target, (-dc, -dr))
        return backward, forward

    def run_length(self, position: Position, player: Player, direction: Direction) -> int:
        """
        Length of the run through `position` along `direction`.

        `position` itself counts as one of `player`'s discs, so this also
        answers "how long would the run be if `player` played here".
        """
        backward, forward = self._extent(position, player, direction)
        return 1 + backward + forward

    def longest_run(self, position: Position, player: Player) -> Tuple[Direction, int]:
        """The direction with the longest run through `position`, and its length."""
        return max(((d, self.run_length(position, player, d)) for d in Direction),
                   key=lambda item: item[1])

    def find_win(self, position: Position, player: Player) -> Optional[List[Position]]:
        """
        Check the four lines through `position` for a winning run.

        Args:
            position: Where `player` just placed a disc
            player: Owner of that disc

        Returns:
            `connect_n` contiguous positions containing `position`, ordered
            along the direction vector, or None if there is no win
        """
        for direction in Direction:
            backward, forward = self._extent(position, player, direction)
            total = 1 + backward + forward
            debug.trace(f"{direction.name} run through {tuple(position)}: {total}", "scanner")
            if total < self.connect_n:
                continue

            vector = direction.vector
            run_start = position.step(vector, -backward)
            # Earliest window in the run that still contains `position`
            offset = max(0, backward - self.connect_n + 1)
            line = [run_start.step(vector, offset + i) for i in range(self.connect_n)]
            debug.debug(f"{player} wins {direction.name} with {[tuple(p) for p in line]}",
                        "scanner")
            return line

        return None

    def has_win_at(self, position: Position, player: Player) -> bool:
        return self.find_win(position, player) is not None
