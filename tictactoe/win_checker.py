"""
Win checker for TicTacToe.
Checks whether a placement completed a line of three.
"""

from typing import List, Optional, Tuple

import numpy as np

from .config import GameConfig


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells holding the same mark in a row
    (horizontally, vertically, or diagonally).

    The grid is a numpy array indexed grid[y, x]; coordinates handed in and
    out of this class are (x, y) = (column, row).
    """

    # All possible winning lines (as lists of (x, y) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Columns
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(2, 0), (1, 1), (0, 2)],
    ]

    def completes_line(self, grid: np.ndarray, x: int, y: int, code: int) -> bool:
        """
        Check whether the mark just placed at (x, y) completed a line.

        Only the lines through (x, y) can have changed, so only those are
        looked at. Every cell is compared against the placed mark's code,
        which is never the empty value, so a line of empty cells never counts.

        Args:
            grid: The game grid, already holding the new mark.
            x: Column of the placed mark (0-2).
            y: Row of the placed mark (0-2).
            code: Grid value of the placed mark.

        Returns:
            True if row y, column x, or a diagonal through (x, y) is all `code`.
        """
        if np.all(grid[y, :] == code) or np.all(grid[:, x] == code):
            return True

        # The center lies on both diagonals
        if x == y and np.all(np.diagonal(grid) == code):
            return True
        if x + y == GameConfig.BOARD_SIZE - 1 and np.all(np.diagonal(np.fliplr(grid)) == code):
            return True

        return False

    def get_winning_line(self, grid: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            grid: The game grid.

        Returns:
            The winning line as list of (x, y), or None.
        """
        for line in self.WINNING_LINES:
            values = [grid[y, x] for x, y in line]
            if values[0] != GameConfig.EMPTY and values[0] == values[1] == values[2]:
                return list(line)
        return None
