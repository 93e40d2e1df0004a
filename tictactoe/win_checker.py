"""
Win checker for the TicTacToe board.
Checks if a line is complete or if the game is a draw.
"""

from typing import Optional, List, Tuple

from .config import BoardConfig
from .enums import Cell, GameState

Grid = List[List[Cell]]
Line = List[Tuple[int, int]]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, grid: Grid) -> Optional[Cell]:
        """
        Check if there's a winner.

        Args:
            grid: The 3x3 grid of cells.

        Returns:
            The mark of the first completed line, or None if no winner yet.
        """
        line = self.get_winning_line(grid)
        if line is None:
            return None
        row, col = line[0]
        return grid[row][col]

    def get_winning_line(self, grid: Grid) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Lines are scanned rows first, then columns, then diagonals.
        """
        for line in self.WINNING_LINES:
            if self._check_line(grid, line):
                return list(line)
        return None

    def _check_line(self, grid: Grid, line: Line) -> bool:
        """True if all 3 cells of the line hold the same mark."""
        cells = [grid[row][col] for row, col in line]
        if cells[0] == Cell.EMPTY:
            return False  # Empty cell, no winner on this line
        return cells[0] == cells[1] == cells[2]

    def check_draw(self, grid: Grid) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.get_winning_line(grid) is not None:
            return False
        filled = sum(1 for row in grid for cell in row if cell != Cell.EMPTY)
        return filled == BoardConfig.NUM_CELLS

    def evaluate(self, grid: Grid) -> GameState:
        """Compute the game state for a grid."""
        if self.get_winning_line(grid) is not None:
            return GameState.VICTORY
        if self.check_draw(grid):
            return GameState.DRAW
        return GameState.IN_PROGRESS
