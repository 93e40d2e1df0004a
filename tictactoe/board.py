"""
Board state for TicTacToe.
Holds the 3x3 grid, applies moves in turn, and reports the game status.
"""

import copy
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .config import BoardConfig
from .enums import Cell, GameState, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker


class Board:
    """
    The TicTacToe board.

    Tracks:
    - The 3x3 grid (which mark is where)
    - How many moves have been made (decides whose mark goes next)

    Game status and the current player are recomputed from the grid on
    every query; nothing about the outcome is stored. Moves are not
    rejected after a victory, the caller decides when to stop.

    Not thread safe. Hosts sharing a board across threads must serialize
    calls themselves.
    """

    validator = MoveValidator()
    win_checker = WinChecker()

    def __init__(self) -> None:
        size = BoardConfig.BOARD_SIZE
        self._grid = [[Cell.EMPTY for _ in range(size)] for _ in range(size)]
        self._move_count = 0

    @classmethod
    def from_moves(cls, moves: Iterable[Tuple[int, int]]) -> "Board":
        """
        Build a board by playing a sequence of moves in order.

        Raises the same errors as move() on the first bad entry.
        """
        board = cls()
        for row, col in moves:
            board.move(row, col)
        return board

    @property
    def move_count(self) -> int:
        """Number of successful moves so far."""
        return self._move_count

    def move(self, row: int, col: int) -> None:
        """
        Place the next mark at the given position.

        The 1st, 3rd, 5th... moves place an X (player A), the 2nd, 4th...
        place an O (player B).

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Raises:
            OutOfRangeError: row or col outside 0-2.
            IllegalMoveError: the cell is already occupied.
        """
        self.validator.validate_move(self, row, col)

        mover = Player(self._move_count % 2)
        self._grid[row][col] = mover.mark
        self._move_count += 1

    def at(self, row: int, col: int) -> Cell:
        """
        Get the cell at the given position.

        Raises:
            OutOfRangeError: row or col outside 0-2, same check as move().
        """
        self.validator.validate_position(row, col)
        return self._grid[row][col]

    def current_player(self) -> Player:
        """
        Get the current player.

        While the game has no completed line this is the player to move
        next, the opposite of whoever moved last. Once a line is complete
        it names the winner, even if further moves were played.
        """
        winner = self.winner()
        if winner is not None:
            return winner
        if self._move_count == 0:
            return Player.A
        last_mover = Player((self._move_count - 1) % 2)
        return last_mover.opposite()

    def game_state(self) -> GameState:
        """VICTORY if any line is complete, DRAW if the grid is full, else IN_PROGRESS."""
        return self.win_checker.evaluate(self._grid)

    def winner(self) -> Optional[Player]:
        """The player owning the completed line, or None."""
        mark = self.win_checker.check_winner(self._grid)
        if mark is None:
            return None
        return Player.from_mark(mark)

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        return self.win_checker.get_winning_line(self._grid)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, in row-major order.
        """
        size = BoardConfig.BOARD_SIZE
        empty = []
        for row in range(size):
            for col in range(size):
                if self._grid[row][col] == Cell.EMPTY:
                    empty.append((row, col))
        return empty

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return copy.deepcopy(self)

    def to_array(self) -> np.ndarray:
        """The grid as a 3x3 int array: -1 empty, 0 for X, 1 for O."""
        codes = BoardConfig.CELL_CODES
        return np.array(
            [[codes[cell] for cell in row] for row in self._grid], dtype=int
        )

    def __str__(self) -> str:
        symbols = BoardConfig.CELL_SYMBOLS
        lines = ["  0   1   2", "┌───┬───┬───┐"]
        for row in range(BoardConfig.BOARD_SIZE):
            cells = "│".join(f" {symbols[cell]} " for cell in self._grid[row])
            lines.append(f"{row} │{cells}│")
            if row < BoardConfig.BOARD_SIZE - 1:
                lines.append("├───┼───┼───┤")
        lines.append("└───┴───┴───┘")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(move_count={self._move_count}, state={self.game_state().name})"

    def print_board(self):
        """Print the board to console."""
        print()
        print(self)

        # Print game info
        state = self.game_state()
        if state == GameState.VICTORY:
            print(f"\nPlayer {self.winner().name} WINS!")
        elif state == GameState.DRAW:
            print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: player {self.current_player().name}")


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()

    # Simulate a game
    moves = [
        (0, 0),  # A
        (1, 0),  # B
        (0, 1),  # A
        (1, 1),  # B
        (0, 2),  # A completes the top row
    ]

    for row, col in moves:
        print(f"\nplayer {board.current_player().name} moves to ({row}, {col})")
        board.move(row, col)
        board.print_board()

    print("\nBoard test done!")
