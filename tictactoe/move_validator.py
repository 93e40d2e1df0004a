"""
Move validator for the TicTacToe board.
Validates that moves follow the rules, raising on the first violation.
"""

from numbers import Integral
from typing import List, Tuple, TYPE_CHECKING

from .config import BoardConfig
from .enums import Cell, GameState
from .errors import OutOfRangeError, IllegalMoveError

if TYPE_CHECKING:
    from .board import Board


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must both lie in 0-2
    2. Can only place on empty cells
    """

    def validate_position(self, row: int, col: int) -> None:
        """
        Check that a position lies on the board.

        Raises:
            OutOfRangeError: if row or col is not an integer in 0-2.
        """
        size = BoardConfig.BOARD_SIZE
        for value in (row, col):
            # bool is an int subclass, but True/False are not coordinates
            is_index = isinstance(value, Integral) and not isinstance(value, bool)
            if not is_index or not 0 <= value < size:
                raise OutOfRangeError(row, col)

    def validate_move(self, board: "Board", row: int, col: int) -> None:
        """
        Validate a move.

        Args:
            board: Board the move is played on.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Raises:
            OutOfRangeError: position is off the board.
            IllegalMoveError: cell already holds a mark.
        """
        self.validate_position(row, col)

        occupant = board.at(row, col)
        if occupant != Cell.EMPTY:
            raise IllegalMoveError(row, col, occupant)

    def get_valid_moves(self, board: "Board") -> List[Tuple[int, int]]:
        """
        Get all valid moves for the player to move.

        Returns:
            List of (row, col) positions, empty once the game has ended.
        """
        if board.game_state() != GameState.IN_PROGRESS:
            return []
        return board.get_empty_cells()
