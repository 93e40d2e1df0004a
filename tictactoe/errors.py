"""
Errors raised by the board when a move or lookup is rejected.
"""


class BoardError(Exception):
    """Base class for everything the board refuses to do."""


class OutOfRangeError(BoardError, IndexError):
    """Row or column is outside the board."""

    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"Invalid position ({row}, {col}). Must be 0-2.")


class IllegalMoveError(BoardError):
    """Target cell already holds a mark."""

    def __init__(self, row: int, col: int, occupant):
        self.row = row
        self.col = col
        self.occupant = occupant
        super().__init__(
            f"Cell ({row}, {col}) is already occupied by {occupant.value}"
        )
