"""
Enumerations shared by the board and its helpers.
"""

from enum import Enum, IntEnum


class Cell(Enum):
    """Contents of one grid position. The value is shown in error messages."""
    EMPTY = " "
    X = "x"     # First player's mark
    O = "o"     # Second player's mark


class Player(IntEnum):
    """The two players in the game. A always moves first."""
    A = 0
    B = 1

    @property
    def mark(self) -> Cell:
        """The cell value this player places."""
        return Cell.X if self == Player.A else Cell.O

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.B if self == Player.A else Player.A

    @classmethod
    def from_mark(cls, mark: Cell) -> "Player":
        if mark == Cell.X:
            return cls.A
        if mark == Cell.O:
            return cls.B
        raise ValueError(f"{mark} is not a player's mark")


class GameState(Enum):
    """Status of a game, computed from the board contents."""
    IN_PROGRESS = "in_progress"
    VICTORY = "victory"
    DRAW = "draw"
