"""
TicTacToe board state tracker.
A 3x3 grid that accepts alternating moves, rejects illegal placements,
and reports win/draw/in-progress status.
"""

__version__ = "1.0.0"

from .enums import Cell, Player, GameState
from .errors import BoardError, OutOfRangeError, IllegalMoveError
from .config import BoardConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .board import Board
