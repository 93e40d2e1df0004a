"""
Board configuration for the TicTacToe tracker.
Fixed values only: the board size is not meant to be changed.
"""

from .enums import Cell


class BoardConfig:
    """
    Configuration class for board settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # ==================== RENDER SETTINGS ====================
    # Characters used by Board.print_board()
    CELL_SYMBOLS = {
        Cell.EMPTY: " ",
        Cell.X: "X",
        Cell.O: "O",
    }

    # Numeric codes used by Board.to_array()
    CELL_CODES = {
        Cell.EMPTY: -1,
        Cell.X: 0,
        Cell.O: 1,
    }
