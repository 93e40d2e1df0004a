"""
Tests for MoveValidator.
"""

import pytest

from tictactoe import Board, IllegalMoveError, MoveValidator, OutOfRangeError


@pytest.fixture
def validator():
    return MoveValidator()


def test_valid_position_passes(validator):
    for row in range(3):
        for col in range(3):
            validator.validate_position(row, col)


def test_out_of_range_error_carries_position(validator):
    with pytest.raises(OutOfRangeError, match=r"Invalid position \(3, 1\)") as excinfo:
        validator.validate_position(3, 1)
    assert (excinfo.value.row, excinfo.value.col) == (3, 1)


def test_validate_move_rejects_occupied(validator):
    board = Board.from_moves([(2, 2)])
    with pytest.raises(IllegalMoveError):
        validator.validate_move(board, 2, 2)
    validator.validate_move(board, 0, 0)


def test_valid_moves_on_new_board(validator):
    assert len(validator.get_valid_moves(Board())) == 9


def test_valid_moves_exclude_occupied(validator):
    board = Board.from_moves([(1, 1), (0, 0)])
    moves = validator.get_valid_moves(board)
    assert (1, 1) not in moves
    assert (0, 0) not in moves
    assert len(moves) == 7


def test_no_valid_moves_after_victory(validator):
    board = Board.from_moves([(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert validator.get_valid_moves(board) == []
    # The board itself still accepts moves on empty cells
    board.move(2, 2)
    assert board.move_count == 6
