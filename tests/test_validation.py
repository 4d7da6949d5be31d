import pytest

from fivehorse.core import Move, initialize_position
from fivehorse.validation import PositionDataError, validate_move, validate_position


def test_validate_position_accepts_initial_layout():
    validate_position(initialize_position())


def test_validate_position_rejects_bad_board():
    position = initialize_position()
    position.board = position.board[:-1]
    with pytest.raises(PositionDataError):
        validate_position(position)

    position = initialize_position()
    position.board[0] = 7
    with pytest.raises(PositionDataError):
        validate_position(position)


def test_validate_move_checks_capture_groups():
    validate_move(Move("0,0", "1,1", (("2,1",), ("2,2",))))

    with pytest.raises(PositionDataError):
        validate_move(Move("0,0", "1,1", (("2,1",), ("2,1",))))
    with pytest.raises(PositionDataError):
        validate_move(Move("0,0", "1,1", (("1,1",),)))
    with pytest.raises(PositionDataError):
        validate_move(Move("0,0", "1,1", ((),)))
    with pytest.raises(PositionDataError):
        validate_move(Move("0,0", "9,9"))
