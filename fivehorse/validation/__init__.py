from .position_checks import PositionDataError, validate_move, validate_position

__all__ = ["PositionDataError", "validate_move", "validate_position"]
