from __future__ import annotations

import numpy as np

from fivehorse.core import NUM_NODES, Move, Player, Position
from fivehorse.core.topology import BOARD_NODES


class PositionDataError(ValueError):
    pass


def validate_position(position: Position) -> None:
    board = np.asarray(position.board)
    if board.shape != (NUM_NODES,):
        raise PositionDataError(f"board must have shape ({NUM_NODES},), got {board.shape}")
    if not np.isin(board, (0, int(Player.BLACK), int(Player.WHITE))).all():
        raise PositionDataError("board contains values other than empty, black or white")
    if not isinstance(position.side_to_move, Player):
        raise PositionDataError("side_to_move must be a Player")


def validate_move(move: Move) -> None:
    for node_id in (move.source, move.destination, *move.captures):
        if node_id not in BOARD_NODES:
            raise PositionDataError(f"unknown node identifier {node_id!r}")
    if move.source == move.destination:
        raise PositionDataError("move source and destination must differ")
    if any(not group for group in move.capture_steps):
        raise PositionDataError("capture groups must not be empty")
    captures = move.captures
    if len(set(captures)) != len(captures):
        raise PositionDataError("a node appears in more than one capture group")
    if move.source in captures or move.destination in captures:
        raise PositionDataError("captures must not include the move's own source or destination")
