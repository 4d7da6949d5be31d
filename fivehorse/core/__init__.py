"""Core game logic for the Five Horse board game."""

from .state import Move, Player, Position, TurnRecord
from .topology import (
    BOARD_NODES,
    NODE_IDS,
    NUM_NODES,
    TRAP_NODES,
    Node,
    collinear,
    get_node,
    is_trap,
    neighbors,
    node_index,
)
from .rules import (
    ACTION_SPACE_SIZE,
    MAX_SLIDE_STEPS,
    STARTING_PIECES,
    apply_move,
    decode_move,
    encode_move,
    enumerate_legal_moves,
    initialize_position,
    legal_destinations,
    legal_moves,
    playback_frames,
    resolve_captures,
    winner,
)

__all__ = [
    "Move",
    "Player",
    "Position",
    "TurnRecord",
    "BOARD_NODES",
    "NODE_IDS",
    "NUM_NODES",
    "TRAP_NODES",
    "Node",
    "collinear",
    "get_node",
    "is_trap",
    "neighbors",
    "node_index",
    "ACTION_SPACE_SIZE",
    "MAX_SLIDE_STEPS",
    "STARTING_PIECES",
    "apply_move",
    "decode_move",
    "encode_move",
    "enumerate_legal_moves",
    "initialize_position",
    "legal_destinations",
    "legal_moves",
    "playback_frames",
    "resolve_captures",
    "winner",
]
