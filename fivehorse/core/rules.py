from __future__ import annotations

from typing import List, Optional, Set, Tuple

import numpy as np

from .state import CaptureGroup, Move, Player, Position
from .topology import (
    GRID_COLS,
    GRID_ROWS,
    NODE_IDS,
    NUM_NODES,
    TRAP_MASK,
    collinear,
    continuation,
    grid_id,
    neighbors,
    node_index,
)

STARTING_PIECES = GRID_COLS
MAX_SLIDE_STEPS = 10
ACTION_SPACE_SIZE = NUM_NODES * NUM_NODES


def initialize_position() -> Position:
    position = Position.empty(side_to_move=Player.BLACK)
    for col in range(GRID_COLS):
        position.set_piece(grid_id(0, col), Player.BLACK)
        position.set_piece(grid_id(GRID_ROWS - 1, col), Player.WHITE)
    return position


def encode_move(source: str, destination: str) -> int:
    return node_index(source) * NUM_NODES + node_index(destination)


def decode_move(index: int) -> Tuple[str, str]:
    if not 0 <= index < ACTION_SPACE_SIZE:
        raise ValueError("Action index out of range.")
    return NODE_IDS[index // NUM_NODES], NODE_IDS[index % NUM_NODES]


def legal_destinations(position: Position, source: str) -> List[str]:
    destinations: List[str] = []
    for first in neighbors(source):
        if not position.is_empty(first):
            continue
        destinations.append(first)
        previous, current = source, first
        for _ in range(MAX_SLIDE_STEPS):
            following = continuation(previous, current)
            if following is None or not position.is_empty(following):
                break
            destinations.append(following)
            previous, current = current, following
    return destinations


def legal_moves(position: Position, source: str) -> List[Move]:
    """Moves available to the piece on ``source``.

    Selecting an empty node or an opponent piece yields no moves rather than
    an error, so callers can treat both cases the same way.
    """
    if position.piece_at(source) != position.side_to_move:
        return []
    return [
        Move(source, destination, resolve_captures(position, source, destination))
        for destination in legal_destinations(position, source)
    ]


def enumerate_legal_moves(position: Position, player: Optional[Player] = None) -> List[Move]:
    if player is None:
        player = position.side_to_move
    if player != position.side_to_move:
        position = position.with_side_to_move(player)

    moves: List[Move] = []
    for source in position.occupied_nodes(player):
        moves.extend(legal_moves(position, source))
    return moves


def resolve_captures(position: Position, source: str, destination: str) -> Tuple[CaptureGroup, ...]:
    mover = position.side_to_move
    working = position.copy()
    working.set_piece(source, None)
    working.set_piece(destination, mover)

    frontier: List[str] = [destination]
    processed: Set[str] = set()
    captured: Set[str] = set()
    steps: List[CaptureGroup] = []

    while frontier:
        next_frontier: List[str] = []
        step_flips: List[str] = []
        for centre in frontier:
            if centre in processed:
                continue
            processed.add(centre)

            targets = _pick_targets(working, centre, mover)
            if not targets:
                targets = _clamp_targets(working, centre, mover)

            for target in targets:
                if target in captured:
                    continue
                captured.add(target)
                step_flips.append(target)
                working.set_piece(target, mover)
                next_frontier.append(target)

        if step_flips:
            steps.append(tuple(step_flips))
        frontier = next_frontier
    return tuple(steps)


def _pick_targets(position: Position, centre: str, mover: Player) -> List[str]:
    # Opponent - centre - opponent along one line: both outer pieces flip.
    opponent = mover.opponent
    around = neighbors(centre)
    targets: List[str] = []
    for i, first in enumerate(around):
        for second in around[i + 1:]:
            if not collinear(first, centre, second):
                continue
            if position.piece_at(first) == opponent and position.piece_at(second) == opponent:
                targets.extend((first, second))
    return targets


def _clamp_targets(position: Position, centre: str, mover: Player) -> List[str]:
    # Centre - opponent - own along one line: the middle piece flips.
    opponent = mover.opponent
    targets: List[str] = []
    for middle in neighbors(centre):
        if position.piece_at(middle) != opponent:
            continue
        for far in neighbors(middle):
            if far == centre or not collinear(centre, middle, far):
                continue
            if position.piece_at(far) == mover:
                targets.append(middle)
    return targets


def apply_move(position: Position, move: Move, *, in_place: bool = False) -> Position:
    target = position if in_place else position.copy()
    mover = target.side_to_move

    if target.piece_at(move.source) != mover:
        raise ValueError("Move source does not hold a piece of the side to move.")
    if not target.is_empty(move.destination):
        raise ValueError("Destination node must be empty.")

    target.set_piece(move.source, None)
    target.set_piece(move.destination, mover)
    for group in move.capture_steps:
        _flip_group(target, group, mover)

    target.side_to_move = mover.opponent
    return target


def playback_frames(position: Position, move: Move) -> List[Position]:
    """Display states for staging a move: the step itself, then one per capture group.

    The mover stays on turn in every frame; the last frame's board matches
    :func:`apply_move`.
    """
    mover = position.side_to_move
    frame = position.copy()
    if frame.piece_at(move.source) != mover:
        raise ValueError("Move source does not hold a piece of the side to move.")
    frame.set_piece(move.source, None)
    frame.set_piece(move.destination, mover)
    frames = [frame.copy()]
    for group in move.capture_steps:
        _flip_group(frame, group, mover)
        frames.append(frame.copy())
    return frames


def _flip_group(position: Position, group: CaptureGroup, mover: Player) -> None:
    for node_id in group:
        if position.piece_at(node_id) != mover.opponent:
            raise ValueError(f"Captured node {node_id} does not hold an opponent piece.")
        position.set_piece(node_id, mover)


def winner(position: Position) -> Optional[Player]:
    black_count = position.piece_count(Player.BLACK)
    white_count = position.piece_count(Player.WHITE)
    if black_count == 0:
        return Player.WHITE
    if white_count == 0:
        return Player.BLACK

    if _confined_to_trap(position, Player.BLACK):
        return Player.WHITE
    if _confined_to_trap(position, Player.WHITE):
        return Player.BLACK
    return None


def _confined_to_trap(position: Position, player: Player) -> bool:
    owned = position.board == int(player)
    return bool(owned.any() and not np.any(owned & ~TRAP_MASK))
