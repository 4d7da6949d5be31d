from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterable, Mapping, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .topology import NODE_IDS, NUM_NODES, node_index

BoardArray = NDArray[np.int8]

EMPTY = 0


class Player(IntEnum):
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Player":
        return Player.WHITE if self == Player.BLACK else Player.BLACK


CaptureGroup = Tuple[str, ...]


@dataclass(frozen=True)
class Move:
    source: str
    destination: str
    capture_steps: Tuple[CaptureGroup, ...] = field(default_factory=tuple)

    @property
    def captures(self) -> Tuple[str, ...]:
        return tuple(node_id for group in self.capture_steps for node_id in group)

    @property
    def capture_count(self) -> int:
        return sum(len(group) for group in self.capture_steps)


@dataclass(eq=False)
class Position:
    board: BoardArray  # shape (NUM_NODES,), dtype=np.int8, 0 (empty) or Player value
    side_to_move: Player = Player.BLACK

    @classmethod
    def empty(cls, side_to_move: Player = Player.BLACK) -> "Position":
        return cls(board=np.zeros(NUM_NODES, dtype=np.int8), side_to_move=side_to_move)

    @classmethod
    def from_pieces(
        cls,
        pieces: Mapping[str, Player],
        side_to_move: Player = Player.BLACK,
    ) -> "Position":
        position = cls.empty(side_to_move)
        for node_id, player in pieces.items():
            position.set_piece(node_id, player)
        return position

    def copy(self) -> "Position":
        return Position(board=self.board.copy(), side_to_move=self.side_to_move)

    def with_side_to_move(self, side: Player) -> "Position":
        return Position(board=self.board.copy(), side_to_move=side)

    def piece_at(self, node_id: str) -> Optional[Player]:
        value = int(self.board[node_index(node_id)])
        return Player(value) if value != EMPTY else None

    def is_empty(self, node_id: str) -> bool:
        return self.board[node_index(node_id)] == EMPTY

    def set_piece(self, node_id: str, player: Optional[Player]) -> None:
        self.board[node_index(node_id)] = EMPTY if player is None else int(player)

    def occupied_nodes(self, player: Player) -> Iterable[str]:
        for index in np.flatnonzero(self.board == int(player)):
            yield NODE_IDS[int(index)]

    def piece_count(self, player: Player) -> int:
        return int(np.count_nonzero(self.board == int(player)))

    @property
    def pieces(self) -> Dict[str, Player]:
        return {
            NODE_IDS[int(index)]: Player(int(self.board[index]))
            for index in np.flatnonzero(self.board != EMPTY)
        }

    def same_board(self, other: "Position") -> bool:
        return bool(np.array_equal(self.board, other.board))

    def __repr__(self) -> str:
        occupied = ", ".join(f"{node_id}={player.name[0]}" for node_id, player in self.pieces.items())
        return f"Position(to_move={self.side_to_move.name}, {{{occupied}}})"


@dataclass(frozen=True)
class TurnRecord:
    move: Move
    mover: Player
    frames: Tuple[Position, ...] = field(default_factory=tuple)
    winner: Optional[Player] = None
