from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from fivehorse.core import (
    Move,
    Player,
    Position,
    TurnRecord,
    apply_move,
    initialize_position,
    legal_moves,
    playback_frames,
    winner,
)
from fivehorse.search import AlphaBetaSearch, SearchConfig
from fivehorse.validation import validate_move, validate_position

logger = logging.getLogger(__name__)


class GameMode(Enum):
    PVP = "pvp"
    PVE = "pve"


@dataclass
class SessionConfig:
    mode: GameMode = GameMode.PVP
    computer_side: Player = Player.WHITE
    search: SearchConfig = field(default_factory=SearchConfig)


class GameSession:
    """Turn bookkeeping around the rule engine: history, undo and computer turns."""

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        *,
        start: Optional[Position] = None,
    ) -> None:
        self.config = config or SessionConfig()
        if start is not None:
            validate_position(start)
        self._start = start.copy() if start is not None else None
        self._search = AlphaBetaSearch(self.config.search)
        self.reset()

    def reset(self) -> None:
        self.position: Position = self._start.copy() if self._start is not None else initialize_position()
        self.history: List[Position] = []
        self.turn_count = 0
        self.winner: Optional[Player] = winner(self.position)
        self.last_record: Optional[TurnRecord] = None

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def is_computer_turn(self) -> bool:
        return (
            self.config.mode == GameMode.PVE
            and not self.is_over
            and self.position.side_to_move == self.config.computer_side
        )

    def select(self, node_id: str) -> List[Move]:
        if self.is_over:
            return []
        return legal_moves(self.position, node_id)

    def play(self, move: Move) -> TurnRecord:
        if self.is_over:
            raise ValueError("The game is already decided.")
        validate_move(move)
        if move not in legal_moves(self.position, move.source):
            raise ValueError(f"Move {move.source} -> {move.destination} is not legal here.")

        mover = self.position.side_to_move
        frames = playback_frames(self.position, move)
        self.history.append(self.position.copy())
        self.position = apply_move(self.position, move)
        self.turn_count += 1
        self.winner = winner(self.position)

        record = TurnRecord(move=move, mover=mover, frames=tuple(frames), winner=self.winner)
        self.last_record = record
        logger.debug(
            "Turn %d: %s %s -> %s captured %d.",
            self.turn_count,
            mover.name,
            move.source,
            move.destination,
            move.capture_count,
        )
        if self.winner is not None:
            logger.info("%s wins after %d turns.", self.winner.name, self.turn_count)
        return record

    def play_nodes(self, source: str, destination: str) -> TurnRecord:
        for move in self.select(source):
            if move.destination == destination:
                return self.play(move)
        raise ValueError(f"No legal move from {source} to {destination}.")

    def computer_move(self) -> Optional[TurnRecord]:
        if not self.is_computer_turn():
            return None
        result = self._search.run(self.position, self.config.computer_side)
        if result.move is None:
            logger.info("Computer (%s) has no legal move.", self.config.computer_side.name)
            return None
        return self.play(result.move)

    def undo(self) -> bool:
        """Step back one turn (two in PvE so the human is on move again)."""
        if not self.history:
            return False
        steps = 2 if self.config.mode == GameMode.PVE else 1
        if len(self.history) < steps:
            self.reset()
            return True
        self.position = self.history[-steps]
        del self.history[-steps:]
        self.turn_count -= steps
        self.winner = winner(self.position)
        self.last_record = None
        return True
