from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from fivehorse.core import (
    Move,
    Player,
    Position,
    apply_move,
    enumerate_legal_moves,
    winner,
)
from fivehorse.core.topology import TRAP_MASK

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 3
    win_score: float = 10_000.0
    piece_value: float = 100.0
    trap_penalty: float = -500.0


@dataclass
class SearchResult:
    move: Optional[Move]
    score: float
    nodes_visited: int


def evaluate_position(position: Position, side: Player, config: Optional[SearchConfig] = None) -> float:
    """Static score of ``position`` from the point of view of ``side``.

    A decided game scores +/- ``win_score``. Otherwise each piece is worth
    ``piece_value`` (negated for the opponent); a piece of ``side`` on a trap
    node adds ``trap_penalty`` and an opponent piece on a trap subtracts it.
    Mobility is not scored.
    """
    config = config or SearchConfig()
    result = winner(position)
    if result is not None:
        return config.win_score if result == side else -config.win_score

    own = position.board == int(side)
    opp = position.board == int(side.opponent)
    material = int(np.count_nonzero(own)) - int(np.count_nonzero(opp))
    trapped = int(np.count_nonzero(own & TRAP_MASK)) - int(np.count_nonzero(opp & TRAP_MASK))
    return float(config.piece_value * material + config.trap_penalty * trapped)


def simulate_move(position: Position, move: Move) -> Position:
    return apply_move(position, move, in_place=False)


def order_moves(moves: List[Move]) -> List[Move]:
    # Stable: equal capture counts keep generation order.
    return sorted(moves, key=lambda move: move.capture_count, reverse=True)


class AlphaBetaSearch:
    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()
        self._nodes_visited = 0

    # ------------------------------------------------------------------
    def run(self, position: Position, side: Optional[Player] = None) -> SearchResult:
        depth = self.config.depth
        if depth < 1:
            raise ValueError("Search depth must be at least 1.")
        if side is None:
            side = position.side_to_move
        root = position if side == position.side_to_move else position.with_side_to_move(side)

        self._nodes_visited = 0
        best_move: Optional[Move] = None
        best_score = -math.inf
        alpha = -math.inf
        beta = math.inf

        for move in order_moves(enumerate_legal_moves(root)):
            score = self._minimax(simulate_move(root, move), depth - 1, alpha, beta, False, side)
            if score > best_score:
                best_score = score
                best_move = move
            alpha = max(alpha, best_score)

        if best_move is None:
            logger.debug("No legal move for %s at search root.", side.name)
        else:
            logger.debug(
                "Searched depth %d for %s: %s -> %s scored %.1f over %d nodes.",
                depth,
                side.name,
                best_move.source,
                best_move.destination,
                best_score,
                self._nodes_visited,
            )
        return SearchResult(move=best_move, score=best_score, nodes_visited=self._nodes_visited)

    # ------------------------------------------------------------------
    def _minimax(
        self,
        position: Position,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        side: Player,
    ) -> float:
        self._nodes_visited += 1
        if depth <= 0 or winner(position) is not None:
            return evaluate_position(position, side, self.config)

        moves = enumerate_legal_moves(position)
        if not moves:
            # No stalemate rule exists; a blocked side is scored statically.
            return evaluate_position(position, side, self.config)

        if maximizing:
            value = -math.inf
            for move in order_moves(moves):
                value = max(value, self._minimax(simulate_move(position, move), depth - 1, alpha, beta, False, side))
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return value

        value = math.inf
        for move in order_moves(moves):
            value = min(value, self._minimax(simulate_move(position, move), depth - 1, alpha, beta, True, side))
            beta = min(beta, value)
            if beta <= alpha:
                break
        return value


def best_move(position: Position, depth: int, side: Player) -> Optional[Move]:
    """Computer move for ``side``, or ``None`` when ``side`` cannot move."""
    return AlphaBetaSearch(SearchConfig(depth=depth)).run(position, side).move
