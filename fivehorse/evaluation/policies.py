from __future__ import annotations

from typing import Optional

import numpy as np

from fivehorse.core import Position, encode_move
from fivehorse.search import AlphaBetaSearch, SearchConfig


class Policy:
    """Policy interface producing action probabilities over legal moves."""

    def act(self, position: Position, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class RandomPolicy(Policy):
    """Uniform over the legal moves."""

    def act(self, position: Position, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits.astype(np.float32)
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)


class AlphaBetaPolicy(Policy):
    """Puts all probability on the move chosen by alpha-beta search."""

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.search = AlphaBetaSearch(config)

    def act(self, position: Position, legal_mask: np.ndarray) -> np.ndarray:
        result = np.zeros_like(legal_mask, dtype=np.float32)
        chosen = self.search.run(position).move
        if chosen is None:
            return result
        result[encode_move(chosen.source, chosen.destination)] = 1.0
        return result
