"""Adversarial search for computer-controlled play."""

from .alphabeta import (
    AlphaBetaSearch,
    SearchConfig,
    SearchResult,
    best_move,
    evaluate_position,
    order_moves,
    simulate_move,
)

__all__ = [
    "AlphaBetaSearch",
    "SearchConfig",
    "SearchResult",
    "best_move",
    "evaluate_position",
    "order_moves",
    "simulate_move",
]
