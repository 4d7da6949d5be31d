"""Five Horse (Wuma) rule engine and alpha-beta search."""

from . import core, env, evaluation, features, search, session, validation
from .core import (
    Move,
    Player,
    Position,
    apply_move,
    enumerate_legal_moves,
    initialize_position,
    legal_moves,
    winner,
)
from .env import FiveHorseEnv
from .evaluation import AlphaBetaPolicy, EvaluationResult, RandomPolicy, evaluate_policies
from .features import build_aux_vector, build_board_tensor, position_to_numpy
from .search import AlphaBetaSearch, SearchConfig, best_move
from .session import GameMode, GameSession, SessionConfig

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "search",
    "session",
    "validation",
    "Move",
    "Player",
    "Position",
    "apply_move",
    "enumerate_legal_moves",
    "initialize_position",
    "legal_moves",
    "winner",
    "FiveHorseEnv",
    "AlphaBetaPolicy",
    "EvaluationResult",
    "RandomPolicy",
    "evaluate_policies",
    "build_aux_vector",
    "build_board_tensor",
    "position_to_numpy",
    "AlphaBetaSearch",
    "SearchConfig",
    "best_move",
    "GameMode",
    "GameSession",
    "SessionConfig",
]
