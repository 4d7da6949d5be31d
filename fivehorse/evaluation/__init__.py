from .match import EvaluationResult, evaluate_policies
from .policies import AlphaBetaPolicy, Policy, RandomPolicy

__all__ = [
    "AlphaBetaPolicy",
    "EvaluationResult",
    "Policy",
    "RandomPolicy",
    "evaluate_policies",
]
