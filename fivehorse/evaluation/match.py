from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from fivehorse.core import Player
from fivehorse.env import FiveHorseEnv

from .policies import Policy


@dataclass
class EvaluationResult:
    games_played: int
    black_wins: int
    white_wins: int
    draws: int
    average_length: float

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)


def evaluate_policies(
    policy_black: Policy,
    policy_white: Policy,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], FiveHorseEnv]] = None,
    rng: Optional[np.random.Generator] = None,
) -> EvaluationResult:
    env_factory = env_factory or FiveHorseEnv
    rng = rng or np.random.default_rng()

    black_wins = 0
    white_wins = 0
    draws = 0
    total_ply = 0

    for _ in range(episodes):
        env = env_factory()
        obs, info = env.reset()
        done = False

        while not done:
            legal_mask = info["legal_action_mask"]
            if not legal_mask.any():
                break
            policy = policy_black if env.position.side_to_move == Player.BLACK else policy_white
            probs = policy.act(env.position.copy(), legal_mask)
            if probs.sum() <= 0:
                probs = legal_mask.astype(np.float32)
            probs = probs / probs.sum()
            action_index = int(rng.choice(len(probs), p=probs))
            obs, reward, terminated, truncated, info = env.step(action_index)
            done = terminated or truncated

        total_ply += env.ply
        if env.winner == Player.BLACK:
            black_wins += 1
        elif env.winner == Player.WHITE:
            white_wins += 1
        else:
            draws += 1

    return EvaluationResult(
        games_played=episodes,
        black_wins=black_wins,
        white_wins=white_wins,
        draws=draws,
        average_length=total_ply / max(1, episodes),
    )
