import numpy as np

from fivehorse.core import ACTION_SPACE_SIZE, Player, Position, initialize_position
from fivehorse.env import FiveHorseEnv
from fivehorse.evaluation import AlphaBetaPolicy, RandomPolicy, evaluate_policies
from fivehorse.search import SearchConfig


def short_env() -> FiveHorseEnv:
    return FiveHorseEnv(max_ply=30)


class BoxedStartEnv(FiveHorseEnv):
    def reset(self, *, seed=None, options=None):
        start = Position.from_pieces(
            {"0,0": Player.BLACK, "0,1": Player.WHITE, "1,0": Player.WHITE, "1,1": Player.WHITE}
        )
        return super().reset(seed=seed, options={"position": start})


def test_evaluate_random_vs_random_small():
    policy_black = RandomPolicy()
    policy_white = RandomPolicy()

    result = evaluate_policies(
        policy_black,
        policy_white,
        episodes=2,
        env_factory=short_env,
        rng=np.random.default_rng(2),
    )

    assert result.games_played == 2
    assert result.black_wins + result.white_wins + result.draws == 2
    assert result.average_length > 0


def test_alpha_beta_policy_is_one_hot_on_legal_move():
    env = FiveHorseEnv()
    _, info = env.reset()
    mask = info["legal_action_mask"]

    probs = AlphaBetaPolicy(SearchConfig(depth=1)).act(initialize_position(), mask)

    assert probs.shape == (ACTION_SPACE_SIZE,)
    assert np.isclose(probs.sum(), 1.0)
    assert mask[int(probs.argmax())] == 1


def test_alpha_beta_vs_random_runs():
    result = evaluate_policies(
        AlphaBetaPolicy(SearchConfig(depth=1)),
        RandomPolicy(),
        episodes=1,
        env_factory=lambda: FiveHorseEnv(max_ply=20),
        rng=np.random.default_rng(4),
    )

    assert result.games_played == 1
    assert 0.0 <= result.winrate_black() <= 1.0


def test_side_without_moves_ends_game_as_draw():
    result = evaluate_policies(
        RandomPolicy(),
        RandomPolicy(),
        episodes=1,
        env_factory=BoxedStartEnv,
        rng=np.random.default_rng(0),
    )

    assert result.games_played == 1
    assert result.draws == 1
    assert result.black_wins == 0 and result.white_wins == 0
    assert result.average_length == 0.0
