from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from fivehorse.core import (
    ACTION_SPACE_SIZE,
    BOARD_NODES,
    NUM_NODES,
    Move,
    Player,
    Position,
    apply_move,
    decode_move,
    encode_move,
    enumerate_legal_moves,
    initialize_position,
    legal_moves,
    winner,
)
from fivehorse.core.topology import NODE_SPACING
from fivehorse.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
)
from fivehorse.validation import validate_position

SYMBOLS = {None: ".", Player.BLACK: "B", Player.WHITE: "W"}


def render_ascii(position: Position) -> str:
    """Lay the nodes out by coordinate; trap nodes appear right of the grid."""
    cells: Dict[tuple, str] = {}
    for node_id, node in BOARD_NODES.items():
        cells[(node.y // NODE_SPACING, node.x // NODE_SPACING)] = SYMBOLS[position.piece_at(node_id)]
    rows = max(r for r, _ in cells) + 1
    cols = max(c for _, c in cells) + 1
    lines = []
    for r in range(rows):
        lines.append(" ".join(cells.get((r, c), " ") for c in range(cols)).rstrip())
    return "\n".join(lines)


class FiveHorseEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        max_ply: int = 200,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._max_ply = max_ply
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=(BOARD_CHANNELS, NUM_NODES), dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(ACTION_SPACE_SIZE)

        self._position = initialize_position()
        self._ply = 0
        self._winner: Optional[Player] = None

    @property
    def position(self) -> Position:
        return self._position

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def ply(self) -> int:
        return self._ply

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        options = options or {}
        self._max_ply = options.get("max_ply", self._max_ply)
        start = options.get("position")
        if start is not None:
            validate_position(start)
            self._position = start.copy()
        else:
            self._position = initialize_position()
        self._ply = 0
        self._winner = winner(self._position)
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if self._winner is not None:
            raise ValueError("Cannot step a finished game; call reset().")

        move = self._legal_move_for(int(action_index))
        if move is None:
            if self._enforce_legal:
                raise ValueError("Illegal action provided and enforce_legal_actions=True.")
            return self._build_observation(), 0.0, False, False, self._build_info()

        self._position = apply_move(self._position, move)
        self._ply += 1
        self._winner = winner(self._position)

        info = self._build_info()
        info["move"] = move
        terminated = self._winner is not None
        truncated = not terminated and (
            self._ply >= self._max_ply or not info["legal_action_mask"].any()
        )
        return self._build_observation(), self._compute_reward(), terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for move in enumerate_legal_moves(self._position):
            mask[encode_move(move.source, move.destination)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return render_ascii(self._position)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _legal_move_for(self, action_index: int) -> Optional[Move]:
        source, destination = decode_move(action_index)
        for move in legal_moves(self._position, source):
            if move.destination == destination:
                return move
        return None

    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {
            "board": build_board_tensor(self._position),
            "aux": build_aux_vector(self._position),
        }

    def _build_info(self) -> Dict[str, object]:
        return {"legal_action_mask": self.legal_action_mask()}

    def _compute_reward(self) -> float:
        if self._winner == Player.BLACK:
            return 1.0
        if self._winner == Player.WHITE:
            return -1.0
        return 0.0
