from __future__ import annotations

from typing import Tuple

import numpy as np

from fivehorse.core import NUM_NODES, Player, Position
from fivehorse.core.topology import TRAP_MASK

BOARD_CHANNELS = 3  # black pieces, white pieces, trap nodes
AUX_VECTOR_SIZE = 2  # side to move one-hot


def build_board_tensor(position: Position) -> np.ndarray:
    """Return board tensor with shape (3, NUM_NODES) channel-first."""
    tensor = np.zeros((BOARD_CHANNELS, NUM_NODES), dtype=np.float32)
    tensor[0] = position.board == int(Player.BLACK)
    tensor[1] = position.board == int(Player.WHITE)
    tensor[2] = TRAP_MASK
    return tensor


def build_aux_vector(position: Position) -> np.ndarray:
    aux = np.zeros((AUX_VECTOR_SIZE,), dtype=np.float32)
    aux[int(position.side_to_move) - 1] = 1.0
    return aux


def position_to_numpy(position: Position) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(position), build_aux_vector(position)
