"""Feature extraction helpers for Five Horse positions."""

from .observation import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
    position_to_numpy,
)

__all__ = [
    "AUX_VECTOR_SIZE",
    "BOARD_CHANNELS",
    "build_board_tensor",
    "build_aux_vector",
    "position_to_numpy",
]
