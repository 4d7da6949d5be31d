import numpy as np

from fivehorse.core import NUM_NODES, Player, initialize_position, node_index
from fivehorse.features import build_aux_vector, build_board_tensor, position_to_numpy


def test_position_to_numpy_initial_counts():
    board, aux = position_to_numpy(initialize_position())

    assert board.shape == (3, NUM_NODES)
    assert board[0].sum() == 5
    assert board[1].sum() == 5
    assert board[2].sum() == 4
    assert board[0, node_index("0,2")] == 1.0
    assert board[1, node_index("4,2")] == 1.0
    assert np.array_equal(aux, np.array([1.0, 0.0], dtype=np.float32))


def test_aux_vector_tracks_side_to_move():
    position = initialize_position().with_side_to_move(Player.WHITE)

    assert np.array_equal(build_aux_vector(position), np.array([0.0, 1.0], dtype=np.float32))


def test_board_tensor_does_not_alias_position():
    position = initialize_position()
    tensor = build_board_tensor(position)
    tensor[:] = 0.0

    assert position.piece_count(Player.BLACK) == 5
