import pytest

from fivehorse.core import BOARD_NODES, NUM_NODES, TRAP_NODES, collinear, is_trap, neighbors
from fivehorse.core.topology import continuation


def test_board_has_grid_and_trap_nodes():
    assert NUM_NODES == 29
    assert set(TRAP_NODES) == {"m_top", "m_right", "m_bottom", "m_center"}
    assert all(is_trap(node_id) for node_id in TRAP_NODES)
    assert not is_trap("2,4")


def test_edges_are_symmetric():
    for node_id, node in BOARD_NODES.items():
        for other in node.neighbors:
            assert node_id in neighbors(other)


def test_diagonals_only_around_star_centres():
    assert "1,1" in neighbors("0,0")
    assert "2,2" in neighbors("1,1")
    assert "1,3" in neighbors("2,2")
    assert "1,2" not in neighbors("0,1")
    assert "2,3" not in neighbors("1,2")


def test_trap_attaches_to_middle_right():
    assert set(neighbors("2,4")) == {"1,4", "3,4", "2,3", "1,3", "3,3", "m_top", "m_bottom", "m_center"}
    assert set(neighbors("m_right")) == {"m_top", "m_center", "m_bottom"}


def test_collinear_queries():
    assert collinear("0,0", "1,1", "2,2")
    assert collinear("2,3", "2,4", "m_center")
    assert collinear("m_top", "m_center", "m_bottom")
    assert not collinear("0,0", "1,1", "2,1")


def test_continuation_runs_straight_into_trap():
    assert continuation("2,3", "2,4") == "m_center"
    assert continuation("2,4", "m_center") == "m_right"
    assert continuation("m_center", "m_right") is None
    assert continuation("1,3", "2,4") == "m_bottom"


def test_unknown_node_is_a_hard_failure():
    with pytest.raises(KeyError):
        neighbors("9,9")
    with pytest.raises(KeyError):
        collinear("0,0", "1,1", "nowhere")
