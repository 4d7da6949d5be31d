import pytest

from fivehorse.core import Move, Player, Position, initialize_position
from fivehorse.search import SearchConfig
from fivehorse.session import GameMode, GameSession, SessionConfig


def pve_config() -> SessionConfig:
    return SessionConfig(mode=GameMode.PVE, computer_side=Player.WHITE, search=SearchConfig(depth=2))


def test_pvp_play_and_undo_one_turn():
    session = GameSession()

    record = session.play_nodes("0,0", "1,0")

    assert record.mover == Player.BLACK
    assert session.turn_count == 1
    assert session.position.side_to_move == Player.WHITE
    assert len(session.history) == 1

    assert session.undo()
    assert session.turn_count == 0
    assert session.position.same_board(initialize_position())
    assert session.position.side_to_move == Player.BLACK


def test_undo_without_history_does_nothing():
    assert not GameSession().undo()


def test_illegal_move_is_rejected():
    session = GameSession()

    with pytest.raises(ValueError):
        session.play(Move("0,0", "4,4"))
    with pytest.raises(ValueError):
        session.play_nodes("4,0", "3,0")
    assert session.turn_count == 0


def test_computer_replies_in_pve_and_undo_rewinds_both_turns():
    session = GameSession(pve_config())
    session.play_nodes("0,2", "1,2")

    assert session.is_computer_turn()
    record = session.computer_move()

    assert record is not None
    assert record.mover == Player.WHITE
    assert session.position.side_to_move == Player.BLACK
    assert not session.is_computer_turn()

    assert session.undo()
    assert session.turn_count == 0
    assert session.position.same_board(initialize_position())


def test_pve_undo_after_single_turn_resets():
    session = GameSession(pve_config())
    session.play_nodes("0,2", "1,2")

    assert session.undo()
    assert session.history == []
    assert session.position.same_board(initialize_position())


def test_computer_move_is_noop_in_pvp():
    assert GameSession().computer_move() is None


def test_winning_move_ends_session():
    start = Position.from_pieces({"1,2": Player.BLACK, "2,1": Player.WHITE, "2,3": Player.WHITE})
    session = GameSession(start=start)

    record = session.play_nodes("1,2", "2,2")

    assert record.winner == Player.BLACK
    assert session.is_over
    assert session.select("2,2") == []
    assert record.frames[-1].same_board(session.position)
    with pytest.raises(ValueError):
        session.play_nodes("2,2", "3,2")


def test_reset_restores_custom_start():
    start = Position.from_pieces({"1,2": Player.BLACK, "2,1": Player.WHITE, "4,4": Player.WHITE})
    session = GameSession(start=start)
    session.play_nodes("1,2", "1,1")

    session.reset()

    assert session.position.same_board(start)
    assert session.turn_count == 0
