"""Tests for game state representation."""

import pytest
from kalah_engine.core import GameMode, GameState, PlayerSide, create_starting_state


def test_create_player_side():
    """Test basic side creation."""
    side = PlayerSide(pits=(1, 2, 3, 0, 0, 4), score=7)

    assert side.stones_in_pits == 10
    assert side.score == 7
    assert side.non_empty_pits() == [0, 1, 2, 5]
    assert side.is_empty is False


def test_empty_side():
    """Test a side with no stones left in its pits."""
    side = PlayerSide(pits=(0,) * 6, score=12)

    assert side.is_empty is True
    assert side.non_empty_pits() == []


def test_side_validation():
    """Test side validation catches errors."""
    # Wrong pit count
    with pytest.raises(ValueError):
        PlayerSide(pits=(4,) * 5)

    # Negative stones
    with pytest.raises(ValueError):
        PlayerSide(pits=(4, 4, -1, 4, 4, 4))

    # Negative score
    with pytest.raises(ValueError):
        PlayerSide(pits=(4,) * 6, score=-1)


def test_states_compare_by_value():
    """Two independently built positions with the same contents are equal."""
    a = create_starting_state()
    b = create_starting_state()

    assert a == b
    assert hash(a) == hash(b)


def test_active_and_inactive_sides():
    """Test the mover's side follows the mode."""
    white = PlayerSide(pits=(1,) * 6)
    black = PlayerSide(pits=(2,) * 6)

    state = GameState(mode=GameMode.WHITE_TO_MOVE, white=white, black=black)
    assert state.active_side is white
    assert state.inactive_side is black

    state = GameState(mode=GameMode.BLACK_TO_MOVE, white=white, black=black)
    assert state.active_side is black
    assert state.inactive_side is white


def test_from_layout_starting_position():
    """Layout rows read off a physical starting board."""
    state = GameState.from_layout(
        white=[1, 4, 4, 4, 4, 4, 4, 0],
        black=[0, 4, 4, 4, 4, 4, 4, 0],
    )

    assert state == create_starting_state()
    assert state.total_stones == 48


def test_from_layout_reverses_black_row():
    """Black's pits are written right to left on the board."""
    state = GameState.from_layout(
        white=[0, 1, 2, 3, 4, 5, 6, 10],
        black=[20, 11, 12, 13, 14, 15, 16, 1],
    )

    assert state.mode is GameMode.BLACK_TO_MOVE
    assert state.white.pits == (1, 2, 3, 4, 5, 6)
    assert state.white.score == 10
    assert state.black.pits == (16, 15, 14, 13, 12, 11)
    assert state.black.score == 20


def test_from_layout_game_over_when_no_flag():
    """Neither turn flag set means the game is over."""
    state = GameState.from_layout(
        white=[0, 4, 4, 4, 4, 4, 4, 0],
        black=[0, 4, 4, 4, 4, 4, 4, 0],
    )

    assert state.mode is GameMode.GAME_OVER
    assert state.is_game_over


def test_to_layout_inverts_from_layout():
    """Test layout export gives back the rows it was built from."""
    white = (0, 3, 0, 1, 7, 2, 0, 9)
    black = (5, 0, 6, 2, 2, 1, 3, 1)

    state = GameState.from_layout(white, black)

    assert state.to_layout() == (white, black)


def test_layout_validation():
    """Rows of the wrong width are rejected."""
    with pytest.raises(ValueError):
        GameState.from_layout(white=[1, 4, 4, 4, 4, 4, 4], black=[0] * 8)
