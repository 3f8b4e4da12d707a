"""Tests for board rendering."""

from rich.console import Console

from kalah_engine.core import GameState, apply_move, create_starting_state, render
from kalah_engine.utils import BoardDisplay


def test_render_starting_position():
    """Test the starting board layout."""
    expected = (
        "   | 4| 4| 4| 4| 4| 4|   \n"
        " 0 |--WHITE TO MOVE--| 0\n"
        "   | 4| 4| 4| 4| 4| 4|   \n"
    )
    assert render(create_starting_state()) == expected


def test_render_reverses_black_row():
    """Black's pit 0 sits top right, across from White's pit 5."""
    state = GameState.from_layout(
        white=[0, 1, 2, 3, 4, 5, 6, 7],
        black=[12, 11, 10, 9, 8, 0, 13, 1],
    )
    lines = render(state).splitlines()

    assert lines[0] == "   |11|10| 9| 8| 0|13|   "
    assert lines[1] == "12 |--BLACK TO MOVE--| 7"
    assert lines[2] == "   | 1| 2| 3| 4| 5| 6|   "


def test_render_game_over():
    state = GameState.from_layout(
        white=[0, 0, 0, 0, 0, 0, 0, 25],
        black=[23, 0, 0, 0, 0, 0, 0, 0],
    )
    assert "--GAME OVER--" in render(state)


def test_str_matches_render():
    state = apply_move(create_starting_state(), 0)
    assert str(state) == render(state)


def test_board_display_panel():
    """Test the rich panel shows the board and the result."""
    console = Console(record=True, width=60)
    display = BoardDisplay(target=console)

    state = GameState.from_layout(
        white=[0, 0, 0, 0, 0, 0, 0, 30],
        black=[18, 0, 0, 0, 0, 0, 0, 0],
    )
    display.show(state, title="Final")

    output = console.export_text()
    assert "--GAME OVER--" in output
    assert "Final" in output
    assert "White wins by 12" in output
