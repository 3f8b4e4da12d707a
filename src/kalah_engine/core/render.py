"""Plain-text board rendering."""

from .game_state import GameMode, GameState

STATUS_LABELS = {
    GameMode.WHITE_TO_MOVE: "WHITE TO MOVE",
    GameMode.BLACK_TO_MOVE: "BLACK TO MOVE",
    GameMode.GAME_OVER: "--GAME OVER--",
}

PIT_WIDTH = 2


def status_label(state: GameState) -> str:
    """Status text for the middle row of the board."""
    return STATUS_LABELS[state.mode]


def _row(pits) -> str:
    cells = "|".join(f"{stones:>{PIT_WIDTH}}" for stones in pits)
    return f"   |{cells}|   "


def render(state: GameState) -> str:
    """
    Render a position as a two-row board.

    Black's row is printed reversed on top so each pit sits across from
    its opposite, with Black's score on the left and White's on the right:

           | 4| 4| 4| 4| 4| 4|
         0 |--WHITE TO MOVE--| 0
           | 4| 4| 4| 4| 4| 4|

    Args:
        state: Position to render

    Returns:
        Three newline-terminated lines of text
    """
    top = _row(reversed(state.black.pits))
    middle = (
        f"{state.black.score:>{PIT_WIDTH}} "
        f"|--{status_label(state)}--| "
        f"{state.white.score}"
    )
    bottom = _row(state.white.pits)

    return f"{top}\n{middle}\n{bottom}\n"
