"""Core game state representation and rules."""

from .game_state import GameMode, GameState, PlayerSide, PITS_PER_SIDE
from .render import render, status_label
from .rules import (
    IllegalMoveError,
    InvalidPitIndexError,
    create_starting_state,
    generate_legal_moves,
    apply_move,
    is_terminal,
    evaluate_terminal,
    get_game_result,
    get_opposite_pit,
    initial_position,
    legal_moves,
)

__all__ = [
    "GameMode",
    "GameState",
    "PlayerSide",
    "PITS_PER_SIDE",
    "render",
    "status_label",
    "IllegalMoveError",
    "InvalidPitIndexError",
    "create_starting_state",
    "generate_legal_moves",
    "apply_move",
    "is_terminal",
    "evaluate_terminal",
    "get_game_result",
    "get_opposite_pit",
    "initial_position",
    "legal_moves",
]
