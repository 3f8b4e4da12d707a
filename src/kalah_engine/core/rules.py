"""
Kalah game rules implementation.

Implements the sowing rules:
- Counter-clockwise sowing, skipping the opponent's store
- Capture when the last stone lands in an own pit that was empty
- Extra turn when the last stone lands in the own store
- Game ends when the mover's side is empty after their move
"""

import logging
from typing import List, Optional

from .game_state import GameMode, GameState, PlayerSide, PITS_PER_SIDE

logger = logging.getLogger(__name__)

# One lap of the sowing path: own pits, own store, opponent pits
STORE_SLOT = PITS_PER_SIDE
LAP_LENGTH = 2 * PITS_PER_SIDE + 1


class IllegalMoveError(ValueError):
    """Raised when a move cannot be played from the given position."""
    pass


class InvalidPitIndexError(IllegalMoveError):
    """Raised when a pit index is outside 0..PITS_PER_SIDE-1."""
    pass


def create_starting_state(num_seeds: int = 4) -> GameState:
    """
    Create the initial game state.

    Args:
        num_seeds: Initial stones per pit

    Returns:
        Starting GameState with White to move
    """
    if num_seeds < 1:
        raise ValueError(f"Need at least one stone per pit, got {num_seeds}")

    side = PlayerSide(pits=(num_seeds,) * PITS_PER_SIDE, score=0)
    return GameState(mode=GameMode.WHITE_TO_MOVE, white=side, black=side)


def get_opposite_pit(pit_idx: int, num_pits: int = PITS_PER_SIDE) -> int:
    """
    Get the index of the pit across the board, in the opponent's row.

    Both rows are indexed in sowing order, so pit i faces pit
    (num_pits - 1 - i) on the other side.

    Args:
        pit_idx: Pit index within a row
        num_pits: Number of pits per row

    Returns:
        Opposite pit index within the other row
    """
    if not 0 <= pit_idx < num_pits:
        raise InvalidPitIndexError(f"Pit index {pit_idx} out of range 0..{num_pits - 1}")

    return num_pits - 1 - pit_idx


def generate_legal_moves(state: GameState) -> List[int]:
    """
    Generate all legal moves for the player to move.

    A move is legal if the chosen pit belongs to the player to move and
    contains at least one stone. A finished game has no legal moves.

    Args:
        state: Current game state

    Returns:
        Ascending list of pit indices
    """
    if state.is_game_over:
        return []

    return state.active_side.non_empty_pits()


def apply_move(state: GameState, move: int) -> GameState:
    """
    Apply a move and return the resulting state.

    1. Pick up all stones from the chosen pit
    2. Sow them one per slot: own pits, own store, opponent pits, and round
       again as many laps as needed
    3. If the last stone lands in an own pit that was empty, bank it together
       with everything in the opposite pit
    4. If the last stone lands in the own store, the same player moves again
    5. If the mover's pits are now all empty, the game is over

    A finished game is a fixed point: any move returns the same position.

    Args:
        state: Current game state
        move: Pit index (0..5) of the player to move

    Returns:
        New GameState after the move

    Raises:
        InvalidPitIndexError: move is not a pit index
        IllegalMoveError: the chosen pit is empty
    """
    if state.is_game_over:
        return state

    if isinstance(move, bool) or not isinstance(move, int) or not 0 <= move < PITS_PER_SIDE:
        raise InvalidPitIndexError(f"Pit index {move!r} out of range 0..{PITS_PER_SIDE - 1}")

    active = state.active_side
    inactive = state.inactive_side

    if active.pits[move] == 0:
        raise IllegalMoveError(f"Pit {move} is empty")

    # Mutable copies of both rows
    own_pits = list(active.pits)
    own_score = active.score
    their_pits = list(inactive.pits)

    # Pick up stones
    stones_in_hand = own_pits[move]
    own_pits[move] = 0

    # Slots 0..5 are own pits, 6 is own store, 7..12 are opponent pits
    slot = move
    while stones_in_hand > 0:
        slot = (slot + 1) % LAP_LENGTH
        stones_in_hand -= 1

        if slot < STORE_SLOT:
            if stones_in_hand == 0 and own_pits[slot] == 0:
                # Capture: last stone in an own empty pit
                opposite = get_opposite_pit(slot)
                captured = 1 + their_pits[opposite]
                their_pits[opposite] = 0
                own_score += captured
                logger.debug(f"Capture at pit {slot}: {captured} stones banked")
            else:
                own_pits[slot] += 1
        elif slot == STORE_SLOT:
            own_score += 1
        else:
            their_pits[slot - STORE_SLOT - 1] += 1

    new_active = PlayerSide(pits=tuple(own_pits), score=own_score)
    new_inactive = PlayerSide(pits=tuple(their_pits), score=inactive.score)

    if new_active.is_empty:
        # Game over takes priority over an extra turn
        next_mode = GameMode.GAME_OVER
        logger.debug("Mover's side is empty, game over")
    elif slot == STORE_SLOT:
        # Extra turn - player doesn't change
        next_mode = state.mode
        logger.debug("Last stone in store, extra turn")
    elif state.mode is GameMode.WHITE_TO_MOVE:
        next_mode = GameMode.BLACK_TO_MOVE
    else:
        next_mode = GameMode.WHITE_TO_MOVE

    if state.mode is GameMode.WHITE_TO_MOVE:
        white, black = new_active, new_inactive
    else:
        white, black = new_inactive, new_active

    return GameState(mode=next_mode, white=white, black=black)


def is_terminal(state: GameState) -> bool:
    """
    Check if the game has ended.

    Besides GAME_OVER, a capture can empty the opponent's row; the
    opponent then has the move but nothing to sow, which also ends play.

    Args:
        state: Game state to check

    Returns:
        True if no further move can be made
    """
    return state.is_game_over or state.active_side.is_empty


def evaluate_terminal(state: GameState) -> int:
    """
    Evaluate a finished game.

    Stones left in a player's pits count toward that player's store.
    Value = White total - Black total

    Args:
        state: Terminal game state

    Returns:
        Game value from White's perspective (positive = White wins,
        negative = Black wins, 0 = tie)
    """
    if not is_terminal(state):
        raise ValueError("Cannot evaluate non-terminal state")

    white_total = state.white.score + state.white.stones_in_pits
    black_total = state.black.score + state.black.stones_in_pits

    return white_total - black_total


def get_game_result(state: GameState) -> Optional[str]:
    """
    Get human-readable game result.

    Args:
        state: Game state

    Returns:
        Result string or None if not terminal
    """
    if not is_terminal(state):
        return None

    value = evaluate_terminal(state)

    if value > 0:
        return f"White wins by {value}"
    elif value < 0:
        return f"Black wins by {-value}"
    else:
        return "Tie game"


# Short names for drivers
initial_position = create_starting_state
legal_moves = generate_legal_moves
