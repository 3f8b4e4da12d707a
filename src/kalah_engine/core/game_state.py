"""
Game state representation for a two-player Kalah board.

A Kalah position consists of:
- Six pits and a score slot (store) for each player
- The game mode: White to move, Black to move, or game over

Positions are immutable values. Every move produces a new GameState,
so states can be compared with == and shared between threads freely.
"""

from enum import Enum
from typing import Sequence, Tuple
from dataclasses import dataclass

PITS_PER_SIDE = 6
LAYOUT_WIDTH = PITS_PER_SIDE + 2  # flag/score + pits + score/flag


class GameMode(Enum):
    """Whose turn it is, or that the game has ended."""

    WHITE_TO_MOVE = "white"
    BLACK_TO_MOVE = "black"
    GAME_OVER = "over"


@dataclass(frozen=True)
class PlayerSide:
    """
    One player's half of the board.

    Pit 0 is the first pit sown after the opponent's row, pit 5 sits
    next to this player's own store.
    """

    pits: Tuple[int, ...]
    score: int = 0

    def __post_init__(self) -> None:
        """Validate side invariants."""
        if len(self.pits) != PITS_PER_SIDE:
            raise ValueError(
                f"Side has {len(self.pits)} pits, expected {PITS_PER_SIDE}"
            )
        if any(stones < 0 for stones in self.pits):
            raise ValueError("Negative stone count not allowed")
        if self.score < 0:
            raise ValueError("Negative score not allowed")

    @property
    def stones_in_pits(self) -> int:
        """Stones still on this side of the board (excluding the store)."""
        return sum(self.pits)

    @property
    def is_empty(self) -> bool:
        return all(stones == 0 for stones in self.pits)

    def non_empty_pits(self) -> list:
        """Indices of pits holding at least one stone, ascending."""
        return [i for i, stones in enumerate(self.pits) if stones != 0]


@dataclass(frozen=True)
class GameState:
    """
    Immutable game position.

    Board layout as printed (White sits at the bottom):

               Black pits (5-0)
          [5] [4] [3] [2] [1] [0]
    [B store]                     [W store]
          [0] [1] [2] [3] [4] [5]
               White pits (0-5)

    Stones travel counter-clockwise: along White's row left to right,
    into White's store, then along Black's row right to left, into
    Black's store, and back to White's pit 0. Each player skips the
    opponent's store.
    """

    mode: GameMode
    white: PlayerSide
    black: PlayerSide

    @property
    def total_stones(self) -> int:
        """Stones on the board, stores included."""
        return (
            self.white.stones_in_pits
            + self.white.score
            + self.black.stones_in_pits
            + self.black.score
        )

    @property
    def is_game_over(self) -> bool:
        return self.mode is GameMode.GAME_OVER

    @property
    def active_side(self) -> PlayerSide:
        """Side of the player to move (White's side once the game is over)."""
        if self.mode is GameMode.BLACK_TO_MOVE:
            return self.black
        return self.white

    @property
    def inactive_side(self) -> PlayerSide:
        """Side of the player waiting for their turn."""
        if self.mode is GameMode.BLACK_TO_MOVE:
            return self.white
        return self.black

    @classmethod
    def from_layout(cls, white: Sequence[int], black: Sequence[int]) -> "GameState":
        """
        Build a position from two rows as they read on the physical board.

        Handy for writing test positions by eye. Not a storage format.

        Args:
            white: [turn_flag, pit0, ..., pit5, score]
            black: [score, pit5, ..., pit0, turn_flag]

        Returns:
            GameState. Black moves if black's flag is set, otherwise White
            moves if White's flag is set, otherwise the game is over.
        """
        if len(white) != LAYOUT_WIDTH or len(black) != LAYOUT_WIDTH:
            raise ValueError(f"Layout rows must have {LAYOUT_WIDTH} slots")

        if black[-1] != 0:
            mode = GameMode.BLACK_TO_MOVE
        elif white[0] != 0:
            mode = GameMode.WHITE_TO_MOVE
        else:
            mode = GameMode.GAME_OVER

        return cls(
            mode=mode,
            white=PlayerSide(pits=tuple(white[1:-1]), score=white[-1]),
            black=PlayerSide(pits=tuple(reversed(black[1:-1])), score=black[0]),
        )

    def to_layout(self) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """Inverse of from_layout: (white_row, black_row)."""
        white_flag = 1 if self.mode is GameMode.WHITE_TO_MOVE else 0
        black_flag = 1 if self.mode is GameMode.BLACK_TO_MOVE else 0

        white_row = (white_flag,) + self.white.pits + (self.white.score,)
        black_row = (self.black.score,) + tuple(reversed(self.black.pits)) + (black_flag,)
        return white_row, black_row

    def __str__(self) -> str:
        """Human-readable board representation."""
        from .render import render

        return render(self)
