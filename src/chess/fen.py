"""
Board layouts written as (a subset of) a FEN string.

Only the first two fields of a FEN matter to this game: the piece placement and the color to move.
Castling rights, en passant square and move counters are accepted (so a full FEN can be pasted in) but ignored.
"""

from dataclasses import dataclass
from typing import Self

from src.chess.pieces import FEN_TO_PIECE
from src.chess.square import BOARD_DIMENSIONS
from src.core.config import STANDARD_POSITION
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color

STARTING_POSITION = STANDARD_POSITION
EMPTY_POSITION = "/".join(["8"] * BOARD_DIMENSIONS[0])

# <placement> [<color> [<castling> <en passant> <half moves> <full moves>]]
MAX_FEN_FIELDS = 6


def is_valid_fen(fen: str) -> bool:
    """
    Check if given string can be used to set up a game.
    """
    parts = fen.split()
    if not (1 <= len(parts) <= MAX_FEN_FIELDS):
        return False

    if not is_valid_position(parts[0]):
        return False

    if len(parts) > 1 and not is_valid_color_code(parts[1]):
        return False
    return True


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_rows, num_cols = BOARD_DIMENSIONS
    row_fens = position.split("/")
    if len(row_fens) != num_rows:
        return False

    for row_fen in row_fens:
        col_count = 0
        for character in row_fen:
            # make sure every character is valid
            if character.isdigit():
                col_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                col_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if col_count != num_cols:
            return False
    return True


def is_valid_color_code(color: str) -> bool:
    return color in {"w", "b"}


@dataclass(frozen=True)
class GameSetup:
    """Where the pieces stand and who moves first."""

    position: str
    color_to_move: Color

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        """Parse the FEN into data"""

        # raise an exception if invalid FEN:
        if not is_valid_fen(fen):
            raise InvalidFENError(f"Cannot interpret supplied string as FEN: {fen!r}")

        parts = fen.split()
        position = parts[0]
        # White moves first unless stated otherwise
        color_to_move = Color.BLACK if len(parts) > 1 and parts[1] == "b" else Color.WHITE
        return cls(position, color_to_move)

    def to_fen(self) -> str:
        active_color = "w" if self.color_to_move == Color.WHITE else "b"
        return f"{self.position} {active_color}"

    @classmethod
    def starting_position(cls) -> Self:
        return cls(STARTING_POSITION, Color.WHITE)
