"""
A square on the board

(placed in its own module as multiple other modules need to import it)

Squares are addressed as (row, col), counted from the top-left as the board is shown to the players:
row 0 is Black's back rank (the 8th rank), row 7 is White's back rank (the 1st rank), col 0 is the a-file.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.exceptions import InvalidSquareError

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' - 'h1' get converted to (0,0) - (7,7)"""
        num_rows, num_cols = BOARD_DIMENSIONS
        if len(sq) != 2 or sq[0] not in ascii_lowercase[:num_cols] or not sq[1].isdigit():
            raise InvalidSquareError(f"Cannot interpret {sq!r} as a square name.")

        rank = int(sq[1])
        if not (1 <= rank <= num_rows):
            raise InvalidSquareError(f"Cannot interpret {sq!r} as a square name.")

        col = ord(sq[0]) - ord("a")
        return cls(num_rows - rank, col)

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{BOARD_DIMENSIONS[0] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def shifted(self, d_row: int, d_col: int) -> Square:
        """The square found by stepping (d_row, d_col) away. NOTE: may lie outside the board."""
        return Square(self.row + d_row, self.col + d_col)


def all_squares() -> list[Square]:
    """Every square of the board, top row first"""
    num_rows, num_cols = BOARD_DIMENSIONS
    return [Square(row, col) for row in range(num_rows) for col in range(num_cols)]
