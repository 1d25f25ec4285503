"""The Game board: which piece stands on which square. Pure data, the rules live in moves.py and status.py"""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.fen import EMPTY_POSITION, STARTING_POSITION, is_valid_position
from src.chess.pieces import Piece
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color, PieceType


@dataclass
class Board:
    # Every square on the board is a key. Empty squares map to None.
    position: dict[Square, Optional[Piece]]

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using a given FEN string.

        That is, we supply the first part of the FEN string that denotes the board position
        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on row 0 (the 8th rank), starting with rook on a8, knight on b8, etc.
        * black pawns cover row 1 entirely
        * rows 2 through 5 have 8 consecutive empty squares
        * row 6 are the white pawns (capital letters)
        * row 7 are the white pieces.
        """
        if not is_valid_position(fen_str):
            raise InvalidFENError(f"Cannot interpret {fen_str!r} as a board position.")

        position: dict[Square, Optional[Piece]] = {}
        for row, fen_one_row in enumerate(fen_str.split("/")):
            col = 0
            for character in fen_one_row:
                if character.isalpha():
                    # simple case: a letter directly denotes the piece that should be created
                    position[Square(row, col)] = Piece.from_fen(character)
                    col += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    for _ in range(int(character)):
                        position[Square(row, col)] = None
                        col += 1
        return cls(position)

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_POSITION)

    @classmethod
    def empty(cls) -> Self:
        return cls.from_fen(EMPTY_POSITION)

    def to_fen(self) -> str:
        """Rows are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_fen(self, row: int) -> str:
        """FEN string of a single row"""
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            piece = self.piece(Square(row, col))

            if piece is not None:
                if empty_count > 0:
                    fen_characters.append(str(empty_count))
                    empty_count = 0
                fen_characters.append(piece.to_fen())
            else:
                empty_count += 1

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.position[square]

    def place_piece(self, square: Square, piece: Optional[Piece]) -> None:
        """Overwrite whatever stands on the square. Placing None empties it."""
        self.position[square] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        removed = self.position[square]
        self.position[square] = None
        return removed

    def is_occupied(self, square: Square) -> bool:
        return self.position[square] is not None

    def clone(self) -> Self:
        """Independent copy, so hypothetical moves can be tried without touching this board"""
        # pieces are immutable, so copying the mapping is enough
        return type(self)(dict(self.position))

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square, piece in self.position.items()
            if piece is not None and piece.color == color
        ]

    def find_king(self, color: Color) -> Optional[Square]:
        king = Piece(PieceType.KING, color)
        return next(
            (square for square, piece in self.position.items() if piece == king), None
        )

    def move_piece(self, from_square: Square, to_square: Square) -> Optional[Piece]:
        """Update the position on the board. Returns the piece that got captured (if any)."""
        piece_that_moved = self.remove_piece(from_square)
        captured = self.position[to_square]
        self.position[to_square] = piece_that_moved
        return captured

    def __str__(self) -> str:
        num_rows, num_cols = BOARD_DIMENSIONS
        rows = [
            " ".join(
                piece.to_fen() if (piece := self.piece(Square(row, col))) else "."
                for col in range(num_cols)
            )
            for row in range(num_rows)
        ]
        return "\n".join(rows)
