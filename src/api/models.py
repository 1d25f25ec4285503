"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from src.chess.fen import is_valid_fen
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, Status


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_fen: Optional[str] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        if not is_valid_fen(value.strip()):
            raise InvalidRequestError(
                f"Cannot interpret starting_fen: {value!r} as a board layout."
            )
        return value.strip()


class SelectSquareRequest(BaseModel):
    """
    A square picked by one of the players.

    NOTE: Squares off the board are deliberately accepted here. The game treats them like any other
    square that leads nowhere (the selection gets cleared), instead of failing the request.
    """

    game_id: UUID
    row: int
    col: int

    def to_square(self) -> Square:
        return Square(self.row, self.col)


class GetGameRequest(BaseModel):
    game_id: UUID


class UndoRequest(BaseModel):
    game_id: UUID


class ResetRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class SquareModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    col: int
    name: str

    @classmethod
    def from_square(cls, square: Square) -> Self:
        return cls(row=square.row, col=square.col, name=square.to_algebraic())


class PieceModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: PieceType
    color: Color
    symbol: str

    @classmethod
    def from_piece(cls, piece: Piece) -> Self:
        return cls(type=piece.type, color=piece.color, symbol=piece.symbol)


class MoveModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_square: SquareModel
    to_square: SquareModel
    moved_piece: PieceModel
    captured_piece: Optional[PieceModel]
    notation: str

    @classmethod
    def from_move(cls, move: Move) -> Self:
        return cls(
            from_square=SquareModel.from_square(move.from_square),
            to_square=SquareModel.from_square(move.to_square),
            moved_piece=PieceModel.from_piece(move.moved_piece),
            captured_piece=(
                PieceModel.from_piece(move.captured_piece)
                if move.captured_piece is not None
                else None
            ),
            notation=move.to_algebraic(),
        )


class GameResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    game_id: UUID
    # board[row][col], row 0 is the top of the board (Black's side)
    board: list[list[Optional[PieceModel]]]
    turn: Color
    status: Status
    winner: Optional[Color]
    selection: Optional[SquareModel]
    legal_destinations: list[SquareModel]
    move_history: list[MoveModel]
    fen: str
