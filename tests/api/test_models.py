from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import (
    CreateGameRequest,
    GameResponse,
    MoveModel,
    PieceModel,
    SelectSquareRequest,
    SquareModel,
)
from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, Status


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
@pytest.mark.parametrize(
    "valid_fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",  # full FEN, extra fields ignored later on
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR b",  # placement + color
        "4k3/8/8/8/8/8/8/4K3",  # placement only
    ],
)
def test_valid_fen(valid_fen: str) -> None:
    """Test that CreateGameRequest accepts a usable FEN string."""
    request = CreateGameRequest(starting_fen=valid_fen)
    assert request.starting_fen == valid_fen


def test_fen_whitespace_stripped() -> None:
    request = CreateGameRequest(starting_fen="  4k3/8/8/8/8/8/8/4K3 w \n")
    assert request.starting_fen == "4k3/8/8/8/8/8/8/4K3 w"


def test_starting_fen_is_optional() -> None:
    """Should be able to not supply a starting FEN, and validator just returns None."""
    assert CreateGameRequest().starting_fen is None
    assert CreateGameRequest(starting_fen=None).starting_fen is None


@pytest.mark.parametrize(
    "invalid_fen",
    [
        "",  # nothing at all
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x",  # no such color
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w",  # only 7 rows
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNRR w",  # 9 columns in the last row
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX w",  # unknown piece
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 extra",  # too many space-separated values
    ],
)
def test_invalid_fen(invalid_fen: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(starting_fen=invalid_fen)


# -- Validation - SelectSquareRequest --
def test_select_square_request(mock_id: UUID) -> None:
    request = SelectSquareRequest(game_id=mock_id, row=6, col=4)
    assert request.to_square() == Square(6, 4)


def test_select_square_off_the_board_accepted(mock_id: UUID) -> None:
    """Off-board squares are not a request error. The game simply ignores them."""
    request = SelectSquareRequest(game_id=mock_id, row=-1, col=12)
    assert request.to_square() == Square(-1, 12)
    assert not request.to_square().is_within_bounds()


def test_select_square_needs_a_game_id() -> None:
    with pytest.raises(ValidationError):
        _ = SelectSquareRequest(game_id="not-a-uuid", row=0, col=0)


# -- Response models --
def test_square_model() -> None:
    model = SquareModel.from_square(Square(6, 4))
    assert model == SquareModel(row=6, col=4, name="e2")


def test_piece_model() -> None:
    model = PieceModel.from_piece(Piece(PieceType.KNIGHT, Color.BLACK))
    assert model.type == PieceType.KNIGHT
    assert model.color == Color.BLACK
    assert model.symbol == "♞"


def test_move_model() -> None:
    move = Move(
        Square.from_algebraic("e4"),
        Square.from_algebraic("d5"),
        Piece(PieceType.PAWN, Color.WHITE),
        Piece(PieceType.QUEEN, Color.BLACK),
    )
    model = MoveModel.from_move(move)
    assert model.notation == "e4d5"
    assert model.from_square.name == "e4"
    assert model.to_square.name == "d5"
    assert model.captured_piece is not None
    assert model.captured_piece.type == PieceType.QUEEN


def test_move_model_without_capture() -> None:
    move = Move(Square(6, 4), Square(4, 4), Piece(PieceType.PAWN, Color.WHITE))
    assert MoveModel.from_move(move).captured_piece is None


def test_game_response_is_frozen(mock_id: UUID) -> None:
    response = GameResponse(
        game_id=mock_id,
        board=[[None] * 8 for _ in range(8)],
        turn=Color.WHITE,
        status=Status.STALEMATE,
        winner=None,
        selection=None,
        legal_destinations=[],
        move_history=[],
        fen="8/8/8/8/8/8/8/8 w",
    )
    assert response.status == Status.STALEMATE
    with pytest.raises(ValidationError):
        response.turn = Color.BLACK  # type: ignore[misc]
