"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the movement shape for each piece type.

Everything in here is *pseudo-legality*: a move can satisfy these rules and still leave your own king in check.
That final check is done by status.py
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.chess.pieces import Piece
from src.chess.square import Square, all_squares
from src.core.shared_types import Color, PieceType


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_occupied(self, square: Square) -> bool: ...


Vector = tuple[int, int]

# White moves UP the board (towards row 0), Black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_STARTING_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


@dataclass(frozen=True)
class Move:
    """A move that has been played. Stores enough to take it back again."""

    from_square: Square
    to_square: Square
    moved_piece: Piece
    captured_piece: Optional[Piece] = None

    def to_algebraic(self) -> str:
        """Coordinate notation: 'e2e4'"""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def unit_direction(from_square: Square, to_square: Square) -> Vector:
    """Single step (d_row, d_col) pointing from one square towards the other"""
    return (
        _sign(to_square.row - from_square.row),
        _sign(to_square.col - from_square.col),
    )


def is_path_clear(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Walk from one square to the other, one step at a time, and check nothing stands in between.
    ---

    Both end points are excluded: the destination may hold a piece to capture.

    NOTE: Only meaningful if both squares are on the same row, column or diagonal. The shape rules make sure of that before calling.
    """
    d_row, d_col = unit_direction(from_square, to_square)
    square = from_square.shifted(d_row, d_col)
    while square != to_square:
        if board.is_occupied(square):
            return False
        square = square.shifted(d_row, d_col)
    return True


# --- MOVEMENT RULES ---
def is_valid_pawn_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - It can move by two in their first move (so when on their starting row), if both squares are empty
    - takes diagonally, and ONLY when taking (there is no en passant)
    """
    pawn = board.piece(from_square)
    # for the type checker: only called for squares holding a pawn
    assert pawn is not None

    forward = PAWN_DIRECTION[pawn.color]
    d_row = to_square.row - from_square.row
    d_col = to_square.col - from_square.col

    if d_col == 0:
        # pawns never take straight ahead
        if board.is_occupied(to_square):
            return False
        if d_row == forward:
            return True
        if d_row == 2 * forward and from_square.row == PAWN_STARTING_ROW[pawn.color]:
            return not board.is_occupied(from_square.shifted(forward, 0))
        return False

    if abs(d_col) == 1 and d_row == forward:
        target = board.piece(to_square)
        return target is not None and target.color != pawn.color

    return False


def is_valid_knight_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """Knights always move such that |delta_row| + |delta_col| = 3 (and never in a straight line). They jump, so nothing can block them"""
    d_row = abs(to_square.row - from_square.row)
    d_col = abs(to_square.col - from_square.col)
    return (d_row, d_col) in {(2, 1), (1, 2)}


def is_valid_bishop_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    d_row = abs(to_square.row - from_square.row)
    d_col = abs(to_square.col - from_square.col)
    return d_row == d_col != 0 and is_path_clear(board, from_square, to_square)


def is_valid_rook_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """Rooks move either horizontally or vertically"""
    same_row = to_square.row == from_square.row
    same_col = to_square.col == from_square.col
    return (same_row != same_col) and is_path_clear(board, from_square, to_square)


def is_valid_queen_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_valid_rook_move(from_square, to_square, board) or is_valid_bishop_move(
        from_square, to_square, board
    )


def is_valid_king_move(from_square: Square, to_square: Square, board: Board) -> bool:
    """
    The king can move by a single square at the time. (No castling in this game.)
    """
    d_row = abs(to_square.row - from_square.row)
    d_col = abs(to_square.col - from_square.col)
    return max(d_row, d_col) == 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
ShapeRuleFn = Callable[[Square, Square, Board], bool]
SHAPE_RULES: dict[PieceType, ShapeRuleFn] = {
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: is_valid_knight_move,
    PieceType.BISHOP: is_valid_bishop_move,
    PieceType.ROOK: is_valid_rook_move,
    PieceType.QUEEN: is_valid_queen_move,
    PieceType.KING: is_valid_king_move,
}


def is_legal_move(
    board: Board, from_square: Square, to_square: Square, turn_color: Color
) -> bool:
    """
    Can the player with the `turn_color` pieces move the piece on `from_square` to `to_square`?
    ---

    1. Not moving at all is not a move.
    2. You must move your own piece.
    3. You cannot take your own piece.
    4. The piece type decides the rest (see SHAPE_RULES).
    """
    if from_square == to_square:
        return False

    if not (from_square.is_within_bounds() and to_square.is_within_bounds()):
        return False

    piece = board.piece(from_square)
    if piece is None or piece.color != turn_color:
        return False

    target = board.piece(to_square)
    if target is not None and target.color == turn_color:
        return False

    shape_rule = SHAPE_RULES[piece.type]
    return shape_rule(from_square, to_square, board)


def candidate_destinations(
    board: Board, from_square: Square, turn_color: Color
) -> list[Square]:
    """Every square the piece could go to, ignoring the safety of your own king"""
    return [
        to_square
        for to_square in all_squares()
        if is_legal_move(board, from_square, to_square, turn_color)
    ]
