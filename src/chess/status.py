"""
Game status: check, checkmate and stalemate.

Works by brute force: try every move the side to move could make on a copy of the board, and see if their king survives.
At most 16 pieces times 64 squares, so there is no need for anything clever.
"""

from typing import Iterator, Optional

from src.chess.board import Board
from src.chess.moves import is_legal_move
from src.chess.square import Square, all_squares
from src.core.shared_types import Color, Status


def is_in_check(board: Board, color: Color) -> bool:
    """
    Could any of the opponent's pieces move onto the square of your king?

    NOTE: Asks the movement rules on behalf of the opponent, regardless of whose turn it actually is.
    A board without a king of this color (only happens in hand-made positions) is never in check.
    """
    king_square = board.find_king(color)
    if king_square is None:
        return False

    attacker = color.opponent
    return any(
        is_legal_move(board, square, king_square, attacker)
        for square in board.locate_color(attacker)
    )


def is_fully_legal(
    board: Board, from_square: Square, to_square: Square, turn_color: Color
) -> bool:
    """
    The move follows the movement rules AND does not leave your own king in check.

    plan:
    1. Check the movement rules
    2. Copy the board and make the move there
    3. Determine if the king is in check on the new board
    """
    if not is_legal_move(board, from_square, to_square, turn_color):
        return False

    probe = board.clone()
    probe.move_piece(from_square, to_square)
    return not is_in_check(probe, turn_color)


def legal_destinations(
    board: Board, from_square: Square, turn_color: Color
) -> list[Square]:
    """Squares the piece on `from_square` can actually move to. Used to highlight options after selecting a piece."""
    return [
        to_square
        for to_square in all_squares()
        if is_fully_legal(board, from_square, to_square, turn_color)
    ]


def _iter_legal_moves(board: Board, color: Color) -> Iterator[tuple[Square, Square]]:
    for from_square in board.locate_color(color):
        for to_square in all_squares():
            if is_fully_legal(board, from_square, to_square, color):
                yield from_square, to_square


def legal_moves(board: Board, color: Color) -> list[tuple[Square, Square]]:
    """All (from, to) pairs the player with the `color` pieces can play"""
    return list(_iter_legal_moves(board, color))


def has_any_legal_move(board: Board, color: Color) -> bool:
    # stops at the first legal move found
    return next(_iter_legal_moves(board, color), None) is not None


def evaluate(board: Board, turn_color: Color) -> Status:
    """
    Status of the game with `turn_color` to move
    ---

    * in check, no way out   --> CHECKMATE
    * not in check, no moves --> STALEMATE
    * in check, but can escape --> CHECK
    * otherwise IN_PROGRESS
    """
    in_check = is_in_check(board, turn_color)
    can_move = has_any_legal_move(board, turn_color)

    if not can_move:
        return Status.CHECKMATE if in_check else Status.STALEMATE
    return Status.CHECK if in_check else Status.IN_PROGRESS


def find_winner(status: Status, turn_color: Color) -> Optional[Color]:
    """
    Only checkmate has a winner.
    Given we know it is checkmate, the player who is to move just got mated and the opponent must be the winner
    """
    if status != Status.CHECKMATE:
        return None
    return turn_color.opponent
