"""
Contract for whoever draws the board (and for the Service layer).

Read-only picture of a game at one moment. Changing it does not affect the game it was taken from.
"""

from dataclasses import dataclass
from typing import Optional

from src.chess.moves import Move
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color, Status


@dataclass(frozen=True)
class GameSnapshot:
    board: dict[Square, Optional[Piece]]
    turn_color: Color
    status: Status
    winner: Optional[Color]
    selection: Optional[Square]
    legal_destinations: tuple[Square, ...]
    history: tuple[Move, ...]
    fen: str
