"""
The GameController is the entrypoint into the domain layer.

It owns the one mutable thing in the game (the GameState), takes square selections from the players,
and hands the board to the movement rules (moves.py) and the status checks (status.py).

Nothing in here raises during play: a selection that does not lead anywhere just clears / changes the current selection.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Self

from src.chess.board import Board
from src.chess.fen import GameSetup
from src.chess.game_model import GameSnapshot
from src.chess.moves import Move
from src.chess.square import Square
from src.chess.status import evaluate, find_winner, legal_destinations
from src.core.shared_types import Color, Status

_LOGGER = logging.getLogger(__name__)

SnapshotListener = Callable[[GameSnapshot], None]


@dataclass
class GameState:
    board: Board
    turn_color: Color
    history: list[Move] = field(default_factory=list)
    status: Status = Status.IN_PROGRESS
    # Idle when no square is selected
    selection: Optional[Square] = None
    legal_destinations: list[Square] = field(default_factory=list)

    @classmethod
    def from_setup(cls, setup: GameSetup) -> Self:
        board = Board.from_fen(setup.position)
        return cls(
            board=board,
            turn_color=setup.color_to_move,
            status=evaluate(board, setup.color_to_move),
        )

    @property
    def winner(self) -> Optional[Color]:
        return find_winner(self.status, self.turn_color)


class GameController:
    """
    One game of chess between two players sharing a screen.
    ---

    Selection state machine (on every selected square `s`):

    * Idle + own piece on s                -> select s, highlight where it can go
    * Selected(sq) + s == sq               -> Idle
    * Selected(sq) + s a legal destination -> play the move, other player's turn, Idle
    * Selected(sq) + another own piece     -> select that one instead
    * Selected(sq) + anything else         -> Idle

    After checkmate or stalemate, only `reset()` does anything.
    """

    def __init__(self, setup: Optional[GameSetup] = None) -> None:
        self._state = GameState.from_setup(setup or GameSetup.starting_position())
        self.listeners: list[SnapshotListener] = []

    @property
    def state(self) -> GameState:
        return self._state

    # --- INPUT ---
    def on_square_selected(self, square: Square) -> None:
        """A player clicked / tapped a square."""
        if self._state.status.is_terminal:
            _LOGGER.debug(
                "Ignoring selection of %s, game is over (%s)", square, self._state.status
            )
            return

        selection = self._state.selection
        if selection is None:
            if self._is_own_piece(square):
                self._select(square)
                self._notify()
            else:
                _LOGGER.debug("Nothing to select on %s", square)
            return

        if square == selection:
            self._clear_selection()
        elif square in self._state.legal_destinations:
            self._apply_move(selection, square)
        elif self._is_own_piece(square):
            self._select(square)
        else:
            _LOGGER.debug("Rejected %s -> %s", selection, square)
            self._clear_selection()
        self._notify()

    def undo(self) -> None:
        """Take back the last move"""
        if self._state.status.is_terminal:
            _LOGGER.debug("Ignoring undo, game is over (%s)", self._state.status)
            return

        if not self._state.history:
            _LOGGER.debug("Nothing to undo")
            return

        move = self._state.history.pop()
        board = self._state.board
        board.place_piece(move.from_square, move.moved_piece)
        board.place_piece(move.to_square, move.captured_piece)
        self._state.turn_color = self._state.turn_color.opponent
        self._clear_selection()
        # taking back a move can put a king back into (or out of) check
        self._update_status()
        _LOGGER.info("Undo %s", move.to_algebraic())
        self._notify()

    def reset(self) -> None:
        """Throw away the current game and start over from the standard position"""
        self._state = GameState.from_setup(GameSetup.starting_position())
        _LOGGER.info("New game")
        self._notify()

    # --- OUTPUT ---
    def snapshot(self) -> GameSnapshot:
        state = self._state
        return GameSnapshot(
            board=dict(state.board.position),
            turn_color=state.turn_color,
            status=state.status,
            winner=state.winner,
            selection=state.selection,
            legal_destinations=tuple(state.legal_destinations),
            history=tuple(state.history),
            fen=GameSetup(state.board.to_fen(), state.turn_color).to_fen(),
        )

    # -- PRIVATE HELPERS ---
    def _is_own_piece(self, square: Square) -> bool:
        if not square.is_within_bounds():
            return False
        piece = self._state.board.piece(square)
        return piece is not None and piece.color == self._state.turn_color

    def _select(self, square: Square) -> None:
        self._state.selection = square
        self._state.legal_destinations = legal_destinations(
            self._state.board, square, self._state.turn_color
        )

    def _clear_selection(self) -> None:
        self._state.selection = None
        self._state.legal_destinations = []

    def _apply_move(self, from_square: Square, to_square: Square) -> None:
        """
        Play a move that is already known to be legal
        -----

        1. update the board
        2. record the move (with whatever got captured, so it can be taken back)
        3. other player's turn
        4. update game status
        """
        board = self._state.board
        moved_piece = board.piece(from_square)
        # for the type checker: legal destinations only exist for a selected piece
        assert moved_piece is not None

        captured_piece = board.move_piece(from_square, to_square)
        move = Move(from_square, to_square, moved_piece, captured_piece)
        self._state.history.append(move)
        _LOGGER.info("%s %s", moved_piece.color, move.to_algebraic())

        self._state.turn_color = self._state.turn_color.opponent
        self._clear_selection()
        self._update_status()

    def _update_status(self) -> None:
        new_status = evaluate(self._state.board, self._state.turn_color)
        if new_status != self._state.status and new_status != Status.IN_PROGRESS:
            _LOGGER.info("%s to move: %s", self._state.turn_color, new_status)
        self._state.status = new_status

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in self.listeners:
            listener(snapshot)
