"""Orchestration of communication from the outside world (input source / whoever draws the board) to the game logic, and back."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveModel,
    PieceModel,
    ResetRequest,
    SelectSquareRequest,
    SquareModel,
    UndoRequest,
)
from src.chess.fen import GameSetup
from src.chess.game import GameController
from src.chess.game_model import GameSnapshot
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.config import STARTING_POSITION
from src.core.exceptions import GameNotFoundError
from src.db.repository import GameRepository

_LOGGER = logging.getLogger(__name__)


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game, from the requested layout or the configured default one."""
        setup = GameSetup.from_fen(request.starting_fen or STARTING_POSITION)
        game = GameController(setup)
        game_id = self.repo.create_game(game)
        _LOGGER.info("Created game %s from %r", game_id, setup.to_fen())
        return self._create_game_response(game_id, game.snapshot())

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game.snapshot())

    def select_square(self, request: SelectSquareRequest) -> GameResponse:
        """A player picked a square. Might select a piece, play a move, or just clear the selection."""
        game = self._fetch_game(request.game_id)
        game.on_square_selected(request.to_square())
        return self._create_game_response(request.game_id, game.snapshot())

    def undo(self, request: UndoRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        game.undo()
        return self._create_game_response(request.game_id, game.snapshot())

    def reset(self, request: ResetRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        game.reset()
        return self._create_game_response(request.game_id, game.snapshot())

    def list_games(self) -> list[UUID]:
        """Show all games being played, most recently used first."""
        return self.repo.list_game_ids()

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a game."""
        if self.repo.delete_game(request.game_id) is None:
            raise GameNotFoundError(f"Game with {request.game_id=} not found.")
        _LOGGER.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _create_game_response(
        self, game_id: UUID, snapshot: GameSnapshot
    ) -> GameResponse:
        """Convert info in GameSnapshot to a GameResponse (for game with given ID.)"""
        num_rows, num_cols = BOARD_DIMENSIONS
        board: list[list[Optional[PieceModel]]] = [
            [
                PieceModel.from_piece(piece)
                if (piece := snapshot.board[Square(row, col)]) is not None
                else None
                for col in range(num_cols)
            ]
            for row in range(num_rows)
        ]
        return GameResponse(
            game_id=game_id,
            board=board,
            turn=snapshot.turn_color,
            status=snapshot.status,
            winner=snapshot.winner,
            selection=(
                SquareModel.from_square(snapshot.selection)
                if snapshot.selection is not None
                else None
            ),
            legal_destinations=[
                SquareModel.from_square(square)
                for square in snapshot.legal_destinations
            ],
            move_history=[MoveModel.from_move(move) for move in snapshot.history],
            fen=snapshot.fen,
        )

    def _fetch_game(self, game_id: UUID) -> GameController:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game
