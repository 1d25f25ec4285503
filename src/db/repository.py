"""Protocol repository (the in-memory version lives in memory_repository.py)"""

from typing import Protocol
from uuid import UUID

from src.chess.game import GameController


class GameRepository(Protocol):
    """Keeps track of the games being played"""

    def get_game(self, game_id: UUID) -> GameController | None:
        """Get game by ID, if it exists."""
        ...

    def create_game(self, game: GameController) -> UUID:
        """Store new game and return the newly created game ID."""
        ...

    def delete_game(self, game_id: UUID) -> GameController | None:
        """Forget about a game."""
        ...

    def list_game_ids(self) -> list[UUID]:
        """IDs of all games, most recently used first."""
        ...
