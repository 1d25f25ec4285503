"""Implementation of (Game)Repository keeping the games in the memory of this process"""

import logging
from collections import OrderedDict
from uuid import UUID, uuid4

from src.chess.game import GameController
from src.core.config import MAX_SESSIONS

_LOGGER = logging.getLogger(__name__)


class InMemoryGameRepository:
    """
    Games live as long as this object does. Nothing gets written anywhere.

    Once more than `max_sessions` games are stored, the least recently used ones are dropped.
    """

    def __init__(self, max_sessions: int = MAX_SESSIONS) -> None:
        self.max_sessions = max_sessions
        # oldest first
        self._games: OrderedDict[UUID, GameController] = OrderedDict()

    def get_game(self, game_id: UUID) -> GameController | None:
        """Get game by ID, if it exists."""
        game = self._games.get(game_id)
        if game is not None:
            self._games.move_to_end(game_id)
        return game

    def create_game(self, game: GameController) -> UUID:
        """Store new game and return the newly created game ID."""
        game_id = uuid4()
        self._games[game_id] = game
        self._enforce_cap()
        return game_id

    def delete_game(self, game_id: UUID) -> GameController | None:
        """Forget about a game."""
        return self._games.pop(game_id, None)

    def list_game_ids(self) -> list[UUID]:
        """IDs of all games, most recently used first."""
        return list(reversed(self._games))

    def _enforce_cap(self) -> None:
        while len(self._games) > self.max_sessions:
            evicted_id, _ = self._games.popitem(last=False)
            _LOGGER.warning(
                "Dropping game %s, more than %d games in memory",
                evicted_id,
                self.max_sessions,
            )
