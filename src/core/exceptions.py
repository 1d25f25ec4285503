"""
Exceptions raised at the boundaries of the application.

NOTE: Playing the game itself never raises. A rejected selection simply leaves the selection state unchanged / cleared.
These are only raised when a caller hands us data we cannot interpret (layout strings, square names, requests, session ids).
"""


class GameError(Exception):
    """Base class for all errors raised by this package"""


class InvalidFENError(GameError):
    """The board layout string could not be parsed"""


class InvalidSquareError(GameError):
    """A square name in algebraic notation that does not exist on the board"""


class InvalidRequestError(GameError):
    """Request model failed validation"""


class RepositoryError(GameError):
    """Something went wrong retrieving / storing a game session"""


class GameNotFoundError(RepositoryError):
    """No game session is registered under the requested ID"""
