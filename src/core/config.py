"""Runtime configuration. Read once from the environment, with defaults that work for a local two-player game."""

import logging
import os

STANDARD_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

LOG_LEVEL = os.getenv("CHESS_LOG_LEVEL", "WARNING").upper()
MAX_SESSIONS = int(os.getenv("CHESS_MAX_SESSIONS", "50"))
STARTING_POSITION = os.getenv("CHESS_STARTING_FEN", STANDARD_POSITION)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Install a basic handler on the root logger. Meant to be called once by whatever embeds the engine."""
    logging.basicConfig(level=level if level is not None else LOG_LEVEL, format=LOG_FORMAT)
