"""Lightweight logging utilities for matches and debugging."""

import logging

LOG_FORMAT = "[%(asctime)s] %(message)s"
DEBUG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

GAME_LOGGER = logging.getLogger("Neon_Gomoku.game")


def setup_logging(level="INFO"):
    """Configure the root handler once; later calls only adjust the level."""
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"unknown log level: {level}")
        level = numeric
    fmt = DEBUG_FORMAT if level <= logging.DEBUG else LOG_FORMAT
    logging.basicConfig(level=level, format=fmt, datefmt=DATE_FORMAT)
    logging.getLogger().setLevel(level)


def log_event(message):
    GAME_LOGGER.info(message)
