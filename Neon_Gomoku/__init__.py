"""Neon_Gomoku package exports."""

from .Board import Board, Move, MoveRecord, BLACK, WHITE, EMPTY
from .Omokgame import Omokgame
from .Player import Player, HumanPlayer, GuiHumanPlayer
from .AiPlayer import AiPlayer

# Subpackages for rules, AI search, GUI, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Move",
    "MoveRecord",
    "BLACK",
    "WHITE",
    "EMPTY",
    "Omokgame",
    "Player",
    "HumanPlayer",
    "GuiHumanPlayer",
    "AiPlayer",
    "ai",
    "engine",
    "gui",
    "utils",
]
