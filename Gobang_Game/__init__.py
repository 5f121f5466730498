"""Gobang_Game package exports."""

from .Board import Board, Piece, BOARD_SIZE, WIN_LENGTH
from .RulesEngine import RulesEngine
from .Presenter import StatusPresenter
from .engine.state import GameState, Snapshot
from .engine.referee import IllegalMove

# Subpackages for move admission, front ends, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "Piece",
    "BOARD_SIZE",
    "WIN_LENGTH",
    "RulesEngine",
    "StatusPresenter",
    "GameState",
    "Snapshot",
    "IllegalMove",
    "engine",
    "gui",
    "utils",
]
