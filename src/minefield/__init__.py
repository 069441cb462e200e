"""
Minefield game module.

Provides the board rules engine and the game stage controller.
"""
from .errors import MinefieldError, InvalidParams, PlacementError
from .tile import Mark, Tile, TileKind
from .board import Board, Params, BEGINNER, INTERMEDIATE, EXPERT, PRESETS
from .layout import TileLayout
from .stage import Playing, Paused, Defeat, Victory, Explosion, Celebration
from .controller import GameController, InputSnapshot, StageConfig
from .environment import MinesweeperEnv, board_to_text

__all__ = [
    "MinefieldError",
    "InvalidParams",
    "PlacementError",
    "Mark",
    "Tile",
    "TileKind",
    "Board",
    "Params",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "TileLayout",
    "Playing",
    "Paused",
    "Defeat",
    "Victory",
    "Explosion",
    "Celebration",
    "GameController",
    "InputSnapshot",
    "StageConfig",
    "MinesweeperEnv",
    "board_to_text",
]
