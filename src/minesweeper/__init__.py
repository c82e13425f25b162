"""
Minesweeper game module.

Provides the core board logic plus text rendering, a command-line
game loop and a gymnasium environment.
"""
from .errors import MinesweeperError, ConfigurationError, OutOfBoundsError
from .cell import Cell, CellState, VisibleKind, VisibleState
from .board import (
    Board,
    BoardConfig,
    GameState,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .renderer import render_board
from .environment import MinesweeperEnv

__all__ = [
    "MinesweeperError",
    "ConfigurationError",
    "OutOfBoundsError",
    "Cell",
    "CellState",
    "VisibleKind",
    "VisibleState",
    "Board",
    "BoardConfig",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "render_board",
    "MinesweeperEnv",
]
