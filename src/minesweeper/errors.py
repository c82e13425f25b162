"""
Exception types for the Minesweeper engine.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(MinesweeperError, ValueError):
    """Board dimensions or mine count cannot form a playable board."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """A coordinate falls outside the board."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the "
            f"{height}x{width} board"
        )
        self.row = row
        self.col = col
        self.height = height
        self.width = width
