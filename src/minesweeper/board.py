"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
and game state management.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np

from .cell import Cell, MINE_SENTINEL, VisibleState
from .errors import ConfigurationError, OutOfBoundsError


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

PRESETS: Dict[str, BoardConfig] = {
    "easy": BEGINNER,
    "medium": INTERMEDIATE,
    "hard": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Mines are placed and counted once, at construction. After that the
    board changes only through ``reveal``. Cell contents are reachable
    from outside only through ``visible_state`` and ``get_observation``,
    which hide everything that has not been revealed.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: Optional[random.Random] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Build the grid, place mines and count neighbors."""
        if self.rng is None:
            self.rng = random.Random()
        self._init_grid()
        self._place_mines()
        self._calculate_adjacent_mines()

    @classmethod
    def create(
        cls,
        height: int,
        width: int,
        mine_count: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Build a board from its three construction integers.

        Raises:
            ConfigurationError: If the values cannot form a board.
        """
        config = BoardConfig(width=width, height=height, num_mines=mine_count)
        return cls(config, rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mines(self) -> None:
        """
        Place mines by rejection sampling.

        Each trial draws a uniform (row, col); trials landing on an
        existing mine are discarded. BoardConfig guarantees at least one
        safe cell, so the loop terminates.
        """
        placed = 0
        while placed < self.config.num_mines:
            row = self.rng.randrange(self.config.height)
            col = self.rng.randrange(self.config.width)
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                cell = self._grid[row][col]
                if cell.is_mine:
                    cell.adjacent_mines = MINE_SENTINEL
                else:
                    cell.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds Moore neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    def _check_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise OutOfBoundsError(
                row, col, self.config.height, self.config.width
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> int:
        """
        Reveal a cell at the given position.

        A mine is revealed on its own. A safe cell is revealed and, when
        its count is zero, the reveal spreads through its neighbors until
        it reaches numbered cells.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Number of cells newly revealed by this call.

        Raises:
            OutOfBoundsError: If the position is off the board. The board
                is left unchanged.
        """
        self._check_position(row, col)

        cell = self._grid[row][col]
        if cell.is_mine:
            return int(cell.reveal())

        return self._flood_reveal(row, col)

    def _flood_reveal(self, row: int, col: int) -> int:
        """Reveal a safe cell and its zero-count region with an explicit stack."""
        revealed = 0
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid[current_row][current_col]
            if not cell.reveal():
                continue
            revealed += 1
            if cell.adjacent_mines == 0:
                stack.extend(self.neighbors(current_row, current_col))
        return revealed

    # ========================================================================
    # Game Predicates
    # ========================================================================

    def is_game_over(self) -> bool:
        """Check whether any mine has been revealed."""
        for row in self._grid:
            for cell in row:
                if cell.is_mine and cell.is_revealed:
                    return True
        return False

    def is_game_won(self) -> bool:
        """Check whether every non-mine cell has been revealed."""
        for row in self._grid:
            for cell in row:
                if not cell.is_mine and cell.is_hidden:
                    return False
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def game_state(self) -> GameState:
        """Get current game state. A revealed mine takes precedence."""
        if self.is_game_over():
            return GameState.LOST
        if self.is_game_won():
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(cell.is_revealed for row in self._grid for cell in row)

    def visible_state(self, row: int, col: int) -> VisibleState:
        """
        Get what the player can see at a position.

        Raises:
            OutOfBoundsError: If the position is off the board.
        """
        self._check_position(row, col)
        return self._grid[row][col].visible_state()

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board state as a read-only numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row in range(self.config.height):
            for col in range(self.config.width):
                obs[row, col] = self._grid[row][col].to_observation()
        obs.setflags(write=False)
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are hidden.
        """
        actions = []
        for row in range(self.config.height):
            for col in range(self.config.width):
                if self._grid[row][col].is_hidden:
                    actions.append((row, col))
        return actions
