"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed) and content (mine/number), plus the visible view
of a cell that collaborators are allowed to see.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

MINE_SENTINEL = -1
HIDDEN_OBSERVATION = -1
MINE_OBSERVATION = 9


class CellState(Enum):
    """Possible states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()


class VisibleKind(Enum):
    """What a player can see of a cell."""

    HIDDEN = auto()
    REVEALED_MINE = auto()
    REVEALED_COUNT = auto()


@dataclass(frozen=True)
class VisibleState:
    """
    Player-visible view of one cell.

    Attributes:
        kind: Hidden, revealed mine, or revealed count.
        count: Adjacent mine count (0-8), only set for REVEALED_COUNT.
    """

    kind: VisibleKind
    count: Optional[int] = None

    @property
    def is_hidden(self) -> bool:
        return self.kind == VisibleKind.HIDDEN

    @property
    def is_mine(self) -> bool:
        return self.kind == VisibleKind.REVEALED_MINE


HIDDEN = VisibleState(VisibleKind.HIDDEN)
REVEALED_MINE = VisibleState(VisibleKind.REVEALED_MINE)


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8),
            or -1 if the cell is itself a mine.
        state: Current state (hidden or revealed).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell changed from hidden to revealed, False if it
            was already revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    def visible_state(self) -> VisibleState:
        """Return what a player may see of this cell."""
        if self.state == CellState.HIDDEN:
            return HIDDEN
        if self.is_mine:
            return REVEALED_MINE
        return VisibleState(VisibleKind.REVEALED_COUNT, self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to observation value.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.is_mine:
            return MINE_OBSERVATION
        return self.adjacent_mines
