"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Deterministic Randomness
# ============================================================================

class ScriptedRandom(random.Random):
    """Random source that returns a fixed sequence from randrange."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(0)
        self.values: List[int] = list(values)
        self.calls = 0

    def randrange(self, start, stop=None, step=1):  # type: ignore[override]
        self.calls += 1
        return self.values.pop(0)


def board_with_mines(
    height: int, width: int, mines: List[Tuple[int, int]]
) -> Board:
    """Build a board whose mines sit exactly at the given positions."""
    values = [value for position in mines for value in position]
    config = BoardConfig(width=width, height=height, num_mines=len(mines))
    return Board(config, ScriptedRandom(values))


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> Callable[[int, int, List[Tuple[int, int]]], Board]:
    """Factory for boards with a fixed mine layout."""
    return board_with_mines


@pytest.fixture
def corner_board() -> Board:
    """3x3 board with its only mine at (2, 2)."""
    return board_with_mines(3, 3, [(2, 2)])


@pytest.fixture
def wall_board() -> Board:
    """
    3x5 board split by a column of mines.

        . . * . .
        . . * . .
        . . * . .
    """
    return board_with_mines(3, 5, [(0, 2), (1, 2), (2, 2)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def seeded_board() -> Board:
    """Beginner-sized board with reproducible mines."""
    return Board(BoardConfig(9, 9, 10), random.Random(1234))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True, adjacent_mines=-1)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


# ============================================================================
# Scripted Input
# ============================================================================

class ScriptedInput:
    """Callable standing in for ``input``; raises EOFError when exhausted."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.lines = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], ScriptedInput]:
    return ScriptedInput
