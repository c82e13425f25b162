"""
Text rendering for Minesweeper boards.

Renderers work from the observation snapshot produced by
``Board.get_observation`` and never see the board's cells.
"""
from typing import List

import numpy as np

from .cell import HIDDEN_OBSERVATION, MINE_OBSERVATION


HIDDEN_SYMBOL = "."
MINE_SYMBOL = "*"


def cell_symbol(value: int) -> str:
    """Map one observation value to its display symbol."""
    if value == HIDDEN_OBSERVATION:
        return HIDDEN_SYMBOL
    if value == MINE_OBSERVATION:
        return MINE_SYMBOL
    return str(value)


def render_board(observation: np.ndarray) -> str:
    """
    Render an observation as text.

    The first line lists column numbers; each following line starts
    with its row number.

    Args:
        observation: 2D array from ``Board.get_observation``.

    Returns:
        Multi-line board text without a trailing newline.
    """
    height, width = observation.shape
    lines: List[str] = []

    header = "  " + "".join(f"{col} " for col in range(width))
    lines.append(header)

    for row in range(height):
        row_str = f"{row} "
        for col in range(width):
            row_str += cell_symbol(int(observation[row, col])) + " "
        lines.append(row_str)

    return "\n".join(lines)
