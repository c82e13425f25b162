"""
Gymnasium environment wrapper for Minesweeper.

Lets programs drive a board one flat cell index at a time.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .cell import HIDDEN_OBSERVATION, MINE_OBSERVATION
from .renderer import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i corresponds to cell at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for revealing an already revealed cell
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.board: Optional[Board] = None

        self.observation_space = spaces.Box(
            low=HIDDEN_OBSERVATION,
            high=MINE_OBSERVATION,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly mined board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(0, 2**32))
        self.board = Board(self.config, random.Random(board_seed))
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        board = self._require_board()
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)

        observation = board.get_observation()
        terminated = not board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.width)

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal the cell and score the outcome."""
        if not self.board.visible_state(row, col).is_hidden:
            return -0.1

        self.board.reveal(row, col)

        if self.board.is_lost:
            return -10.0
        if self.board.is_won:
            return 10.0
        return 1.0

    def _require_board(self) -> Board:
        if self.board is None:
            raise RuntimeError("Call reset() before using the environment")
        return self.board

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self._require_board()
        return {
            "steps": self._steps,
            "revealed": board.revealed_count,
            "total_safe": self.config.safe_cells,
            "game_state": board.game_state.name,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.board is None:
            return None
        text = render_board(self.board.get_observation())
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell.
        """
        observation = self._require_board().get_observation()
        return (observation == HIDDEN_OBSERVATION).reshape(-1)
