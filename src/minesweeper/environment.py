"""
Gymnasium environment wrapper for Minesweeper.

Exposes a GameEngine as a standard RL task over reveal actions.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import GameConfig
from .engine import GameEngine
from .errors import InvalidArgumentError
from .generator import MapGenerator, RandomMapGenerator, min_free_cells


# ============================================================================
# Rewards
# ============================================================================

REWARD_SAFE = 1.0
REWARD_WIN = 10.0
REWARD_MINE = -10.0
REWARD_INVALID = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - -3 = questioned cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i reveals the cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged, or game over)
    """

    metadata = {"render_modes": []}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        generator: Optional[MapGenerator] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Game configuration (default: 9x9 with 10 mines).
            generator: Mine placement strategy reused for every episode
                (default: a random generator seeded through reset()).

        Raises:
            InvalidArgumentError: If no generator is given and a first
                click could leave fewer free cells than mines.
        """
        super().__init__()

        self.config = config or GameConfig()
        if generator is None:
            free = min_free_cells(self.config.rows, self.config.cols)
            if self.config.num_mines > free:
                raise InvalidArgumentError(
                    f"Too many mines for random play: {self.config.num_mines} "
                    f"requested, some first clicks leave only {free} cells"
                )
        self._generator = generator
        self.engine = self._new_engine(None)

        self.observation_space = spaces.Box(
            low=-3,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.rows * self.config.cols)

        self._steps = 0

    def _new_engine(self, seed: Optional[int]) -> GameEngine:
        generator = self._generator or RandomMapGenerator(seed)
        return GameEngine.from_config(self.config, generator=generator)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for the mine layout.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is None:
            seed = int(self.np_random.integers(0, 2**31 - 1))
        self.engine = self._new_engine(seed)
        self._steps = 0

        return self.engine.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one reveal action.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)

        observation = self.engine.board.get_observation()
        terminated = self.engine.state.is_finished
        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return int(action) // self.config.cols, int(action) % self.config.cols

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        if self.engine.state.is_finished:
            return REWARD_INVALID
        if not self.engine.reveal(row, col):
            return REWARD_INVALID
        if self.engine.is_won:
            return REWARD_WIN
        if self.engine.is_lost:
            return REWARD_MINE
        return REWARD_SAFE

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.engine.board
        return {
            "steps": self._steps,
            "revealed": board.revealed_count,
            "total_safe": board.safe_cells,
            "game_state": self.engine.state.name,
            "remaining_mines": self.engine.remaining_mines,
            "elapsed_ms": self.engine.elapsed_millis(),
            "valid_actions": len(board.hidden_positions()),
        }

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden, unflagged cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.engine.state.is_finished:
            return mask
        for row, col in self.engine.board.hidden_positions():
            mask[row * self.config.cols + col] = True
        return mask
