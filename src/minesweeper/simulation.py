"""
Automated play for Minesweeper.

Runs whole games through MinesweeperEnv with a baseline player and
aggregates the outcome statistics.
"""
import logging
from typing import Dict, Optional

import numpy as np

from .config import GameConfig
from .environment import MinesweeperEnv

logger = logging.getLogger(__name__)


# ============================================================================
# Random Player
# ============================================================================

class RandomPlayer:
    """
    Player that reveals a uniformly random hidden cell each turn.

    Serves as a baseline for the evaluator.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = np.random.default_rng(seed)

    def select_action(self, action_mask: np.ndarray) -> int:
        """
        Select a random valid action.

        Args:
            action_mask: Boolean mask of valid actions.

        Returns:
            Random action index from the valid actions.

        Raises:
            ValueError: If no action is valid.
        """
        valid_indices = np.flatnonzero(action_mask)
        if len(valid_indices) == 0:
            raise ValueError("No valid actions to choose from")
        return int(self.rng.choice(valid_indices))


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """Play a batch of games and report aggregate statistics."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            config: Game configuration for every episode.
            num_episodes: Number of games to play.
            max_steps: Step limit per game (default: number of cells).
            seed: Seed for mine layouts; episode i uses seed + i.
        """
        self.config = config or GameConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps or self.config.rows * self.config.cols
        self.seed = seed

    def evaluate(self, player: RandomPlayer) -> Dict[str, float]:
        """
        Evaluate a player.

        Returns:
            Dictionary with win_rate, avg_reward, avg_steps and
            avg_revealed.
        """
        env = MinesweeperEnv(config=self.config)

        wins = 0
        total_reward = 0.0
        total_steps = 0
        total_revealed = 0

        for episode in range(self.num_episodes):
            seed = None if self.seed is None else self.seed + episode
            env.reset(seed=seed)
            info: Dict[str, object] = {}

            for _ in range(self.max_steps):
                action = player.select_action(env.get_action_mask())
                _, reward, terminated, truncated, info = env.step(action)
                total_reward += float(reward)
                total_steps += 1
                if terminated or truncated:
                    break

            if info.get("game_state") == "WON":
                wins += 1
            total_revealed += int(info.get("revealed", 0))
            logger.debug(
                "Episode %d finished %s", episode, info.get("game_state")
            )

        return {
            "win_rate": wins / self.num_episodes,
            "avg_reward": total_reward / self.num_episodes,
            "avg_steps": total_steps / self.num_episodes,
            "avg_revealed": total_revealed / self.num_episodes,
        }
