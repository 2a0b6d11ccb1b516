"""
Random agent for Minesweeper.

Serves as a baseline by selecting random valid actions, and provides
a small evaluation loop over the Gymnasium environment.
"""
from typing import Dict, Optional

import numpy as np

from .environment import MinesweeperEnv
from .layout import BoardConfig


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent:
    """
    Agent that selects actions uniformly at random.

    Only reveal actions are chosen unless reveals are exhausted, so the
    agent never wastes moves toggling flags back and forth.
    """

    def __init__(self, num_cells: int, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            num_cells: Number of cells on the board.
            seed: Random seed for reproducibility.
        """
        self.num_cells = num_cells
        self.rng = np.random.default_rng(seed)

    def select_action(self, valid_actions: np.ndarray) -> int:
        """
        Select a random valid action.

        Args:
            valid_actions: Mask of valid actions from the environment.

        Returns:
            Random action index from valid actions.
        """
        reveal_indices = np.where(valid_actions[: self.num_cells])[0]
        if len(reveal_indices) > 0:
            return int(self.rng.choice(reveal_indices))

        valid_indices = np.where(valid_actions)[0]
        if len(valid_indices) == 0:
            return 0
        return int(self.rng.choice(valid_indices))


# ============================================================================
# Evaluation
# ============================================================================

def evaluate_agent(
    agent: RandomAgent,
    config: Optional[BoardConfig] = None,
    num_episodes: int = 100,
    max_steps: int = 1000,
    seed: Optional[int] = None,
) -> Dict[str, float]:
    """
    Play num_episodes games and summarize the results.

    Args:
        agent: Agent to evaluate.
        config: Board configuration for evaluation.
        num_episodes: Number of games.
        max_steps: Maximum steps per game.
        seed: Seed for the first reset; later games continue the stream.

    Returns:
        Dictionary with win_rate, avg_reward, avg_steps and avg_revealed.
    """
    env = MinesweeperEnv(config=config)

    wins = 0
    total_reward = 0.0
    total_steps = 0
    total_revealed = 0

    for episode in range(num_episodes):
        _, info = env.reset(seed=seed if episode == 0 else None)

        for _ in range(max_steps):
            action = agent.select_action(env.get_action_mask())
            _, reward, terminated, truncated, info = env.step(action)

            total_reward += reward
            total_steps += 1

            if terminated or truncated:
                if info["game_state"] == "WON":
                    wins += 1
                total_revealed += info["revealed"]
                break
        else:
            total_revealed += info["revealed"]

    return {
        "win_rate": wins / num_episodes,
        "avg_reward": total_reward / num_episodes,
        "avg_steps": total_steps / num_episodes,
        "avg_revealed": total_revealed / num_episodes,
    }
