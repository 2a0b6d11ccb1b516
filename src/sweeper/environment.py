"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface on top of the game engine.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import CellState
from .console import render_board
from .engine import GameEngine, MoveKind
from .layout import BoardConfig


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (after a loss)

    Actions:
        Discrete action space of size 2 * dimension**2.
        Action i < n reveals cell i; action i >= n toggles the flag
        on cell i - n.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a move that changed nothing
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
        self.engine = GameEngine(self.config)
        self.render_mode = render_mode
        self._num_cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.dimension, self.config.dimension),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0
        self._total_safe_cells = self._num_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game with freshly placed mines.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        game_seed = int(self.np_random.integers(2 ** 31))
        self.engine = GameEngine(self.config, seed=game_seed)
        self._steps = 0

        return self.engine.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).

        Raises:
            GameAlreadyOver: If called after the episode terminated.
        """
        index, kind = self.decode_action(action)
        self._steps += 1

        result = self.engine.apply_move(index, kind)
        reward = self._calculate_reward(kind, len(result.changed))

        observation = self.engine.get_observation()
        terminated = not self.engine.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[int, MoveKind]:
        """Split a flat action into a cell index and move kind."""
        action = int(action)
        if action < self._num_cells:
            return action, MoveKind.REVEAL
        return action - self._num_cells, MoveKind.TOGGLE_FLAG

    def _calculate_reward(self, kind: MoveKind, changed: int) -> float:
        """Score a move from its effect on the game."""
        if self.engine.is_won:
            return 10.0
        if self.engine.is_lost:
            return -10.0
        if changed == 0:
            return -0.1
        if kind == MoveKind.REVEAL:
            return 1.0
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.engine.board
        return {
            "steps": self._steps,
            "revealed": board.revealed_count,
            "flagged": board.flagged_count,
            "total_safe": self._total_safe_cells,
            "game_state": self.engine.status.name,
            "message": self.engine.message,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.engine)
        if self.render_mode == "human":
            print(render_board(self.engine))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        board = self.engine.board
        for index in range(self._num_cells):
            state = board.state(index)
            if state == CellState.HIDDEN:
                mask[index] = True
            if state != CellState.REVEALED:
                mask[self._num_cells + index] = True
        return mask
