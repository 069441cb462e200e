"""
Random agent for the minefield environment.

Serves as a baseline by uncovering random tiles.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that uncovers tiles uniformly at random.

    Marks are never placed, so only the primary half of the action
    mask is sampled.
    """

    def __init__(
        self,
        board_width: int = 8,
        board_height: int = 8,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_width: Number of columns in the board.
            board_height: Number of rows in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_width, board_height)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random covered tile to uncover.

        Args:
            observation: 2D array of tile states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid primary actions.
        """
        covered = self.get_valid_actions_from_obs(observation)
        if valid_actions is not None:
            covered = covered & valid_actions

        # Chords on uncovered hints are skipped, they need flags
        valid_indices = np.where(covered[: self.total_tiles])[0]

        if len(valid_indices) == 0:
            # No valid actions, return any action (will be a no-op)
            return 0

        return int(self.rng.choice(valid_indices))
