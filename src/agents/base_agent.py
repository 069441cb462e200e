"""
Base agent interface for the minefield environment.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for minefield agents.

    Actions follow the environment layout: indices below
    ``total_tiles`` uncover, the rest cycle marks.
    """

    def __init__(self, board_width: int, board_height: int) -> None:
        """
        Initialize the agent.

        Args:
            board_width: Number of columns in the board.
            board_height: Number of rows in the board.
        """
        self.board_width = board_width
        self.board_height = board_height
        self.total_tiles = board_width * board_height

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of tile states indexed [y, x].
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """

    def action_to_position(self, action: int) -> Tuple[bool, int, int]:
        """Convert an action to (is_secondary, x, y)."""
        secondary, index = divmod(action, self.total_tiles)
        y, x = divmod(index, self.board_width)
        return bool(secondary), x, y

    def position_to_action(self, x: int, y: int, secondary: bool = False) -> int:
        """Convert a tile position to an action index."""
        index = y * self.board_width + x
        return index + self.total_tiles if secondary else index

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get a primary-only valid actions mask from an observation.

        Args:
            observation: 2D array of tile states.

        Returns:
            Boolean mask of length ``2 * total_tiles``.
        """
        flat_obs = observation.flatten()
        # Covered (-1) and unsure (-3) tiles can be uncovered
        primary = (flat_obs == -1) | (flat_obs == -3)
        return np.concatenate([primary, np.zeros_like(primary)])

    def reset(self) -> None:
        """Reset agent state for new episode."""
