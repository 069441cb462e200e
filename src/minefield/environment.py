"""
Gymnasium environment wrapper for the minefield.

Provides a standard RL interface for headless agents.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, Params, BEGINNER
from .tile import Mark, OBS_MINE, OBS_UNSURE

# Rewards
REWARD_PROGRESS = 1.0
REWARD_VICTORY = 10.0
REWARD_DEFEAT = -10.0
REWARD_NOOP = -0.1
REWARD_MARK = 0.0


def board_to_text(board: Board, reveal_mines: bool = False) -> str:
    """
    Render a board as text, one row per line.

    ``.`` covered, ``F`` flag, ``?`` unsure, ``*`` mine, space blank,
    digits for hints.
    """
    width, height = board.dims()
    lines = []
    for y in range(height):
        row = []
        for x in range(width):
            tile = board.tile(x, y)
            if tile.is_mine and (reveal_mines or not tile.covered):
                row.append("*")
            elif tile.covered:
                row.append({Mark.FLAG: "F", Mark.UNSURE: "?"}.get(tile.mark, "."))
            elif tile.hint:
                row.append(str(tile.hint))
            else:
                row.append(" ")
        lines.append(" ".join(row))
    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for the minefield.

    Observation:
        2D array indexed [y, x] where:
        - -1 = covered tile
        - -2 = flagged tile
        - -3 = tile marked unsure
        - 0-8 = uncovered tile with its hint count
        - 9 = uncovered mine

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height is a primary action on tile
        (i % width, i // width); the second half repeats the layout
        for secondary (mark) actions.

    Rewards:
        - +1 for uncovering at least one tile
        - +10 for winning the game
        - -10 for uncovering a mine
        - 0 for changing a mark
        - -0.1 for an action with no effect
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        params: Optional[Params] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            params: Board parameters (default: beginner).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.params = params or BEGINNER
        self.board = Board(self.params)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_UNSURE,
            high=OBS_MINE,
            shape=(self.params.height, self.params.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self.params.size)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.board.rng = random.Random(seed)
        self.board.reset()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index, see class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        secondary, x, y = self._decode_action(int(action))
        self._steps += 1

        if secondary:
            reward = self._apply_secondary(x, y)
        else:
            reward = self._apply_primary(x, y)

        terminated = self.board.is_defeat() or self.board.is_victory()
        return self.board.get_observation(), reward, terminated, False, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Split an action into (is_secondary, x, y)."""
        secondary, index = divmod(action, self.params.size)
        y, x = divmod(index, self.params.width)
        return bool(secondary), x, y

    def _apply_primary(self, x: int, y: int) -> float:
        covered_before = self.board.covered()
        self.board.handle_primary_action(x, y)

        if self.board.is_defeat():
            return REWARD_DEFEAT
        if self.board.is_victory():
            return REWARD_VICTORY
        if self.board.covered() < covered_before:
            return REWARD_PROGRESS
        return REWARD_NOOP

    def _apply_secondary(self, x: int, y: int) -> float:
        mark_before = self.board.tile(x, y).mark
        covered = self.board.tile(x, y).covered
        self.board.handle_secondary_action(x, y)
        if covered and self.board.tile(x, y).mark != mark_before:
            return REWARD_MARK
        return REWARD_NOOP

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        if self.board.is_defeat():
            outcome = "DEFEAT"
        elif self.board.is_victory():
            outcome = "VICTORY"
        else:
            outcome = "PLAYING"

        return {
            "steps": self._steps,
            "covered": self.board.covered(),
            "flags": self.board.flags(),
            "mines": self.board.mines(),
            "outcome": outcome,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return board_to_text(self.board)
        if self.render_mode == "human":
            print(board_to_text(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that can change the board.

        Returns:
            Boolean array where True = valid action. Primary actions
            are valid on uncoverable tiles and uncovered hints,
            secondary actions on covered tiles.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.board.is_defeat() or self.board.is_victory():
            return mask

        for x, y, tile in self.board.tiles():
            index = y * self.params.width + x
            if tile.is_uncoverable or (not tile.covered and tile.is_hint):
                mask[index] = True
            if tile.covered:
                mask[self.params.size + index] = True
        return mask
