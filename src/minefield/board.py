"""
Board module for the minefield.

Implements the tile grid with lazy mine placement, uncovering,
flood-fill, chording and victory/defeat predicates.
"""
import logging
import random
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Set, Tuple

import numpy as np

from .errors import InvalidParams, PlacementError
from .sampling import choose_multiple
from .tile import Tile

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

@dataclass(frozen=True)
class Params:
    """
    Dimensions and mine count of a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int
    height: int
    mine_count: int

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        if self.width < 1 or self.height < 1:
            raise InvalidParams("Board dimensions must be positive")
        if self.mine_count < 0:
            raise InvalidParams("Number of mines cannot be negative")
        if self.mine_count >= self.size:
            raise InvalidParams(
                f"Too many mines (max {self.size - 1})"
            )

    @property
    def size(self) -> int:
        """Total number of tiles."""
        return self.width * self.height

    @classmethod
    def from_preset(cls, name: str) -> "Params":
        """Look up a named difficulty preset."""
        try:
            return PRESETS[name.lower()]
        except KeyError:
            raise InvalidParams(f"Unknown preset: {name}") from None


# Preset difficulty levels
BEGINNER = Params(8, 8, 10)
INTERMEDIATE = Params(16, 16, 40)
EXPERT = Params(30, 16, 99)

PRESETS: Dict[str, Params] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}

_NEIGHBOR_OFFSETS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
]


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minefield game board.

    Owns the tiles and the counters derived from them. Tiles are
    addressed by (x, y) and stored flat at ``y * width + x``.
    Mines are placed on the first primary action, away from the
    clicked tile and its neighbors.
    """

    def __init__(
        self,
        params: Params = EXPERT,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize an empty, unplaced board.

        Args:
            params: Board dimensions and mine count.
            rng: Random source used for mine placement.
            seed: Seed for a fresh random source when ``rng`` is not given.
        """
        self.params = params
        self.rng = rng if rng is not None else random.Random(seed)
        self._init_tiles()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_tiles(self) -> None:
        """Create covered blank tiles and zero the counters."""
        self._tiles: List[Tile] = [Tile() for _ in range(self.params.size)]
        self._covered_count = self.params.size
        self._flag_count = 0
        self._placed = False
        self._defeat = False

    def _place_mines(self, skip: Set[int]) -> None:
        """
        Place mines uniformly at random outside ``skip``.

        Args:
            skip: Flat indices that must stay mine-free.
        """
        eligible = self.params.size - len(skip)
        if eligible < self.params.mine_count:
            raise PlacementError(
                f"Cannot place {self.params.mine_count} mines in "
                f"{eligible} eligible tiles"
            )

        candidates = (i for i in range(self.params.size) if i not in skip)
        for index in choose_multiple(candidates, self.params.mine_count, self.rng):
            self._tiles[index].is_mine = True

    def _place_hints(self) -> None:
        """Calculate hint counts for all non-mine tiles."""
        for y in range(self.params.height):
            for x in range(self.params.width):
                tile = self._tiles[self._index(x, y)]
                if not tile.is_mine:
                    tile.hint = self._count_neighbors(
                        x, y, lambda t: t.is_mine
                    )

    def _handle_first_action(self, x: int, y: int) -> None:
        """Place mines and hints around a safe opening at (x, y)."""
        skip = {self._index(x, y)}
        skip.update(self._index(nx, ny) for nx, ny in self.neighbors(x, y))
        self._place_mines(skip)
        self._place_hints()
        self._placed = True
        logger.debug(
            "Placed %d mines on %dx%d board, opening at (%d, %d)",
            self.params.mine_count, self.params.width, self.params.height,
            x, y,
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get the in-bounds 8-neighborhood of a tile, in row-major order.

        Args:
            x: Column of the center tile.
            y: Row of the center tile.

        Returns:
            List of (x, y) tuples for valid neighbors.
        """
        result = []
        for dx, dy in _NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self._in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    def _count_neighbors(self, x: int, y: int, predicate) -> int:
        """Count neighboring tiles matching ``predicate``."""
        return sum(
            1 for nx, ny in self.neighbors(x, y)
            if predicate(self._tiles[self._index(nx, ny)])
        )

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.params.width and 0 <= y < self.params.height

    def _index(self, x: int, y: int) -> int:
        return y * self.params.width + x

    def _checked_index(self, x: int, y: int) -> int:
        if not self._in_bounds(x, y):
            raise IndexError(
                f"Tile ({x}, {y}) outside {self.params.width}x{self.params.height} board"
            )
        return self._index(x, y)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def handle_primary_action(self, x: int, y: int) -> None:
        """
        Uncover the tile at (x, y), or chord if it is an uncovered hint.

        On the first call, places mines avoiding this tile and its
        neighbors. Uncovering a blank floods the surrounding region,
        uncovering a mine defeats the board. Flagged and already
        uncovered non-hint tiles are left alone.

        Args:
            x: Column of the tile.
            y: Row of the tile.
        """
        index = self._checked_index(x, y)
        if self._is_over():
            return

        if not self._placed:
            self._handle_first_action(x, y)

        tile = self._tiles[index]
        if not tile.covered and tile.is_hint:
            self._explore_around(tile.hint, x, y)
        elif tile.is_uncoverable:
            self._uncover(x, y)

    def handle_secondary_action(self, x: int, y: int) -> None:
        """
        Cycle the mark on a covered tile.

        Only entering or leaving FLAG changes the flag counter.

        Args:
            x: Column of the tile.
            y: Row of the tile.
        """
        tile = self._tiles[self._checked_index(x, y)]
        if self._is_over():
            return

        was_flagged = tile.is_flagged
        if not tile.cycle_mark():
            return
        if tile.is_flagged and not was_flagged:
            self._flag_count += 1
        elif was_flagged and not tile.is_flagged:
            self._flag_count -= 1

    def _uncover(self, x: int, y: int) -> None:
        """Uncover a single tile and handle its consequences."""
        tile = self._tiles[self._index(x, y)]
        if not tile.uncover():
            return
        self._covered_count -= 1

        if tile.is_mine:
            self._defeat = True
            logger.debug("Mine uncovered at (%d, %d)", x, y)
            return

        if tile.is_blank:
            self._flood_uncover(x, y)

    def _flood_uncover(self, x: int, y: int) -> None:
        """
        Uncover the region around a blank tile, bounded by hints.

        Iterative depth-first traversal; hints are uncovered but not
        expanded. Flagged tiles stay covered.
        """
        stack = self.neighbors(x, y)
        visited: Set[int] = {self._index(x, y)}

        while stack:
            cx, cy = stack.pop()
            index = self._index(cx, cy)
            if index in visited:
                continue
            visited.add(index)

            tile = self._tiles[index]
            if not tile.uncover():
                continue
            self._covered_count -= 1

            if tile.is_blank:
                stack.extend(
                    n for n in self.neighbors(cx, cy)
                    if self._index(*n) not in visited
                )

    def _explore_around(self, hint: int, x: int, y: int) -> None:
        """
        Chord: uncover the neighbors of a hint when its flags add up.

        A wrong flag may leave a mine uncoverable, in which case the
        chord ends in defeat like a direct click would. The remaining
        neighbors are still uncovered.
        """
        flags = self._count_neighbors(x, y, lambda t: t.is_flagged)
        if flags != hint:
            return

        for nx, ny in self.neighbors(x, y):
            if self._tiles[self._index(nx, ny)].is_uncoverable:
                self._uncover(nx, ny)

    def reset(self) -> None:
        """Reset board to its pre-placement state, keeping params."""
        self._init_tiles()
        logger.debug("Board reset")

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def dims(self) -> Tuple[int, int]:
        """Board size as (width, height)."""
        return self.params.width, self.params.height

    def tile(self, x: int, y: int) -> Tile:
        """
        Get a copy of the tile at (x, y).

        Changes to the copy do not reach the board. Raises IndexError
        when out of range.
        """
        return replace(self._tiles[self._checked_index(x, y)])

    def tiles(self) -> Iterable[Tuple[int, int, Tile]]:
        """Iterate over (x, y, tile copy) in row-major order."""
        for index, tile in enumerate(self._tiles):
            y, x = divmod(index, self.params.width)
            yield x, y, replace(tile)

    def flags(self) -> int:
        """Number of flagged tiles."""
        return self._flag_count

    def mines(self) -> int:
        """Number of mines on the board (placed or to be placed)."""
        return self.params.mine_count

    def covered(self) -> int:
        """Number of tiles still covered, mines included."""
        return self._covered_count

    def mine_positions(self) -> List[Tuple[int, int]]:
        """Positions of all placed mines, row-major."""
        return [(x, y) for x, y, tile in self.tiles() if tile.is_mine]

    def is_initialized(self) -> bool:
        """Check if mines have been placed."""
        return self._placed

    def is_victory(self) -> bool:
        """Check if every non-mine tile is uncovered."""
        return self._covered_count == self.params.mine_count

    def is_defeat(self) -> bool:
        """Check if a mine was uncovered."""
        return self._defeat

    def _is_over(self) -> bool:
        return self._defeat or self.is_victory()

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D int8 array indexed [y, x], see ``Tile.to_observation``.
        """
        obs = np.zeros((self.params.height, self.params.width), dtype=np.int8)
        for x, y, tile in self.tiles():
            obs[y, x] = tile.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of tiles that can be uncovered.

        Returns:
            List of (x, y) positions that are covered and not flagged.
        """
        return [(x, y) for x, y, tile in self.tiles() if tile.is_uncoverable]

    def __repr__(self) -> str:
        return (
            f"Board(params={self.params!r}, covered={self._covered_count}, "
            f"flags={self._flag_count}, placed={self._placed}, "
            f"defeat={self._defeat})"
        )
