"""
Tile module for the minefield.

Represents individual tiles on the board with their cover
(covered with a mark / uncovered) and object (mine / hint / blank).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class Mark(Enum):
    """Player marks on a covered tile."""

    NONE = auto()
    FLAG = auto()
    UNSURE = auto()

    def next(self) -> "Mark":
        """Return the mark that follows this one in the cycle."""
        return _MARK_CYCLE[self]


_MARK_CYCLE = {
    Mark.NONE: Mark.FLAG,
    Mark.FLAG: Mark.UNSURE,
    Mark.UNSURE: Mark.NONE,
}


class TileKind(Enum):
    """What lies under the cover of a tile."""

    MINE = auto()
    HINT = auto()
    BLANK = auto()


# Observation values for tiles that do not show a hint count
OBS_COVERED = -1
OBS_FLAG = -2
OBS_UNSURE = -3
OBS_MINE = 9


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    A single tile of the minefield.

    Attributes:
        covered: Whether the tile is still covered.
        mark: Player mark; only meaningful while covered.
        is_mine: Whether this tile holds a mine.
        hint: Count of neighboring mines (0 for mines and blanks).
    """

    covered: bool = True
    mark: Mark = Mark.NONE
    is_mine: bool = False
    hint: int = 0

    def uncover(self) -> bool:
        """
        Uncover this tile.

        Returns:
            True if the tile was uncovered, False if it was already
            uncovered or is protected by a flag.
        """
        if not self.is_uncoverable:
            return False
        self.covered = False
        self.mark = Mark.NONE
        return True

    def cycle_mark(self) -> bool:
        """
        Advance the mark of a covered tile.

        Returns:
            True if the mark changed, False if the tile is uncovered.
        """
        if not self.covered:
            return False
        self.mark = self.mark.next()
        return True

    @property
    def kind(self) -> TileKind:
        """Object under the cover."""
        if self.is_mine:
            return TileKind.MINE
        if self.hint > 0:
            return TileKind.HINT
        return TileKind.BLANK

    @property
    def is_uncoverable(self) -> bool:
        """Covered and not protected by a flag."""
        return self.covered and self.mark != Mark.FLAG

    @property
    def is_flagged(self) -> bool:
        """Check if tile is covered and flagged."""
        return self.covered and self.mark == Mark.FLAG

    @property
    def is_hint(self) -> bool:
        return self.kind == TileKind.HINT

    @property
    def is_blank(self) -> bool:
        return self.kind == TileKind.BLANK

    def to_observation(self) -> int:
        """
        Convert tile to observation value for agents.

        Returns:
            -1: Covered tile
            -2: Flagged tile
            -3: Tile marked unsure
            0-8: Uncovered tile with its hint count
            9: Uncovered mine
        """
        if self.covered:
            if self.mark == Mark.FLAG:
                return OBS_FLAG
            if self.mark == Mark.UNSURE:
                return OBS_UNSURE
            return OBS_COVERED
        if self.is_mine:
            return OBS_MINE
        return self.hint
