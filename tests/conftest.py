"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Iterable, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, Params, GameController, Tile, TileLayout


def build_board(
    width: int, height: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """
    Create a board with mines at fixed positions, already placed.

    Hints are computed the same way the first action computes them.
    """
    mines = list(mines)
    board = Board(Params(width, height, len(mines)))
    for x, y in mines:
        board._tiles[y * width + x].is_mine = True
    board._place_hints()
    board._placed = True
    return board


def mine_count(board: Board) -> int:
    return sum(1 for _, _, tile in board.tiles() if tile.is_mine)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def beginner_board() -> Board:
    """Create a seeded beginner board (8x8, 10 mines)."""
    return Board(Params(8, 8, 10), seed=1234)


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for flood testing."""
    return Board(Params(5, 5, 0))


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with one mine in the top-left corner.

    Layout (x right, y down)::

        * 1 . . .
        1 1 . . .
        . . . . .
    """
    return build_board(5, 5, [(0, 0)])


@pytest.fixture
def chord_board() -> Board:
    """
    4x4 board with mines at (0, 0) and (2, 0).

    Layout::

        * 2 * 1
        1 2 1 1
        . . . .
        . . . .
    """
    return build_board(4, 4, [(0, 0), (2, 0)])


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def layout() -> TileLayout:
    """Default 40px layout."""
    return TileLayout()


@pytest.fixture
def controller(chord_board: Board) -> GameController:
    """Controller driving the chord board, deterministic jitter."""
    return GameController(board=chord_board, rng=random.Random(0))


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def covered_tile() -> Tile:
    """Create a covered blank tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create a covered tile holding a mine."""
    return Tile(is_mine=True)


@pytest.fixture
def hint_tile() -> Tile:
    """Create an uncovered tile with three neighboring mines."""
    tile = Tile(hint=3)
    tile.uncover()
    return tile
