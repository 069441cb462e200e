"""
Pixel layout shared between the controller and renderers.

Tile (x, y) occupies the half-open pixel rect
[ox + x*T, ox + (x+1)*T) x [oy + y*T, oy + (y+1)*T).
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_TILE_SIZE = 40.0


@dataclass(frozen=True)
class TileLayout:
    """
    Square tile grid anchored at a pixel origin.

    Attributes:
        tile_size: Edge length of a tile in pixels.
        origin: Pixel position of the top-left corner of tile (0, 0).
    """

    tile_size: float = DEFAULT_TILE_SIZE
    origin: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        if self.tile_size <= 0:
            raise ValueError("Tile size must be positive")

    def extent(self, dims: Tuple[int, int]) -> Tuple[float, float]:
        """Pixel width and height of a board with the given dims."""
        width, height = dims
        return width * self.tile_size, height * self.tile_size

    def to_tile(
        self, px: float, py: float, dims: Tuple[int, int]
    ) -> Optional[Tuple[int, int]]:
        """
        Map a pointer position to the tile under it.

        Args:
            px: Pointer x in pixels.
            py: Pointer y in pixels.
            dims: Board (width, height) in tiles.

        Returns:
            (x, y) of the tile, or None when the pointer is off the board.
        """
        local_x = px - self.origin[0]
        local_y = py - self.origin[1]
        extent_x, extent_y = self.extent(dims)

        if not (0 <= local_x < extent_x and 0 <= local_y < extent_y):
            return None

        # Guard against float rounding at the far edge
        x = min(int(math.floor(local_x / self.tile_size)), dims[0] - 1)
        y = min(int(math.floor(local_y / self.tile_size)), dims[1] - 1)
        return x, y

    def tile_rect(self, x: int, y: int) -> Tuple[float, float, float, float]:
        """Pixel rect of a tile as (left, top, width, height)."""
        return (
            self.origin[0] + x * self.tile_size,
            self.origin[1] + y * self.tile_size,
            self.tile_size,
            self.tile_size,
        )

    def tile_center(self, x: int, y: int) -> Tuple[float, float]:
        """Pixel position of the center of a tile."""
        left, top, size, _ = self.tile_rect(x, y)
        return left + size / 2, top + size / 2
