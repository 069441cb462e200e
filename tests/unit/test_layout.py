"""
Unit tests for the pointer to tile mapping.
"""
import pytest
from minefield import TileLayout


class TestTileLayout:
    """Test pixel layout queries."""

    def test_default_tile_size(self, layout: TileLayout) -> None:
        assert layout.tile_size == 40.0

    def test_invalid_tile_size(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            TileLayout(tile_size=0)

    def test_extent(self, layout: TileLayout) -> None:
        assert layout.extent((30, 16)) == (1200.0, 640.0)

    @pytest.mark.parametrize(
        "pointer, expected",
        [
            ((0.0, 0.0), (0, 0)),
            ((39.9, 39.9), (0, 0)),
            ((40.0, 0.0), (1, 0)),
            ((319.9, 319.9), (7, 7)),
            ((125.0, 85.0), (3, 2)),
        ],
    )
    def test_to_tile_inside(self, layout: TileLayout, pointer, expected) -> None:
        assert layout.to_tile(*pointer, dims=(8, 8)) == expected

    @pytest.mark.parametrize(
        "pointer",
        [(-0.1, 10.0), (10.0, -5.0), (320.0, 10.0), (10.0, 320.0), (1000.0, 1000.0)],
    )
    def test_to_tile_outside(self, layout: TileLayout, pointer) -> None:
        """The far edge belongs to no tile."""
        assert layout.to_tile(*pointer, dims=(8, 8)) is None

    def test_origin_offset(self) -> None:
        layout = TileLayout(tile_size=10.0, origin=(100.0, 50.0))
        assert layout.to_tile(99.0, 55.0, (4, 4)) is None
        assert layout.to_tile(100.0, 50.0, (4, 4)) == (0, 0)
        assert layout.to_tile(125.0, 61.0, (4, 4)) == (2, 1)

    def test_rect_and_center_agree_with_mapping(self, layout: TileLayout) -> None:
        left, top, width, height = layout.tile_rect(3, 5)
        assert (left, top, width, height) == (120.0, 200.0, 40.0, 40.0)
        assert layout.tile_center(3, 5) == (140.0, 220.0)
        assert layout.to_tile(*layout.tile_center(3, 5), dims=(8, 8)) == (3, 5)
