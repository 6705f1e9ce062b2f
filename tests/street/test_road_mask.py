"""Tests for road rasterization."""

import math

from worldgen.random_source import RandomSource
from worldgen.street import (
    Road,
    StreetGenerationConfig,
    TiledRoad,
    generate_streets,
    road_bounds,
    road_to_rectangle,
    roads_to_road_mask,
)
from worldgen.types import Position, Rectangle, Shape


def _road(start: tuple[float, float], angle: float, length: float, index: int = 0) -> Road:
    return Road(index=index, start=start, angle=angle, length=length)


class TestTiledRoad:
    def test_rounds_end_points(self) -> None:
        """End points snap to the nearest grid cell."""
        tiled = TiledRoad.of(_road((0.2, 0.7), 0.0, 2.9))
        assert tiled.start_point == Position(x=0, y=1)
        assert tiled.end_point == Position(x=3, y=1)

    def test_rectangle_normalized(self) -> None:
        """A road running backwards still yields an ordered rectangle."""
        rect = road_to_rectangle(TiledRoad.of(_road((4.0, 4.0), math.pi, 3.0)))
        assert rect == Rectangle.from_points(Position(x=1, y=4), Position(x=4, y=4))


class TestRoadsToRoadMask:
    """Tests for roads_to_road_mask."""

    def test_single_horizontal_road(self) -> None:
        """A horizontal road covers one row including both end points."""
        mask = roads_to_road_mask([_road((0.0, 0.0), 0.0, 3.0)])
        assert mask.shape == Shape(width=4, height=1)
        assert mask.flatten() == [True] * 4

    def test_crossing_roads(self) -> None:
        """Two roads are merged into their bounding frame."""
        roads = [
            _road((0.0, 0.0), 0.0, 3.0, index=0),
            _road((1.0, 0.0), math.pi / 2, 2.0, index=1),
        ]
        mask = roads_to_road_mask(roads)
        assert mask.shape == Shape(width=4, height=3)
        for x in range(4):
            assert mask.at(Position(x=x, y=0))
        for y in range(3):
            assert mask.at(Position(x=1, y=y))
        assert not mask.at(Position(x=0, y=1))
        assert not mask.at(Position(x=3, y=2))

    def test_diagonal_road_fills_bounding_box(self) -> None:
        """A diagonal road occupies its whole end-point rectangle."""
        mask = roads_to_road_mask([_road((0.0, 0.0), math.pi / 4, math.sqrt(8))])
        assert mask.shape == Shape.square(3)
        assert all(mask.flatten())

    def test_negative_coordinates(self) -> None:
        """Roads left of and above the origin are framed locally."""
        roads = [_road((-2.0, -1.0), 0.0, 2.0)]
        assert road_bounds(roads).top_left == Position(x=-2, y=-1)
        mask = roads_to_road_mask(roads)
        assert mask.shape == Shape(width=3, height=1)
        assert all(mask.flatten())

    def test_empty_network(self) -> None:
        mask = roads_to_road_mask([])
        assert mask.shape == Shape(width=0, height=0)

    def test_generated_network_fits(self) -> None:
        """Every road's rectangle lies inside the mask and is fully set."""
        roads = generate_streets(StreetGenerationConfig(), RandomSource(21))
        mask = roads_to_road_mask(roads)
        origin = road_bounds(roads).top_left
        for road in roads:
            rect = road_to_rectangle(TiledRoad.of(road))
            for x in range(rect.top_left.x, rect.bottom_right.x + 1):
                for y in range(rect.top_left.y, rect.bottom_right.y + 1):
                    assert mask.at(Position(x=x, y=y) - origin)
