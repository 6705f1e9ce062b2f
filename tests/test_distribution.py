"""Tests for stratified point distribution."""

from worldgen.distribution import distribute, grid_shape
from worldgen.random_source import RandomSource
from worldgen.types import Shape


class TestGridShape:
    """Tests for grid_shape."""

    def test_square_grid(self) -> None:
        """Grid side is round(sqrt(area * density))."""
        assert grid_shape(Shape(width=100, height=100), 0.01) == Shape.square(10)
        assert grid_shape(Shape(width=128, height=128), 0.002) == Shape.square(6)

    def test_zero_density(self) -> None:
        assert grid_shape(Shape(width=50, height=50), 0.0) == Shape.square(0)


class TestDistribute:
    """Tests for distribute."""

    def test_point_count(self, rng: RandomSource) -> None:
        """Exactly g squared points are produced."""
        points = distribute(Shape(width=100, height=100), 0.01, rng)
        assert len(points) == 100

    def test_points_in_bounds(self, rng: RandomSource) -> None:
        """Every point lies inside the area."""
        for point in distribute(Shape(width=100, height=100), 0.01, rng):
            assert 0 <= point.x < 100
            assert 0 <= point.y < 100

    def test_one_point_per_cell(self, rng: RandomSource) -> None:
        """Each grid cell receives exactly one point."""
        points = distribute(Shape(width=100, height=100), 0.01, rng)
        cells = {(p.x // 10, p.y // 10) for p in points}
        assert len(cells) == 100

    def test_columns_outer_rows_inner(self, rng: RandomSource) -> None:
        """Points are produced column by column."""
        points = distribute(Shape(width=100, height=100), 0.01, rng)
        assert [p.x // 10 for p in points[:10]] == [0] * 10
        assert [p.y // 10 for p in points[:10]] == list(range(10))

    def test_deterministic(self) -> None:
        a = distribute(Shape(width=64, height=64), 0.01, RandomSource(3))
        b = distribute(Shape(width=64, height=64), 0.01, RandomSource(3))
        assert a == b

    def test_non_square_area_in_bounds(self, rng: RandomSource) -> None:
        """Non-square areas keep points inside both dimensions."""
        points = distribute(Shape(width=40, height=10), 0.1, rng)
        assert len(points) == 36
        for point in points:
            assert 0 <= point.x < 40
            assert 0 <= point.y < 10

    def test_zero_density_no_points(self, rng: RandomSource) -> None:
        assert distribute(Shape(width=10, height=10), 0.0, rng) == []
