"""Stratified point distribution over a rectangular area."""

import logging
import math

from .random_source import RandomSource
from .types import Position, Range, Shape

logger = logging.getLogger(__name__)


def grid_shape(area: Shape, density: float) -> Shape:
    """Square grid used to distribute points at density.

    Returns:
        ``g x g`` shape where ``g = round(sqrt(area * density))``.
    """
    size = round(math.sqrt(area.area() * density))
    return Shape.square(size)


def distribute(area: Shape, density: float, rng: RandomSource) -> list[Position]:
    """Spread points evenly over area, one jittered point per grid cell.

    The area is divided into a ``g x g`` grid (see ``grid_shape``) and each
    cell receives a single point drawn uniformly within the cell. Spans are
    computed per axis, so non-square areas stay in bounds.

    Args:
        area: Area to cover, anchored at (0, 0).
        density: Expected points per tile.
        rng: Random source, advanced by two draws per point.

    Returns:
        ``g * g`` positions, columns outer, rows inner.
    """
    grid = grid_shape(area, density)
    if grid.width == 0:
        return []

    span_x = area.width / grid.width
    span_y = area.height / grid.height

    points: list[Position] = []
    for j in range(grid.width):
        for i in range(grid.height):
            x = math.floor(j * span_x + rng.random_range(Range(start=0.0, end=span_x)))
            y = math.floor(i * span_y + rng.random_range(Range(start=0.0, end=span_y)))
            # Float spans can round the last cell's edge up to the area size
            points.append(Position(x=min(x, area.width - 1), y=min(y, area.height - 1)))

    logger.debug(f"Distributed {len(points)} points over {area} at density {density}")
    return points
