"""Rasterize road networks into boolean occupancy grids."""

from typing import Sequence

from ..matrix import Matrix
from ..types import Position, Rectangle, Shape
from .road import Road, TiledRoad


def road_to_rectangle(road: TiledRoad) -> Rectangle:
    """Rectangle spanning a road's grid end points."""
    return Rectangle.from_points(road.start_point, road.end_point)


def bounding_rectangle(rectangles: Sequence[Rectangle]) -> Rectangle:
    """Smallest rectangle containing every rectangle."""
    if not rectangles:
        raise ValueError("Cannot bound an empty set of rectangles")
    return Rectangle.from_points(
        Position(
            x=min(r.top_left.x for r in rectangles),
            y=min(r.top_left.y for r in rectangles),
        ),
        Position(
            x=max(r.bottom_right.x for r in rectangles),
            y=max(r.bottom_right.y for r in rectangles),
        ),
    )


def road_bounds(roads: Sequence[Road]) -> Rectangle:
    """Bounding rectangle of a road network in grid coordinates.

    The rectangle's top-left is the map position of the mask's (0, 0) cell.
    """
    return bounding_rectangle([road_to_rectangle(TiledRoad.of(r)) for r in roads])


def roads_to_road_mask(roads: Sequence[Road]) -> Matrix[bool]:
    """Boolean mask of the cells covered by roads.

    Each road covers the rectangle between its grid end points, end points
    included. The mask is framed by the roads' bounding rectangle, so its
    (0, 0) cell is ``road_bounds(roads).top_left``.
    """
    if not roads:
        return Matrix(Shape(width=0, height=0), fill=False, dtype=bool)

    rectangles = [road_to_rectangle(TiledRoad.of(r)) for r in roads]
    frame = bounding_rectangle(rectangles)

    mask: Matrix[bool] = Matrix(frame.shape.map(lambda s: s + 1), fill=False, dtype=bool)
    for rect in rectangles:
        footprint: Matrix[bool] = Matrix(
            rect.shape.map(lambda s: s + 1), fill=True, dtype=bool
        )
        mask.insert(rect.top_left - frame.top_left, footprint)
    return mask
