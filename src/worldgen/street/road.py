"""Road geometry and the arena that holds a road tree."""

import math
from dataclasses import dataclass, field

from ..types import Position


@dataclass
class Road:
    """Straight road segment in continuous map space.

    Roads reference each other by index into their RoadNetwork, so the tree
    holds no object cycles.
    """

    index: int
    start: tuple[float, float]
    angle: float
    length: float
    parent: int | None = None
    children: list[int] = field(default_factory=list)

    @property
    def end(self) -> tuple[float, float]:
        return self.point_at(1.0)

    def point_at(self, ratio: float) -> tuple[float, float]:
        """Point at ratio (0 = start, 1 = end) along the road."""
        x, y = self.start
        distance = self.length * ratio
        return (x + math.cos(self.angle) * distance, y + math.sin(self.angle) * distance)

    @property
    def is_main(self) -> bool:
        return self.parent is None


class RoadNetwork:
    """Arena of roads forming a tree rooted at the main road."""

    def __init__(self) -> None:
        self._roads: list[Road] = []

    def add_main_road(
        self, center: Position, anchor_ratio: float, angle: float, length: float
    ) -> Road:
        """Add the root road so that center sits at anchor_ratio along it."""
        if self._roads:
            raise ValueError("Network already has a main road")
        start = (
            center.x - math.cos(angle) * length * anchor_ratio,
            center.y - math.sin(angle) * length * anchor_ratio,
        )
        road = Road(index=0, start=start, angle=angle, length=length)
        self._roads.append(road)
        return road

    def add_branch(
        self, parent: Road, start: tuple[float, float], angle: float, length: float
    ) -> Road:
        """Add a child road of parent starting at start."""
        road = Road(
            index=len(self._roads),
            start=start,
            angle=angle,
            length=length,
            parent=parent.index,
        )
        self._roads.append(road)
        parent.children.append(road.index)
        return road

    @property
    def main_road(self) -> Road:
        return self._roads[0]

    def get(self, index: int) -> Road:
        return self._roads[index]

    def children_of(self, road: Road) -> list[Road]:
        return [self._roads[i] for i in road.children]

    def roads(self) -> list[Road]:
        """All roads, flattened in creation order."""
        return list(self._roads)

    def __len__(self) -> int:
        return len(self._roads)


@dataclass(frozen=True)
class TiledRoad:
    """Road snapped to integer grid end points."""

    start_point: Position
    end_point: Position

    @classmethod
    def of(cls, road: Road) -> "TiledRoad":
        start_x, start_y = road.start
        end_x, end_y = road.end
        return cls(
            start_point=Position(x=round(start_x), y=round(start_y)),
            end_point=Position(x=round(end_x), y=round(end_y)),
        )
