"""Street generation: branching road trees and their rasterization."""

from .config import StreetGenerationConfig
from .generator import generate_streets, grow_network
from .mask import bounding_rectangle, road_bounds, road_to_rectangle, roads_to_road_mask
from .road import Road, RoadNetwork, TiledRoad

__all__ = [
    "Road",
    "RoadNetwork",
    "StreetGenerationConfig",
    "TiledRoad",
    "bounding_rectangle",
    "generate_streets",
    "grow_network",
    "road_bounds",
    "road_to_rectangle",
    "roads_to_road_mask",
]
