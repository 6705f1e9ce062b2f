"""World assembly: terrain, settlements and their road networks."""

import time
from dataclasses import dataclass, field

import structlog
from pydantic import BaseModel, Field

from .city import CityGenerationConfig, GeneratedCityTemplate, generate_city
from .matrix import Matrix
from .noise import NoiseSampler
from .random_source import RandomSource
from .street import road_bounds, roads_to_road_mask
from .terrain import Surface, TerrainGenerationConfig, TiledTerrain, generate_terrain
from .types import Position, Rectangle

logger = structlog.get_logger()


class WorldGenerationConfig(BaseModel, frozen=True):
    """Complete world generation configuration."""

    seed: int | str = Field(default="seed", description="Seed for the whole world")
    terrain: TerrainGenerationConfig = Field(default_factory=TerrainGenerationConfig)
    city: CityGenerationConfig = Field(default_factory=CityGenerationConfig)


@dataclass(frozen=True)
class GeneratedCity:
    """A city template with its rasterized roads."""

    template: GeneratedCityTemplate
    road_mask: Matrix[bool]
    road_mask_origin: Position


@dataclass(frozen=True)
class GeneratedWorld:
    """One consistent snapshot of a generated world."""

    terrain: TiledTerrain
    road_map: Matrix[bool]
    cities: list[GeneratedCity] = field(default_factory=list)

    def road_count(self) -> int:
        return sum(len(city.template.roads) for city in self.cities)


def generate_world(config: WorldGenerationConfig) -> GeneratedWorld:
    """Generate terrain, then a road network for every settlement.

    Each city draws from its own stream spawned from the world seed, so a
    city's roads do not depend on how many draws the terrain consumed.

    Args:
        config: World generation configuration.

    Returns:
        GeneratedWorld with terrain, per-city templates and the merged road map.

    Raises:
        GenerationInfeasibleError: If a city's road network cannot satisfy
            its accepted road count.
    """
    source = RandomSource(config.seed)
    noise = NoiseSampler(source.seed)
    map_size = config.terrain.map_size

    logger.info("world_generation_started", seed=source.seed, map_size=str(map_size))
    start = time.perf_counter()

    terrain = generate_terrain(config.terrain, source, noise)

    road_map: Matrix[bool] = Matrix(map_size, fill=False, dtype=bool)
    cities: list[GeneratedCity] = []
    for index, point in enumerate(terrain.city_points):
        if config.city.land_only and not terrain.tilemap.at(point).is_city:
            continue
        template = generate_city(config.city, source.spawn(index), point)
        city = GeneratedCity(
            template=template,
            road_mask=roads_to_road_mask(template.roads),
            road_mask_origin=road_bounds(template.roads).top_left,
        )
        merge_road_mask(
            road_map, terrain, city, allow_water=config.city.allow_roads_on_water
        )
        cities.append(city)

    world = GeneratedWorld(terrain=terrain, road_map=road_map, cities=cities)
    logger.info(
        "world_generation_complete",
        city_points=len(terrain.city_points),
        cities=len(cities),
        roads=world.road_count(),
        road_tiles=road_map.count(bool),
        duration_ms=round((time.perf_counter() - start) * 1000),
    )
    return world


def merge_road_mask(
    road_map: Matrix[bool],
    terrain: TiledTerrain,
    city: GeneratedCity,
    allow_water: bool = False,
) -> None:
    """Mark a city's road cells on the world road map.

    Cells outside the map are dropped; water cells are dropped unless
    allow_water is set.
    """
    mask_frame = Rectangle.from_corner(city.road_mask_origin, city.road_mask.shape)
    map_frame = Rectangle.from_corner(Position(x=0, y=0), road_map.shape)
    overlap = mask_frame.intersection(map_frame)
    if overlap is None:
        return

    visible = city.road_mask.of(
        Rectangle.from_corner(overlap.top_left - city.road_mask_origin, overlap.shape),
        out_fill=False,
    )
    for local in visible.positions():
        if not visible.at(local):
            continue
        position = overlap.top_left + local
        if not allow_water and terrain.tilemap.at(position).surface == Surface.WATER:
            continue
        road_map.set(position, True)
