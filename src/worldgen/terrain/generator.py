"""Terrain generation: turn noise layers into a grid of classified tiles."""

import logging
import time
from dataclasses import dataclass

from ..distribution import distribute
from ..fraction import classify
from ..matrix import Matrix
from ..noise import (
    ALTITUDE_LAYER,
    FERTILITY_LAYER,
    HUMIDITY_LAYER,
    TEMPERATURE_LAYER,
    NoiseSampler,
)
from ..random_source import RandomSource
from ..types import Position, Range
from .config import BiomeConfig, TerrainGenerationConfig
from .tiles import (
    BIOME_ORDER,
    SNOW_INDEX,
    SURFACE_ORDER,
    Biome,
    Surface,
    TerrainTile,
    TiledTerrain,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FractionTables:
    """Classification ranges resolved once per generation run."""

    altitude: list[Range]
    humidity: list[Range]
    temperature: list[Range]
    sea_level: float

    @classmethod
    def from_config(cls, config: TerrainGenerationConfig) -> "FractionTables":
        altitude = config.altitude_map_config.ranges()
        return cls(
            altitude=altitude,
            humidity=config.humidity_map_config.ranges(),
            temperature=config.temperature_map_config.ranges(),
            sea_level=altitude[0].end,
        )


def generate_terrain(
    config: TerrainGenerationConfig,
    rng: RandomSource,
    noise: NoiseSampler,
) -> TiledTerrain:
    """Generate a tiled terrain from configuration.

    City points are distributed before any tile is classified so that every
    tile can be marked consistently. Tiles are visited column by column (x
    outer, y inner), which fixes the order of random draws.

    Args:
        config: Terrain generation configuration.
        rng: Random source for city placement and vegetation.
        noise: Coherent noise sampler shared by all layers.

    Returns:
        TiledTerrain with the tile grid and the city points.
    """
    width, height = config.map_size.width, config.map_size.height
    logger.info(f"Generating terrain {width}x{height}")

    logger.debug("Distributing city points...")
    city_points = distribute(config.map_size, config.city_per_tile, rng)
    city_lookup = set(city_points)

    tables = FractionTables.from_config(config)
    tilemap: Matrix[TerrainTile] = Matrix(config.map_size)

    start = time.perf_counter()
    for x in range(width):
        for y in range(height):
            position = Position(x=x, y=y)
            tilemap.set(
                position,
                generate_tile(config, tables, position, rng, noise, city_lookup),
            )
    elapsed_ms = (time.perf_counter() - start) * 1000

    logger.debug(f"Tilemap generation complete in {elapsed_ms:.0f}ms")
    _log_terrain_stats(tilemap)

    return TiledTerrain(tilemap=tilemap, city_points=city_points)


def generate_tile(
    config: TerrainGenerationConfig,
    tables: FractionTables,
    position: Position,
    rng: RandomSource,
    noise: NoiseSampler,
    city_points: set[Position],
) -> TerrainTile:
    """Generate a single tile.

    Snow is only decided off water; vegetation and settlements only on land.
    """
    map_size = config.map_size
    altitude = noise.sample_layer(
        position, config.altitude_map_config.noise_config, map_size, ALTITUDE_LAYER
    )
    humidity = noise.sample_layer(
        position, config.humidity_map_config.noise_config, map_size, HUMIDITY_LAYER
    )

    surface = classify_surface(altitude, tables.altitude)
    biome = classify_biome(
        humidity, altitude, tables.humidity, tables.sea_level, config.beach_height
    )
    biome_config = biome.config(config.biomes_config)

    is_snow = False
    is_plant = False
    is_city = False

    if surface != Surface.WATER:
        temperature = noise.sample_layer(
            position,
            config.temperature_map_config.noise_config,
            map_size,
            TEMPERATURE_LAYER,
        )
        is_snow = classify_snow(temperature, tables.temperature)

    if surface == Surface.LAND:
        fertility = noise.sample_layer(
            position, config.fertility_noise_config, map_size, FERTILITY_LAYER
        )
        is_plant = decide_plant(
            fertility, biome_config, config.random_tree_probability, rng
        )
        is_city = position in city_points

    return TerrainTile(
        surface=surface,
        biome=biome,
        biome_config=biome_config,
        is_snow=is_snow,
        is_plant=is_plant,
        is_city=is_city,
    )


def classify_surface(altitude: float, altitude_ranges: list[Range]) -> Surface:
    """Surface for an altitude value."""
    return SURFACE_ORDER[classify(altitude_ranges, altitude)]


def classify_biome(
    humidity: float,
    altitude: float,
    humidity_ranges: list[Range],
    sea_level: float,
    beach_height: float,
) -> Biome:
    """Biome for humidity, forced to desert on the coastal band.

    Anything below ``sea_level + beach_height`` is desert, water included.
    """
    biome = BIOME_ORDER[classify(humidity_ranges, humidity)]
    if altitude - sea_level < beach_height:
        return Biome.DESERT
    return biome


def classify_snow(temperature: float, temperature_ranges: list[Range]) -> bool:
    return classify(temperature_ranges, temperature) == SNOW_INDEX


def decide_plant(
    fertility: float,
    biome_config: BiomeConfig,
    random_tree_probability: float,
    rng: RandomSource,
) -> bool:
    """Whether a land tile carries vegetation.

    Two chances: a biome-weighted draw gated on fertility, then a purely
    random draw. The second draw only happens when the first chance fails.
    """
    by_noise = fertility >= 0.5 if rng.with_probability(biome_config.plant_k) else False
    return by_noise or rng.with_probability(random_tree_probability * biome_config.plant_k)


def _log_terrain_stats(tilemap: Matrix[TerrainTile]) -> None:
    """Log terrain generation statistics."""
    total = len(tilemap)
    if total == 0:
        return

    logger.info(f"Terrain stats ({total:,} tiles):")
    for surface in Surface:
        count = tilemap.count(lambda tile, s=surface: tile.surface == s)
        logger.info(f"  {surface.value}: {count:,} ({count / total * 100:.1f}%)")

    snow = tilemap.count(lambda tile: tile.is_snow)
    plants = tilemap.count(lambda tile: tile.is_plant)
    cities = tilemap.count(lambda tile: tile.is_city)
    logger.info(f"  snow: {snow:,}, plants: {plants:,}, cities: {cities:,}")
