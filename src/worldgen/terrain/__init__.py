"""Terrain generation package.

Classifies every tile of the map from shared coherent noise layers:
surface from altitude, biome from humidity, snow from temperature and
vegetation from fertility, and marks settlement tiles.
"""

from .config import (
    AltitudeMapConfig,
    BiomeConfig,
    BiomesConfig,
    HumidityMapConfig,
    TemperatureMapConfig,
    TerrainGenerationConfig,
)
from .generator import (
    FractionTables,
    classify_biome,
    classify_snow,
    classify_surface,
    decide_plant,
    generate_terrain,
    generate_tile,
)
from .tiles import Biome, Surface, TerrainTile, TiledTerrain

__all__ = [
    "AltitudeMapConfig",
    "Biome",
    "BiomeConfig",
    "BiomesConfig",
    "FractionTables",
    "HumidityMapConfig",
    "Surface",
    "TemperatureMapConfig",
    "TerrainGenerationConfig",
    "TerrainTile",
    "TiledTerrain",
    "classify_biome",
    "classify_snow",
    "classify_surface",
    "decide_plant",
    "generate_terrain",
    "generate_tile",
]
