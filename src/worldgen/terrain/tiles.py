"""Terrain tile model."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel

from ..matrix import Matrix
from ..types import Position
from .config import BiomeConfig, BiomesConfig


class Surface(str, Enum):
    """Surface type of a tile, ordered as in the altitude fraction table."""

    WATER = "water"
    LAND = "land"
    MOUNTAIN = "mountain"


class Biome(str, Enum):
    """Biome of a tile, ordered as in the humidity fraction table."""

    DESERT = "desert"
    TAIGA = "taiga"
    JUNGLE = "jungle"

    def config(self, biomes: BiomesConfig) -> BiomeConfig:
        """Biome-specific parameters from the biomes configuration."""
        return getattr(biomes, self.value)


SURFACE_ORDER: tuple[Surface, ...] = (Surface.WATER, Surface.LAND, Surface.MOUNTAIN)
BIOME_ORDER: tuple[Biome, ...] = (Biome.DESERT, Biome.TAIGA, Biome.JUNGLE)
SNOW_INDEX = 1


class TerrainTile(BaseModel, frozen=True):
    """Immutable generated tile.

    biome_config is the config the tile was generated with, kept on the tile
    so consumers need no BiomesConfig to read a tile's vegetation factor.
    """

    surface: Surface
    biome: Biome
    biome_config: BiomeConfig
    is_snow: bool = False
    is_plant: bool = False
    is_city: bool = False


@dataclass(frozen=True)
class TiledTerrain:
    """Generated tile grid with the settlement points it was built around."""

    tilemap: Matrix[TerrainTile]
    city_points: list[Position] = field(default_factory=list)
