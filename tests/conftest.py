"""Shared test fixtures for world generation tests."""

import pytest

from worldgen.noise import NoiseSampler
from worldgen.random_source import RandomSource
from worldgen.terrain import TerrainGenerationConfig
from worldgen.types import Shape


@pytest.fixture
def rng() -> RandomSource:
    """Random source with a fixed seed."""
    return RandomSource(12345)


@pytest.fixture
def noise() -> NoiseSampler:
    """Noise sampler with a fixed seed."""
    return NoiseSampler(12345)


@pytest.fixture
def small_terrain_config() -> TerrainGenerationConfig:
    """16x16 terrain with enough settlements to exercise city marking."""
    return TerrainGenerationConfig(
        map_size=Shape(width=16, height=16),
        city_per_tile=0.05,
    )


@pytest.fixture
def land_terrain_config() -> TerrainGenerationConfig:
    """16x16 terrain where every tile is land."""
    return TerrainGenerationConfig.model_validate(
        {
            "map_size": {"width": 16, "height": 16},
            "city_per_tile": 0.05,
            "altitude_map_config": {
                "water_fraction": 0,
                "land_fraction": 1,
                "mountain_fraction": 0,
            },
        }
    )
