"""Tests for terrain configuration models."""

import math

import pytest
from pydantic import ValidationError

from worldgen.terrain.config import (
    AltitudeMapConfig,
    BiomeConfig,
    HumidityMapConfig,
    TemperatureMapConfig,
    TerrainGenerationConfig,
)


class TestDefaults:
    """Tests for default configuration values."""

    def test_defaults_valid(self) -> None:
        """Default terrain configuration constructs."""
        config = TerrainGenerationConfig()
        assert config.map_size.width == 128
        assert config.city_per_tile == 0.002

    def test_default_sea_level(self) -> None:
        """Sea level is the top of the water range."""
        assert math.isclose(AltitudeMapConfig().sea_level(), 4 / 11)

    def test_biome_plant_k(self) -> None:
        config = TerrainGenerationConfig()
        assert config.biomes_config.desert.plant_k == 0.2
        assert config.biomes_config.jungle.plant_k == 0.9


class TestValidation:
    """Tests for eager configuration validation."""

    def test_negative_fraction_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AltitudeMapConfig(water_fraction=-1)

    def test_all_zero_fractions_rejected(self) -> None:
        with pytest.raises(ValidationError):
            HumidityMapConfig(desert_fraction=0, taiga_fraction=0, jungle_fraction=0)

    def test_zero_frequency_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TemperatureMapConfig.model_validate({"noise_config": {"frequency": 0}})

    def test_probability_bounds(self) -> None:
        with pytest.raises(ValidationError):
            TerrainGenerationConfig(random_tree_probability=1.5)
        with pytest.raises(ValidationError):
            BiomeConfig(plant_k=-0.1)

    def test_reversed_output_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TerrainGenerationConfig.model_validate(
                {"fertility_noise_config": {"frequency": 0.1, "output_range": [1, 0]}}
            )

    @pytest.mark.parametrize(
        "model",
        [AltitudeMapConfig, TemperatureMapConfig, HumidityMapConfig],
    )
    @pytest.mark.parametrize("output_range", [[0.0, 2.0], [-0.5, 1.0]])
    def test_classified_output_range_outside_unit_rejected(
        self, model: type, output_range: list[float]
    ) -> None:
        """Classified layers only accept noise ranges inside [0, 1]."""
        with pytest.raises(ValidationError):
            model.model_validate(
                {"noise_config": {"frequency": 0.01, "output_range": output_range}}
            )

    def test_altitude_range_rejected_from_terrain_config(self) -> None:
        """An out-of-domain altitude range fails before any generation."""
        with pytest.raises(ValidationError):
            TerrainGenerationConfig.model_validate(
                {
                    "altitude_map_config": {
                        "noise_config": {"frequency": 0.015, "output_range": [0.0, 2.0]}
                    }
                }
            )

    def test_narrower_output_range_accepted(self) -> None:
        config = AltitudeMapConfig.model_validate(
            {"noise_config": {"frequency": 0.015, "output_range": [0.2, 0.8]}}
        )
        assert config.noise_config.output_range.end == 0.8

    def test_fertility_output_range_unrestricted(self) -> None:
        """Fertility is not classified, so its range may exceed [0, 1]."""
        config = TerrainGenerationConfig.model_validate(
            {"fertility_noise_config": {"frequency": 0.03, "output_range": [0.0, 2.0]}}
        )
        assert config.fertility_noise_config.output_range.end == 2.0

    def test_frozen(self) -> None:
        config = TerrainGenerationConfig()
        with pytest.raises(ValidationError):
            config.beach_height = 0.5  # type: ignore
