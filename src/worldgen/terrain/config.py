"""Terrain generation configuration models."""

from pydantic import BaseModel, Field, model_validator

from ..fraction import calculate_ranges, validate_weights
from ..noise import NoiseConfig
from ..types import Range, Shape


def check_output_range(noise_config: NoiseConfig) -> None:
    """Require a layer's noise to stay inside the [0, 1] classification domain.

    Raises:
        ValueError: If output_range reaches below 0 or above 1.
    """
    output_range = noise_config.output_range
    if output_range.start < 0 or output_range.end > 1:
        raise ValueError(
            f"Noise output_range {output_range} must lie within [0, 1] "
            "to be classified by fractions"
        )


class AltitudeMapConfig(BaseModel, frozen=True):
    """Altitude layer: decides water, land and mountain surfaces."""

    noise_config: NoiseConfig = Field(
        default_factory=lambda: NoiseConfig(frequency=0.015)
    )
    water_fraction: float = Field(default=4, ge=0, description="Relative share of water")
    land_fraction: float = Field(default=5, ge=0, description="Relative share of land")
    mountain_fraction: float = Field(
        default=2, ge=0, description="Relative share of mountains"
    )

    @model_validator(mode="after")
    def _check_fractions(self) -> "AltitudeMapConfig":
        validate_weights(self.fractions())
        check_output_range(self.noise_config)
        return self

    def fractions(self) -> list[float]:
        return [self.water_fraction, self.land_fraction, self.mountain_fraction]

    def ranges(self) -> list[Range]:
        return calculate_ranges(self.fractions())

    def sea_level(self) -> float:
        """Altitude at the top of the water range."""
        return self.ranges()[0].end


class TemperatureMapConfig(BaseModel, frozen=True):
    """Temperature layer: decides snow cover on land and mountains."""

    noise_config: NoiseConfig = Field(
        default_factory=lambda: NoiseConfig(frequency=0.001)
    )
    land_fraction: float = Field(default=4, ge=0, description="Relative share without snow")
    snow_fraction: float = Field(default=1, ge=0, description="Relative share of snow")

    @model_validator(mode="after")
    def _check_fractions(self) -> "TemperatureMapConfig":
        validate_weights(self.fractions())
        check_output_range(self.noise_config)
        return self

    def fractions(self) -> list[float]:
        return [self.land_fraction, self.snow_fraction]

    def ranges(self) -> list[Range]:
        return calculate_ranges(self.fractions())


class HumidityMapConfig(BaseModel, frozen=True):
    """Humidity layer: decides biomes."""

    noise_config: NoiseConfig = Field(
        default_factory=lambda: NoiseConfig(frequency=0.01)
    )
    desert_fraction: float = Field(default=1, ge=0, description="Relative share of desert")
    taiga_fraction: float = Field(default=1, ge=0, description="Relative share of taiga")
    jungle_fraction: float = Field(default=1, ge=0, description="Relative share of jungle")

    @model_validator(mode="after")
    def _check_fractions(self) -> "HumidityMapConfig":
        validate_weights(self.fractions())
        check_output_range(self.noise_config)
        return self

    def fractions(self) -> list[float]:
        return [self.desert_fraction, self.taiga_fraction, self.jungle_fraction]

    def ranges(self) -> list[Range]:
        return calculate_ranges(self.fractions())


class BiomeConfig(BaseModel, frozen=True):
    """Per-biome parameters."""

    plant_k: float = Field(
        default=0.5, ge=0, le=1, description="Vegetation multiplier for this biome"
    )


class BiomesConfig(BaseModel, frozen=True):
    """Parameters for every biome."""

    desert: BiomeConfig = Field(default_factory=lambda: BiomeConfig(plant_k=0.2))
    taiga: BiomeConfig = Field(default_factory=lambda: BiomeConfig(plant_k=0.75))
    jungle: BiomeConfig = Field(default_factory=lambda: BiomeConfig(plant_k=0.9))


class TerrainGenerationConfig(BaseModel, frozen=True):
    """Complete terrain generation configuration."""

    map_size: Shape = Field(
        default_factory=lambda: Shape(width=128, height=128),
        description="Tilemap size in tiles",
    )
    city_per_tile: float = Field(
        default=0.002, ge=0, le=1, description="Expected settlements per tile"
    )

    altitude_map_config: AltitudeMapConfig = Field(default_factory=AltitudeMapConfig)
    temperature_map_config: TemperatureMapConfig = Field(
        default_factory=TemperatureMapConfig
    )
    humidity_map_config: HumidityMapConfig = Field(default_factory=HumidityMapConfig)
    biomes_config: BiomesConfig = Field(default_factory=BiomesConfig)

    fertility_noise_config: NoiseConfig = Field(
        default_factory=lambda: NoiseConfig(frequency=0.03)
    )
    random_tree_probability: float = Field(
        default=0.1, ge=0, le=1, description="Chance of a plant regardless of fertility"
    )
    beach_height: float = Field(
        default=0.06, description="Altitude above sea level that is still beach"
    )
