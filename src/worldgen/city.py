"""City templates: the road layout generated for one settlement."""

from dataclasses import dataclass, field
from typing import Any

import structlog
from pydantic import BaseModel, Field

from .random_source import RandomSource
from .street import Road, StreetGenerationConfig, generate_streets
from .types import Position

logger = structlog.get_logger()


class CityGenerationConfig(BaseModel, frozen=True):
    """City generation configuration."""

    street_generation_config: StreetGenerationConfig = Field(
        default_factory=StreetGenerationConfig
    )
    land_only: bool = Field(
        default=True, description="Only build cities on points whose tile is a city tile"
    )
    allow_roads_on_water: bool = Field(
        default=False, description="Keep road cells that fall on water tiles"
    )


@dataclass(frozen=True)
class GeneratedCityTemplate:
    """Generated city layout, not yet applied to the terrain underneath.

    Buildings are placed by a separate collaborator; generation here leaves
    the list empty.
    """

    center: Position
    roads: list[Road]
    buildings: list[Any] = field(default_factory=list)


def generate_city(
    config: CityGenerationConfig,
    rng: RandomSource,
    center: Position,
) -> GeneratedCityTemplate:
    """Generate a city's roads around center."""
    roads = generate_streets(config.street_generation_config, rng, center)
    logger.debug("city_generated", center=str(center), road_count=len(roads))
    return GeneratedCityTemplate(center=center, roads=roads)
