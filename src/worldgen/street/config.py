"""Street generation configuration."""

import math

from pydantic import BaseModel, Field, model_validator

from ..types import Position, Range


class StreetGenerationConfig(BaseModel, frozen=True):
    """Parameters of one city's road network."""

    road_length: Range = Field(
        default_factory=lambda: Range(start=2, end=12),
        description="Length of every road in tiles",
    )
    propagation_steps: Range = Field(
        default_factory=lambda: Range(start=3, end=4),
        description="Rounds of branching after the main road",
    )
    branch_count: Range = Field(
        default_factory=lambda: Range(start=0, end=2),
        description="Branches spawned by each leaf road per round",
    )
    branch_angle_deviation: float = Field(
        default=math.pi / 12,
        ge=0,
        description="Max deviation in radians from a perpendicular branch",
    )
    main_road_horizontal: bool = Field(
        default=False, description="Lay the main road along the x axis"
    )
    main_road_center_position: Position = Field(
        default_factory=lambda: Position(x=0, y=0),
        description="Default anchor of the main road",
    )
    total_road_count: Range | None = Field(
        default=None, description="Accepted road count; None accepts any network"
    )
    max_attempts: int = Field(
        default=100, ge=1, description="Networks tried before giving up"
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "StreetGenerationConfig":
        if self.road_length.start < 0:
            raise ValueError(f"road_length must not be negative, got {self.road_length}")
        for name in ("propagation_steps", "branch_count"):
            value_range: Range = getattr(self, name)
            if value_range.start < 0:
                raise ValueError(f"{name} must not be negative, got {value_range}")
            if math.floor(value_range.end) < math.ceil(value_range.start):
                raise ValueError(f"{name} {value_range} contains no integer")
        return self
