"""Deterministic procedural world generation."""

from .city import CityGenerationConfig, GeneratedCityTemplate, generate_city
from .distribution import distribute, grid_shape
from .exceptions import (
    ClassificationError,
    GenerationInfeasibleError,
    InvalidMatrixError,
    OutOfBoundsError,
    WorldGenError,
)
from .fraction import calculate_ranges, classify, validate_weights
from .matrix import Matrix
from .noise import NoiseConfig, NoiseSampler, layer_position
from .random_source import RandomSource, normalize_seed
from .types import Position, Range, Rectangle, Shape
from .world import (
    GeneratedCity,
    GeneratedWorld,
    WorldGenerationConfig,
    generate_world,
    merge_road_mask,
)

__all__ = [
    # Types
    "Position",
    "Range",
    "Rectangle",
    "Shape",
    "Matrix",
    # Primitives
    "NoiseConfig",
    "NoiseSampler",
    "RandomSource",
    "calculate_ranges",
    "classify",
    "distribute",
    "grid_shape",
    "layer_position",
    "normalize_seed",
    "validate_weights",
    # Cities and world
    "CityGenerationConfig",
    "GeneratedCity",
    "GeneratedCityTemplate",
    "GeneratedWorld",
    "WorldGenerationConfig",
    "generate_city",
    "generate_world",
    "merge_road_mask",
    # Exceptions
    "WorldGenError",
    "OutOfBoundsError",
    "InvalidMatrixError",
    "ClassificationError",
    "GenerationInfeasibleError",
]
