"""Coherent 2D noise sampling.

All terrain layers read the same OpenSimplex field. Layers are decorrelated
by sampling at positions shifted by whole multiples of the map size rather
than by keeping one generator per layer.
"""

import logging

from opensimplex import OpenSimplex
from pydantic import BaseModel, Field

from .types import Position, Range, Shape

logger = logging.getLogger(__name__)

# Offset multipliers into the shared noise field, per terrain layer
ALTITUDE_LAYER = 1
HUMIDITY_LAYER = 2
TEMPERATURE_LAYER = 3
FERTILITY_LAYER = 4


class NoiseConfig(BaseModel, frozen=True):
    """Sampling parameters for a single noise layer."""

    frequency: float = Field(gt=0, description="Noise frequency in cycles per tile")
    output_range: Range = Field(
        default_factory=lambda: Range(start=0.0, end=1.0),
        description="Range the [0, 1] noise value is rescaled into",
    )


def layer_position(position: Position, map_size: Shape, layer: int) -> Position:
    """Shift position into the region of the noise field reserved for layer."""
    return position + Position.from_shape(map_size).map(lambda c: c * layer)


class NoiseSampler:
    """Deterministic coherent noise keyed by seed."""

    def __init__(self, seed: int):
        self.seed = seed
        self._generator = OpenSimplex(seed=seed)
        logger.debug(f"Noise sampler initialised with seed {seed}")

    def sample(self, position: Position, config: NoiseConfig, map_size: Shape) -> float:
        """Sample noise at position.

        Args:
            position: Position in noise space (already layer-shifted).
            config: Layer noise configuration.
            map_size: Size of the generated map. Accepted so callers pass the
                same arguments for every layer; the field itself is unbounded.

        Returns:
            Noise value rescaled into config.output_range.
        """
        raw = self._generator.noise2(
            position.x * config.frequency, position.y * config.frequency
        )
        unit = min(1.0, max(0.0, (raw + 1.0) / 2.0))
        return config.output_range.map(unit)

    def sample_layer(
        self,
        position: Position,
        config: NoiseConfig,
        map_size: Shape,
        layer: int,
    ) -> float:
        """Sample noise for a terrain layer at a map position."""
        return self.sample(layer_position(position, map_size, layer), config, map_size)
