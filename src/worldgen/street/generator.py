"""Recursive road network growth."""

import math

import structlog

from ..exceptions import GenerationInfeasibleError
from ..random_source import RandomSource
from ..types import Position, Range
from .config import StreetGenerationConfig
from .road import Road, RoadNetwork

logger = structlog.get_logger()

FULL_TURN = Range(start=0.0, end=2 * math.pi)


def generate_streets(
    config: StreetGenerationConfig,
    rng: RandomSource,
    center: Position | None = None,
) -> list[Road]:
    """Generate one city's road network.

    Whole networks are grown and checked against config.total_road_count.
    A rejected network is discarded and regrown from scratch.

    Args:
        config: Street generation configuration.
        rng: Random source, advanced by every attempt.
        center: Anchor of the main road. Defaults to
            config.main_road_center_position.

    Returns:
        Every road of the accepted network, flattened.

    Raises:
        GenerationInfeasibleError: If no network is accepted within
            config.max_attempts attempts.
    """
    if center is None:
        center = config.main_road_center_position

    for attempt in range(1, config.max_attempts + 1):
        network = grow_network(config, rng, center)
        count = len(network)
        if config.total_road_count is None or config.total_road_count.contains(count):
            logger.debug(
                "streets_generated",
                center=str(center),
                road_count=count,
                attempts=attempt,
            )
            return network.roads()
        logger.debug(
            "streets_rejected",
            center=str(center),
            road_count=count,
            accepted=str(config.total_road_count),
            attempt=attempt,
        )

    logger.warning(
        "streets_infeasible",
        center=str(center),
        accepted=str(config.total_road_count),
        attempts=config.max_attempts,
    )
    raise GenerationInfeasibleError(
        f"No road network with {config.total_road_count} roads after "
        f"{config.max_attempts} attempts",
        attempts=config.max_attempts,
    )


def grow_network(
    config: StreetGenerationConfig,
    rng: RandomSource,
    center: Position,
) -> RoadNetwork:
    """Grow a single road tree without checking its size."""
    network = RoadNetwork()
    anchor_ratio = rng.random()
    angle = 0.0 if config.main_road_horizontal else rng.random_range(FULL_TURN)
    length = rng.random_range(config.road_length)
    main_road = network.add_main_road(center, anchor_ratio, angle, length)

    steps = rng.random_range_integer(config.propagation_steps)
    leaves = [main_road]
    for _ in range(steps):
        new_leaves: list[Road] = []
        for leaf in leaves:
            for _ in range(rng.random_range_integer(config.branch_count)):
                new_leaves.append(_add_branch(network, leaf, config, rng))
        if not new_leaves:
            break
        leaves = new_leaves

    return network


def _add_branch(
    network: RoadNetwork,
    parent: Road,
    config: StreetGenerationConfig,
    rng: RandomSource,
) -> Road:
    """Branch off parent at a random point, roughly perpendicular to it."""
    start = parent.point_at(rng.random())
    side = 1 if rng.with_probability(0.5) else -1
    deviation = rng.random_range(
        Range(start=-config.branch_angle_deviation, end=config.branch_angle_deviation)
    )
    angle = (parent.angle + side * math.pi / 2 + deviation) % (2 * math.pi)
    length = rng.random_range(config.road_length)
    return network.add_branch(parent, start, angle, length)
