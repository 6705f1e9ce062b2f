"""Command-line interface for world generation."""

import argparse
import logging
import sys
import time

import structlog


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for world generation."""
    parser = argparse.ArgumentParser(
        description="Generate a procedural world with terrain, cities and roads"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default="default",
        help="Bundled config name or path to a TOML file (default: default)",
    )
    parser.add_argument(
        "--seed", type=str, default=None, help="Override the configured seed"
    )
    parser.add_argument("--width", type=int, default=None, help="Override map width")
    parser.add_argument("--height", type=int, default=None, help="Override map height")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

    # Import here to avoid slow startup for --help
    from pydantic import ValidationError

    from .config import find_config, load_config
    from .exceptions import WorldGenError
    from .terrain import Surface
    from .world import generate_world

    try:
        config = load_config(find_config(args.config))
    except (FileNotFoundError, ValidationError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 2

    overrides: dict = {}
    if args.seed is not None:
        overrides["seed"] = int(args.seed) if args.seed.isdigit() else args.seed
    if args.width is not None or args.height is not None:
        size = config.terrain.map_size.model_copy(
            update={
                k: v
                for k, v in (("width", args.width), ("height", args.height))
                if v is not None
            }
        )
        overrides["terrain"] = config.terrain.model_copy(update={"map_size": size})
    if overrides:
        config = config.model_copy(update=overrides)

    size = config.terrain.map_size
    print(f"Generating {size} world with seed {config.seed!r}")
    print()

    start_time = time.time()
    try:
        world = generate_world(config)
    except WorldGenError as e:
        print(f"Generation failed: {e}", file=sys.stderr)
        return 1
    gen_time = time.time() - start_time

    tilemap = world.terrain.tilemap
    print()
    print(f"Generation complete in {gen_time:.1f}s")
    for surface in Surface:
        count = tilemap.count(lambda tile, s=surface: tile.surface == s)
        print(f"  {surface.value}: {count:,}")
    print(f"  city points: {len(world.terrain.city_points)}")
    print(f"  cities: {len(world.cities)}")
    print(f"  roads: {world.road_count()}")
    print(f"  road tiles: {world.road_map.count(bool):,}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
