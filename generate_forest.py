#!/usr/bin/env python3
"""Generate a forest level and write it as JSON."""

import sys

import structlog

from py_forestgen.config import settings
from py_forestgen.core.exceptions import ForestGenError
from py_forestgen.core.forest_config import ForestConfig
from py_forestgen.core.forest_generator import generate_forest
from py_forestgen.export import save_forest_json
from py_forestgen.logging_config import configure_logging

logger = structlog.get_logger()


def main():
    """Main function."""
    import argparse

    parser = argparse.ArgumentParser(description="Generate a forest level")
    parser.add_argument("--width", type=int, default=64, help="Forest width in cells")
    parser.add_argument("--height", type=int, default=64, help="Forest height in cells")
    parser.add_argument("--border-size", type=int, default=1, help="Tree border thickness")
    parser.add_argument("--checkpoint-offset", type=int, default=2, help="Start point distance from its edge")
    parser.add_argument("--seed", default="forest", help="Seed string")
    parser.add_argument("--random-seed", action="store_true", help="Use a time-derived seed")
    parser.add_argument("--fill-percent", type=int, default=45, help="Initial tree percentage")
    parser.add_argument("--patches", type=int, default=5, help="Number of clearings")
    parser.add_argument("--patch-radius", type=int, default=3, help="Clearing radius")
    parser.add_argument("--smoothening", type=int, default=5, help="Automaton iterations")
    parser.add_argument("--max-deviation", type=float, default=5.0, help="Largest sideways path offset")
    parser.add_argument("--segments", type=int, default=4, help="Curve recursion depth")
    parser.add_argument("--markers", action="store_true", help="Write start/end markers into the cells")
    parser.add_argument("--output", default="forest.json", help="Output JSON path")
    args = parser.parse_args()

    configure_logging(settings.log_level, "console")

    config = ForestConfig(
        width=args.width,
        height=args.height,
        border_size=args.border_size,
        checkpoint_offset=args.checkpoint_offset,
        seed=args.seed,
        use_random_seed=args.random_seed,
        fill_percent=args.fill_percent,
        num_patches=args.patches,
        patch_radius=args.patch_radius,
        smoothening_iterations=args.smoothening,
        max_deviation=args.max_deviation,
        segments=args.segments,
    )

    try:
        forest = generate_forest(config, attempts_per_patch=settings.patch_attempts_per_patch)
    except ForestGenError as e:
        logger.error("Forest generation failed", error=str(e))
        return 1

    path = save_forest_json(forest, args.output, include_markers=args.markers)
    print(f"Forest written to {path} (seed {forest.seed})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
