import argparse
import logging
import time

from pathlib import Path

from config import CONFIG_PATH, QuickHullConfig
from geometry import Point
from hull_io import read_points, write_hull_points
from point_generation import generate_points, make_rng
from quickhull_stepper import QuickHullStepper

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Step-by-step Quickhull convex hull")
    parser.add_argument("--config", default=CONFIG_PATH, type=Path, help="YAML settings file")
    parser.add_argument("--input", type=Path, help="point file to use instead of random points")
    parser.add_argument("--count", type=int, help="number of random points")
    parser.add_argument("--seed", type=int, help="random seed, 0 for unseeded")
    parser.add_argument("--output", type=Path, help="where to write the hull points")
    parser.add_argument("--animate", action="store_true", help="show the hull as it forms")
    parser.add_argument("--step-time", type=int, help="delay between animated steps, ms")
    parser.add_argument("--screenshot", type=Path, help="where to save screenshots")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="logging verbosity")
    return parser.parse_args(argv)


def load_config(args) -> QuickHullConfig:
    config = QuickHullConfig.from_yaml(args.config)
    overrides = {
        "point_count": args.count,
        "seed": args.seed,
        "output_path": args.output,
        "step_time_ms": args.step_time,
        "screenshot_path": args.screenshot,
        "log_level": args.log_level,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, str(value) if isinstance(value, Path) else value)
    return config


def save_hull(hull: list[Point], path: str) -> bool:
    try:
        write_hull_points(hull, path)
    except OSError as e:
        logger.error("Unable to create output file %s: %s", path, e)
        return False
    return True


def main(argv=None) -> int:
    args = parse_args(argv)
    config = load_config(args)
    log_level = str(config.log_level).upper()
    logging.basicConfig(
        level=log_level if log_level in LOG_LEVELS else "INFO",
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if log_level not in LOG_LEVELS:
        logger.error("Unknown log level %r, expected one of %s", config.log_level, ", ".join(LOG_LEVELS))
        return 1

    rng = make_rng(config)
    try:
        if args.input is not None:
            points = read_points(args.input)
        else:
            points = generate_points(config, rng)
        stepper = QuickHullStepper(points)
    except (OSError, ValueError) as e:
        # InsufficientPoints is a ValueError too
        logger.error("Unable to load points: %s", e)
        return 1

    if args.animate:
        from visualization import HullAnimation

        saved = []
        animation = HullAnimation(
            stepper, config, rng=rng,
            on_finished=lambda hull: saved.append(save_hull(hull, config.output_path)),
        )
        animation.run()
        if not saved:
            logger.warning("Window closed before the hull was complete, %s not written", config.output_path)
            return 1
        return 0 if all(saved) else 1

    start_time = time.time()
    steps = stepper.run()
    execution_time = time.time() - start_time

    hull = stepper.final_hull()
    logger.info(
        "%d points, %d hull points, %d steps in %.4f sec",
        len(points), len(hull), steps, execution_time,
    )
    return 0 if save_hull(hull, config.output_path) else 1


if __name__ == "__main__":
    raise SystemExit(main())
