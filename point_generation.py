import numpy as np

from config import QuickHullConfig
from geometry import Point


def make_rng(config: QuickHullConfig) -> np.random.Generator:
    seed = config.seed if config.seed else None
    return np.random.default_rng(seed)


def generate_points(config: QuickHullConfig, rng: np.random.Generator | None = None) -> list[Point]:
    """
    Uniformly distributed integer points inside the window, keeping the margin free.
    Pass the same rng again to get a new input from the same random sequence.
    """
    if rng is None:
        rng = make_rng(config)

    n = config.point_count
    xs = rng.integers(0, config.point_x_max, size=n) + config.window_margin
    ys = rng.integers(0, config.point_y_max, size=n) + config.window_margin
    return [Point(x, y) for x, y in zip(xs.tolist(), ys.tolist())]
