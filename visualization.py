import logging

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from config import QuickHullConfig
from geometry import Point
from point_generation import generate_points, make_rng
from quickhull_stepper import QuickHullStepper

logger = logging.getLogger(__name__)


def plot_points(points: list[Point], ax: Axes | None = None, **kwargs):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, **kwargs)
    else:
        ax.scatter(x, y, **kwargs)


def plot_hull(hull: list[Point], ax: Axes, color='k', closing_color='b', linewidth=2):
    """
    Draw an ordered hull as a closed polygon, the closing edge in its own color.
    """
    if len(hull) < 2:
        return
    for i in range(len(hull) - 1):
        ax.plot([hull[i].x, hull[i + 1].x], [hull[i].y, hull[i + 1].y], c=color, linewidth=linewidth)
    ax.plot([hull[-1].x, hull[0].x], [hull[-1].y, hull[0].y], c=closing_color, linewidth=linewidth)


def plot_step(stepper: QuickHullStepper, ax: Axes, config: QuickHullConfig | None = None):
    """
    Draw the current state of a stepper: every input point, the partial hull,
    the boundary being processed, its extreme points and the furthest point.
    """
    ax.clear()
    plot_hull(stepper.ordered_hull(), ax)
    plot_points(stepper.points, ax, c='#3f3f3f', s=6, zorder=2)

    if stepper.segment is not None and not stepper.finished:
        a, b = stepper.segment
        ax.plot([a.x, b.x], [a.y, b.y], c='orange', linestyle='--', linewidth=1)

    if stepper.extremes is not None:
        plot_points(list(stepper.extremes), ax, c='r', s=36, zorder=3)
    if stepper.furthest is not None:
        plot_points([stepper.furthest], ax, c='g', s=36, zorder=4)

    if config is not None:
        ax.set_xlim(0, config.window_width)
        ax.set_ylim(0, config.window_height)
    ax.set_title(f"Quickhull: step {stepper.step_count}, {len(stepper.ordered_hull())} hull points")
    ax.set_aspect('equal')


class HullAnimation:
    """
    Shows the hull as it forms, one stepper step per frame.

    Keys: 'n' generates new points and starts over, 'w' writes a screenshot.
    """
    def __init__(self, stepper: QuickHullStepper, config: QuickHullConfig, fig: Figure | None = None,
                 rng=None, on_finished=None):
        self.stepper = stepper
        self.config = config
        self.on_finished = on_finished
        self.rng = rng if rng is not None else make_rng(config)
        self.running = not stepper.finished

        self.fig = fig if fig is not None else plt.figure(figsize=(12.8, 7.2))
        self.ax = self.fig.add_subplot(111)
        self.fig.canvas.mpl_connect('key_press_event', self.on_key)
        plot_step(self.stepper, self.ax, self.config)

    def on_key(self, event):
        if event.key == 'n':
            self.stepper.reset(generate_points(self.config, self.rng))
            self.running = True
            plot_step(self.stepper, self.ax, self.config)
        elif event.key == 'w':
            self.save_screenshot()

    def save_screenshot(self) -> bool:
        try:
            self.fig.savefig(self.config.screenshot_path)
        except OSError as e:
            logger.error('Unable to save screenshot to %s: %s', self.config.screenshot_path, e)
            return False
        logger.info('Screenshot saved to %s', self.config.screenshot_path)
        return True

    def advance(self) -> bool:
        """
        One animation frame. Returns False when the hull is complete.
        """
        if not self.running:
            return False
        self.running = self.stepper.step()
        plot_step(self.stepper, self.ax, self.config)
        if not self.running and self.on_finished is not None:
            self.on_finished(self.stepper.final_hull())
        return self.running

    def run(self):
        plt.show(block=False)
        while plt.fignum_exists(self.fig.number):
            if self.running:
                self.advance()
                self.fig.canvas.draw_idle()
                plt.pause(self.config.step_time_ms / 1000)
            else:
                plt.pause(0.03)
