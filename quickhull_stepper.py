import enum
import logging
import weakref

from dataclasses import dataclass, field
from geometry import (
    Point,
    Segment,
    furthest_point,
    ordering_key,
    partition,
    points_outside,
    sort_hull_points,
)

logger = logging.getLogger(__name__)


class QuickHullError(Exception):
    pass


class InsufficientPoints(QuickHullError, ValueError):
    pass


class ComputationIncomplete(QuickHullError, RuntimeError):
    pass


class NotInitialized(QuickHullError, RuntimeError):
    pass


class StepProgress(enum.Enum):
    FIRST_ITERATION = enum.auto()   # only used by the root
    RECURSE_ONE = enum.auto()
    RECURSE_TWO = enum.auto()
    DONE = enum.auto()


@dataclass(eq=False)
class RecursionNode:
    """
    One level of the emulated Quickhull recursion.

    A node owns both of its children. The parent is kept as a weak reference,
    so dropping the children of a finished node releases the whole subtree.
    """
    points: list[Point]
    segment: Segment
    progress: StepProgress = StepProgress.RECURSE_ONE
    first_child: 'RecursionNode | None' = None
    second_child: 'RecursionNode | None' = None
    _parent_ref: weakref.ref | None = field(default=None, repr=False)

    @property
    def parent(self) -> 'RecursionNode | None':
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def attach_children(self, apex: Point):
        """
        Split points by apex and create child nodes for boundaries (A, apex) and (apex, B).
        The right child (apex, B) is visited first.
        """
        p, q = self.segment
        left_points, right_points = partition(p, q, apex, self.points)
        self.set_children(
            first=RecursionNode(right_points, (apex, q)),
            second=RecursionNode(left_points, (p, apex)),
        )

    def set_children(self, first: 'RecursionNode', second: 'RecursionNode'):
        first._parent_ref = weakref.ref(self)
        second._parent_ref = weakref.ref(self)
        self.first_child = first
        self.second_child = second

    def release_children(self):
        self.first_child = None
        self.second_child = None

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth


class QuickHullStepper:
    """
    Quickhull driven one step at a time.

    Every call to step() performs at most one furthest point search and one
    partition, then returns. Between the calls the recursion tree, the cursor
    and the accumulated hull can be inspected freely.
    """
    def __init__(self, points: list[Point] | None = None):
        self._points: list[Point] = []
        self._hull: list[Point] = []
        self._root: RecursionNode | None = None
        self._cursor: RecursionNode | None = None
        self._center: tuple[float, float] | None = None
        self._segment: Segment | None = None
        self._furthest: Point | None = None
        self._extremes: tuple[Point, Point] | None = None
        self._finished: bool = False
        self._step_count: int = 0

        if points is not None:
            self.reset(points)

    def reset(self, points: list[Point]):
        """
        Discard any previous computation and bootstrap a new one.

        The leftmost and rightmost points form the first boundary. Both are
        hull vertices, and the points strictly on each side of their line
        become the two initial subproblems.
        """
        if len(points) < 2:
            raise InsufficientPoints(f'At least 2 points are required, got {len(points)}')

        base_points = sorted(points, key=ordering_key)
        min_point, max_point = base_points[0], base_points[-1]

        # (min, max) with apex max gives outside(max -> min) and outside(min -> max)
        first_points = points_outside(max_point, min_point, base_points)
        second_points = points_outside(min_point, max_point, base_points)

        root = RecursionNode(
            sorted(first_points + second_points, key=ordering_key),
            (min_point, max_point),
            progress=StepProgress.FIRST_ITERATION,
        )
        root.set_children(
            first=RecursionNode(first_points, (max_point, min_point)),
            second=RecursionNode(second_points, (min_point, max_point)),
        )

        self._points = base_points
        self._hull = [min_point, max_point]
        self._root = root
        self._cursor = root
        self._center = ((min_point.x + max_point.x) / 2, (min_point.y + max_point.y) / 2)
        self._segment = root.segment
        self._furthest = None
        self._extremes = (min_point, max_point)
        self._finished = False
        self._step_count = 0

        logger.info(
            'Reset with %d points, initial boundary %s -> %s',
            len(base_points), min_point, max_point,
        )

    def step(self) -> bool:
        """
        Advance the computation by one unit of work.
        Returns False once the whole tree is resolved, and on every call after that.
        """
        if self._cursor is None:
            raise NotInitialized('reset() must be called before step()')
        if self._finished:
            return False

        node = self._cursor

        # nothing outside of this boundary, so it is a hull edge
        if not node.points:
            node.progress = StepProgress.DONE

        while node.progress == StepProgress.DONE:
            node.release_children()
            parent = node.parent
            if parent is None:
                self._cursor = node
                self._finished = True
                logger.info(
                    'Hull complete after %d steps: %d vertices',
                    self._step_count, len(self._unique_hull()),
                )
                return False
            node = parent

        a, b = node.segment
        self._segment = node.segment
        if node.progress == StepProgress.FIRST_ITERATION:
            self._extremes = (self._points[0], self._points[-1])
        else:
            self._extremes = (node.points[0], node.points[-1])

        # recomputed on the RECURSE_TWO visit as well
        furthest = furthest_point(a, b, node.points)
        self._furthest = furthest

        if node.progress == StepProgress.RECURSE_ONE:
            node.attach_children(furthest)
            self._hull.append(furthest)
            logger.debug('New hull vertex %s on boundary %s -> %s', furthest, a, b)

        if node.progress in (StepProgress.FIRST_ITERATION, StepProgress.RECURSE_ONE):
            node.progress = StepProgress.RECURSE_TWO
            self._cursor = node.first_child
        elif node.progress == StepProgress.RECURSE_TWO:
            node.progress = StepProgress.DONE
            self._cursor = node.second_child

        self._step_count += 1
        return True

    def run(self) -> int:
        """
        Step until the hull is complete. Returns the number of productive steps.
        """
        start = self._step_count
        while self.step():
            pass
        return self._step_count - start

    def _unique_hull(self) -> list[Point]:
        return list(dict.fromkeys(self._hull))

    def ordered_hull(self) -> list[Point]:
        """
        Vertices found so far, sorted counter-clockwise around the midpoint
        of the initial leftmost and rightmost points.
        """
        if self._center is None:
            return []
        return sort_hull_points(self._unique_hull(), center=self._center)

    def final_hull(self) -> list[Point]:
        if not self._finished:
            raise ComputationIncomplete('Hull is not complete, keep calling step()')
        return self.ordered_hull()

    @property
    def points(self) -> list[Point]:
        return list(self._points)

    @property
    def hull(self) -> list[Point]:
        return list(self._hull)

    @property
    def segment(self) -> Segment | None:
        return self._segment

    @property
    def furthest(self) -> Point | None:
        return self._furthest

    @property
    def extremes(self) -> tuple[Point, Point] | None:
        return self._extremes

    @property
    def center(self) -> tuple[float, float] | None:
        return self._center

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def cursor(self) -> RecursionNode | None:
        return self._cursor

    @property
    def current_depth(self) -> int:
        if self._cursor is None:
            return 0
        return self._cursor.depth
