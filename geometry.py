import operator

import numpy as np

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    x: int
    y: int

    def __post_init__(self):
        # numpy integers would silently wrap in the cross product, floats are rejected
        object.__setattr__(self, 'x', operator.index(self.x))
        object.__setattr__(self, 'y', operator.index(self.y))

    def __repr__(self):
        return f'Point({self.x}, {self.y})'


Segment = tuple[Point, Point]


def ordering_key(p: Point) -> tuple[int, int]:
    """
    Left-to-right, then top-to-bottom.
    """
    return p.x, p.y


def cross(o: Point, a: Point, b: Point) -> int:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def side_determinant(a: Point, b: Point, p: Point) -> int:
    """
    Doubled signed area of triangle (a, b, p).
    Negative values mean p lies outside of the directed boundary a -> b.
    """
    return cross(a, b, p)


def furthest_point(a: Point, b: Point, points: list[Point]) -> Point:
    """
    Point with the largest distance to line ab. The first one wins ties.
    """
    if not points:
        raise ValueError('furthest_point() requires at least one point')

    furthest = points[0]
    max_area = -1
    for p in points:
        area = abs(side_determinant(a, b, p))
        if area > max_area:
            max_area = area
            furthest = p
    return furthest


def points_outside(begin: Point, end: Point, points: list[Point]) -> list[Point]:
    """
    Points strictly outside of the directed boundary begin -> end, sorted by x, y.
    Boundary endpoints and points on the line are dropped.
    """
    outside = [
        p for p in points
        if p != begin and p != end and side_determinant(begin, end, p) < 0
    ]
    return sorted(outside, key=ordering_key)


def partition(p: Point, q: Point, c: Point, points: list[Point]) -> tuple[list[Point], list[Point]]:
    """
    Split points outside of boundary pq by apex c.

    Returns the points outside of pc and the points outside of cq.
    Everything inside triangle pcq (or on its sides) can never be a hull vertex
    and does not appear in either subset.
    """
    return points_outside(p, c, points), points_outside(c, q, points)


def convex_hull_andrew(points: list[Point]) -> list[Point]:
    """
    Andrew's monotone chain algorithm for convex hull.
    Collinear boundary points are not included. Time complexity: O(n*log(n)).
    """
    points = sorted(set(points), key=ordering_key)
    if len(points) <= 2:
        return points

    lower = []  # lower hull
    for p in points:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper = []  # upper hull
    for p in reversed(points):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]


def sort_hull_points(points: list[Point], center: tuple[float, float] | None = None) -> list[Point]:
    """
    Sort hull points by polar angle around center.
    Vertex mean is used if no center is given.
    """
    if len(points) <= 1:
        return list(points)

    if center is None:
        cx = sum(p.x for p in points) / len(points)
        cy = sum(p.y for p in points) / len(points)
    else:
        cx, cy = center

    def polar_angle(p: Point):
        return np.arctan2(p.y - cy, p.x - cx)

    return sorted(points, key=polar_angle)
