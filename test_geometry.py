import pytest
import numpy as np

from geometry import (
    Point,
    convex_hull_andrew,
    furthest_point,
    ordering_key,
    partition,
    points_outside,
    side_determinant,
    sort_hull_points,
)


def test_point_is_immutable_and_hashable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5
    assert {p, Point(1, 2)} == {Point(1, 2)}


def test_point_coerces_numpy_integers():
    p = Point(np.int64(3), np.int32(4))
    assert type(p.x) is int and type(p.y) is int
    assert p == Point(3, 4)


@pytest.mark.parametrize("x, y", [(1.5, 2), (1.9, -0.7), (np.float64(3.0), 4), ("1", 2)])
def test_point_rejects_non_integers(x, y):
    with pytest.raises(TypeError):
        Point(x, y)


def test_ordering_key_sorts_by_x_then_y():
    points = [Point(2, 0), Point(0, 5), Point(0, 1), Point(1, 1)]
    assert sorted(points, key=ordering_key) == [Point(0, 1), Point(0, 5), Point(1, 1), Point(2, 0)]
    assert sorted(points) == sorted(points, key=ordering_key)


@pytest.mark.parametrize("p, sign", [
    (Point(5, -5), -1),
    (Point(5, 5), 1),
    (Point(20, 0), 0),
])
def test_side_determinant_sign(p, sign):
    a, b = Point(0, 0), Point(10, 0)
    assert np.sign(side_determinant(a, b, p)) == sign


def test_side_determinant_does_not_overflow():
    big = 10**17
    a, b, p = Point(-big, -big), Point(big, -big), Point(0, big)
    assert side_determinant(a, b, p) == 2 * big * 2 * big


def test_furthest_point_first_wins_ties():
    a, b = Point(0, 0), Point(10, 0)
    points = [Point(1, -1), Point(2, -3), Point(8, -3), Point(5, -2)]
    assert furthest_point(a, b, points) == Point(2, -3)


def test_furthest_point_uses_absolute_distance():
    a, b = Point(0, 0), Point(10, 0)
    assert furthest_point(a, b, [Point(1, -1), Point(4, 7)]) == Point(4, 7)


def test_furthest_point_empty():
    with pytest.raises(ValueError):
        furthest_point(Point(0, 0), Point(1, 0), [])


def test_points_outside_skips_endpoints_and_boundary():
    a, b = Point(0, 0), Point(10, 0)
    points = [Point(7, -2), a, b, Point(5, 0), Point(3, 3), Point(2, -1), Point(2, -1)]
    assert points_outside(a, b, points) == [Point(2, -1), Point(2, -1), Point(7, -2)]


def test_partition_subsets_are_disjoint():
    p, q = Point(0, 0), Point(10, 0)
    c = Point(5, -10)
    points = [
        Point(1, -3), Point(2, -8), Point(9, -3), Point(8, -8),
        Point(5, -2), c, Point(5, -10),
    ]
    left, right = partition(p, q, c, points)

    assert left == [Point(1, -3), Point(2, -8)]
    assert right == [Point(8, -8), Point(9, -3)]
    assert not set(left) & set(right)
    for subset in (left, right):
        assert p not in subset and q not in subset and c not in subset


def test_convex_hull_andrew_drops_collinear_points():
    points = [Point(0, 0), Point(5, 0), Point(10, 0), Point(10, 10), Point(0, 10), Point(5, 5)]
    assert set(convex_hull_andrew(points)) == {Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)}


def test_sort_hull_points_counter_clockwise():
    square = [Point(10, 10), Point(0, 0), Point(0, 10), Point(10, 0)]
    assert sort_hull_points(square, center=(5, 5)) == [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
    assert sort_hull_points(square) == sort_hull_points(square, center=(5, 5))


def test_sort_hull_points_center_on_edge():
    triangle = [Point(0, 0), Point(10, 0), Point(5, 5)]
    assert sort_hull_points(triangle, center=(5.0, 0.0)) == [Point(10, 0), Point(5, 5), Point(0, 0)]
