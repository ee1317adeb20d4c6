"""Tests for the Euclidean primitives."""

import math

import pytest

from hyperdisk.errors import DegenerateGeometryError
from hyperdisk.poincare.primitives import (
    Arc,
    Circle,
    Line,
    Point,
    cart_to_polar,
    circle_inversion,
    distance,
    intersect,
    line_through,
    midpoint,
    perpendicular_through,
    polar_to_cart,
)


def on_line(line, p, tol=1e-9):
    return abs(line.a * p.x + line.b * p.y + line.c) < tol


class TestBasics:
    def test_distance(self):
        assert distance(Point(0, 0), Point(3, 4)) == pytest.approx(5)

    def test_distance_symmetric(self):
        p, q = Point(1.5, -2), Point(-3, 7)
        assert distance(p, q) == distance(q, p)

    def test_midpoint(self):
        assert midpoint(Point(0, 0), Point(2, -4)) == Point(1, -2)

    def test_point_arithmetic(self):
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(1, 2) - Point(3, 4) == Point(-2, -2)
        assert Point(1, 2).scale(3) == Point(3, 6)
        assert tuple(Point(1, 2)) == (1, 2)

    def test_polar_roundtrip(self):
        p = Point(-1.2, 0.7)
        r, theta = cart_to_polar(p)
        back = polar_to_cart(r, theta)
        assert back.x == pytest.approx(p.x)
        assert back.y == pytest.approx(p.y)

    def test_polar_around_center(self):
        p = polar_to_cart(2, math.pi / 2, Point(1, 1))
        assert p.x == pytest.approx(1)
        assert p.y == pytest.approx(3)


class TestLines:
    def test_line_is_normalized_by_b(self):
        line = line_through(Point(0, 0), Point(2, 2))
        assert line.normalized
        assert line.b == 1
        assert line.a == pytest.approx(-1)
        assert line.c == pytest.approx(0)

    def test_near_vertical_line_is_left_unnormalized(self):
        line = line_through(Point(1, 0), Point(1.0005, 5))
        assert not line.normalized
        assert line.b == pytest.approx(0.0005)

    def test_threshold_is_configurable(self):
        line = line_through(Point(1, 0), Point(1.0005, 5), threshold=1e-6)
        assert line.normalized

    @pytest.mark.parametrize("p,q", [
        (Point(0, 1), Point(1, 1)),
        (Point(2, 0), Point(2, 1)),
        (Point(-3, 4), Point(5, -1)),
        (Point(0.25, 0.1), Point(0.2501, 9)),
    ])
    def test_line_contains_both_points(self, p, q):
        line = line_through(p, q)
        assert on_line(line, p)
        assert on_line(line, q)

    def test_perpendicular_contains_point(self):
        line = line_through(Point(-3, 4), Point(5, -1))
        v = Point(7, 2)
        perp = perpendicular_through(line, v)
        assert on_line(perp, v)
        # direction vectors (b, -a) are orthogonal
        assert line.b * perp.b + line.a * perp.a == pytest.approx(0)

    def test_perpendicular_of_x_axis(self):
        perp = perpendicular_through(Line(0, 1, 0, True), Point(3, 5))
        assert (perp.a, perp.b, perp.c) == (1, 0, -3)

    def test_intersect(self):
        horizontal = line_through(Point(0, 1), Point(1, 1))
        vertical = line_through(Point(2, 0), Point(2, 1))
        p = intersect(horizontal, vertical)
        assert p.x == pytest.approx(2)
        assert p.y == pytest.approx(1)

    def test_intersect_is_symmetric(self):
        l1 = line_through(Point(-3, 4), Point(5, -1))
        l2 = line_through(Point(0, 0), Point(1, 3))
        p, q = intersect(l1, l2), intersect(l2, l1)
        assert p.x == pytest.approx(q.x)
        assert p.y == pytest.approx(q.y)
        assert on_line(l1, p)
        assert on_line(l2, p)

    def test_parallel_lines_raise(self):
        l1 = line_through(Point(0, 0), Point(1, 1))
        l2 = line_through(Point(0, 1), Point(1, 2))
        with pytest.raises(DegenerateGeometryError):
            intersect(l1, l2)

    def test_identical_lines_raise(self):
        l1 = line_through(Point(0, 0), Point(1, 1))
        with pytest.raises(DegenerateGeometryError):
            intersect(l1, l1)


class TestCircleInversion:
    def test_inversion_in_unit_circle(self):
        p = circle_inversion(Point(2, 0), Point(0, 0), 1)
        assert p.x == pytest.approx(0.5)
        assert p.y == pytest.approx(0)

    def test_point_on_circle_is_fixed(self):
        p = Point(100 + 60, 100 + 80)
        q = circle_inversion(p, Point(100, 100), 100)
        assert q.x == pytest.approx(p.x)
        assert q.y == pytest.approx(p.y)

    @pytest.mark.parametrize("p", [Point(130, 90), Point(1, 1), Point(400, -20), Point(100.5, 100)])
    def test_inversion_is_an_involution(self, p):
        center = Point(100, 100)
        back = circle_inversion(circle_inversion(p, center, 100), center, 100)
        assert back.x == pytest.approx(p.x)
        assert back.y == pytest.approx(p.y)

    def test_inverted_point_stays_on_the_ray(self):
        center = Point(100, 100)
        p = Point(130, 140)
        q = circle_inversion(p, center, 100)
        u, v = p - center, q - center
        assert u.x * v.y - u.y * v.x == pytest.approx(0, abs=1e-9)
        assert u.norm() * v.norm() == pytest.approx(100**2)

    def test_center_raises(self):
        with pytest.raises(DegenerateGeometryError):
            circle_inversion(Point(5, 5), Point(5, 5), 3)


class TestValueTypes:
    def test_negative_circle_radius_rejected(self):
        with pytest.raises(ValueError):
            Circle(0, 0, -1, Point(0, 0), Point(0, 0))

    def test_straight_arc(self):
        arc = Arc.straight(Point(0, 0), Point(1, 1))
        assert arc.is_straight
        assert math.isinf(arc.radius)

    def test_translated_arc_keeps_shape(self):
        arc = Arc(Point(0, 1), Point(1, 0), Point(1, 1), 1.0, -math.pi / 2, math.pi)
        moved = arc.translated(10, -5)
        assert moved.center == Point(11, -4)
        assert moved.p1 == Point(10, -4)
        assert (moved.radius, moved.start_angle, moved.end_angle) == (arc.radius, arc.start_angle, arc.end_angle)
