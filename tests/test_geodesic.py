"""Tests for geodesic construction."""

import math

import pytest

from hyperdisk.config import KernelConfig
from hyperdisk.errors import NumericalError
from hyperdisk.poincare import Point, distance, is_diameter, poincare_geodesic


def assert_orthogonal(arc, disk):
    """The geodesic circle meets the disk boundary at right angles."""
    d2 = (arc.center.x - disk.cx) ** 2 + (arc.center.y - disk.cy) ** 2
    assert d2 == pytest.approx(disk.radius**2 + arc.radius**2)


class TestDiameter:
    def test_collinear(self):
        assert is_diameter(Point(1, 0), Point(-3, 0), Point(0, 0), 1e-9)

    def test_point_at_centre(self):
        assert is_diameter(Point(0, 0), Point(2, 5), Point(0, 0), 1e-9)

    def test_not_collinear(self):
        assert not is_diameter(Point(1, 0), Point(0, 1), Point(0, 0), 1e-9)


class TestPoincareGeodesic:
    def test_arc(self, disk):
        p, q = Point(150, 100), Point(100, 50)
        arc = poincare_geodesic(p, q, disk)
        assert not arc.is_straight
        assert arc.center.x == pytest.approx(225)
        assert arc.center.y == pytest.approx(-25)
        assert arc.radius == pytest.approx(100 * math.sqrt(2.125))
        assert arc.p1 == p
        assert arc.p2 == q
        assert_orthogonal(arc, disk)

    def test_angles(self, disk):
        arc = poincare_geodesic(Point(150, 100), Point(100, 50), disk)
        assert arc.start_angle == pytest.approx(math.atan2(75, -125))
        assert arc.end_angle == pytest.approx(math.atan2(125, -75))

    @pytest.mark.parametrize("a,b", [
        (Point(0.5, 0), Point(0, 0.5)),
        (Point(-0.8, 0.1), Point(0.2, 0.7)),
        (Point(0.95, -0.2), Point(0.9, 0.3)),
        (Point(0.01, 0.02), Point(-0.03, 0.01)),
    ])
    def test_arc_passes_through_both_points(self, any_disk, a, b):
        p, q = any_disk.disk_to_canvas(a), any_disk.disk_to_canvas(b)
        arc = poincare_geodesic(p, q, any_disk)
        assert not arc.is_straight
        assert distance(arc.center, p) == pytest.approx(arc.radius)
        assert distance(arc.center, q) == pytest.approx(arc.radius)
        assert_orthogonal(arc, any_disk)

    def test_diameter(self, disk):
        arc = poincare_geodesic(Point(150, 100), Point(50, 100), disk)
        assert arc.is_straight
        assert arc.p1 == Point(150, 100)
        assert arc.p2 == Point(50, 100)

    def test_nearly_collinear_is_a_diameter(self, disk):
        arc = poincare_geodesic(Point(150, 100), Point(50, 100 + 1e-10), disk)
        assert arc.is_straight

    def test_endpoint_at_centre(self, offset_disk):
        arc = poincare_geodesic(offset_disk.center, Point(260, 90), offset_disk)
        assert arc.is_straight

    def test_diameter_of_offset_disk(self, offset_disk):
        p = offset_disk.disk_to_canvas(Point(0.3, 0.3))
        q = offset_disk.disk_to_canvas(Point(-0.6, -0.6))
        assert poincare_geodesic(p, q, offset_disk).is_straight

    def test_tolerance_is_configurable(self, disk):
        config = KernelConfig(collinear_tolerance=0.1)
        arc = poincare_geodesic(Point(150, 100), Point(50, 102), disk, config)
        assert arc.is_straight

    def test_nan(self, disk):
        with pytest.raises(NumericalError):
            poincare_geodesic(Point(math.nan, 100), Point(100, 50), disk)
