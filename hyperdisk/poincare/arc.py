"""
Turning geodesic arcs into drawable paths.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .primitives import Arc, Point, distance, polar_to_cart


@dataclass(frozen=True)
class PathPrimitive:
    """
    ``Move(start) Arc(radius, flags, end)``, or ``Move(start) Line(end)``
    when ``radius`` is None.

    The arc always takes the minor side, drawn with a large-arc flag of 0
    and a sweep flag of 0 (towards decreasing canvas angles).
    """
    start: Point
    end: Point
    radius: Optional[float] = None
    center: Optional[Point] = None
    large_arc: int = 0
    sweep: int = 0

    @property
    def is_line(self) -> bool:
        return self.radius is None

    def to_svg(self, precision: int = 3) -> str:
        """SVG path data for this primitive."""
        def fmt(v):
            return f"{v:.{precision}f}"

        if self.is_line:
            return " ".join(["M", fmt(self.start.x), fmt(self.start.y),
                             "L", fmt(self.end.x), fmt(self.end.y)])
        return " ".join([
            "M", fmt(self.start.x), fmt(self.start.y),
            "A", fmt(self.radius), fmt(self.radius), "0", str(self.large_arc), str(self.sweep),
            fmt(self.end.x), fmt(self.end.y),
        ])

    def sample(self, num_points: int = 64) -> np.ndarray:
        """
        Points along the drawn curve, shape (num_points, 2).

        Plotly shapes have no elliptical arc command, so edges are drawn as
        polylines through these points.
        """
        if self.is_line:
            t = np.linspace(0.0, 1.0, num_points)
            return np.column_stack((
                self.start.x + t * (self.end.x - self.start.x),
                self.start.y + t * (self.end.y - self.start.y),
            ))
        a0 = math.atan2(self.start.y - self.center.y, self.start.x - self.center.x)
        a1 = math.atan2(self.end.y - self.center.y, self.end.x - self.center.x)
        # sweep flag 0: angles decrease from start to end, by at most pi
        delta = (a0 - a1) % (2 * math.pi)
        theta = a0 - np.linspace(0.0, delta, num_points)
        return np.column_stack((
            self.center.x + self.radius * np.cos(theta),
            self.center.y + self.radius * np.sin(theta),
        ))


def arc_path(arc: Arc) -> PathPrimitive:
    """
    Drawable primitive for an arc built by ``poincare_geodesic``.

    The drawing order comes from the normalised angles. When the angular
    span reaches pi the endpoints are swapped, otherwise a fixed sweep flag
    would draw the long way around. The path then starts and ends exactly
    at the arc's own endpoints.
    """
    if arc.is_straight:
        return PathPrimitive(start=arc.p1, end=arc.p2)

    start_angle = min(arc.start_angle, arc.end_angle)
    end_angle = max(arc.start_angle, arc.end_angle)

    start = polar_to_cart(arc.radius, end_angle, arc.center)
    end = polar_to_cart(arc.radius, start_angle, arc.center)

    if end_angle - start_angle >= math.pi:
        start = polar_to_cart(arc.radius, start_angle, arc.center)
        end = polar_to_cart(arc.radius, end_angle, arc.center)

    # rebuilt endpoints drift on huge radii, keep the exact ones in their order
    if distance(start, arc.p1) + distance(end, arc.p2) <= distance(start, arc.p2) + distance(end, arc.p1):
        start, end = arc.p1, arc.p2
    else:
        start, end = arc.p2, arc.p1

    return PathPrimitive(start=start, end=end, radius=arc.radius, center=arc.center)


def sample_arc(arc: Arc, num_points: int = 64) -> np.ndarray:
    """Polyline points of the geodesic ``arc``."""
    return arc_path(arc).sample(num_points)
