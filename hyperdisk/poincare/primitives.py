"""
Planar value types and the Euclidean constructions the disk model is built on.

Every function here is pure: it takes points and lines and returns new ones.
Lines are kept in the standard form ``a*x + b*y + c = 0``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional

from ..config import NORMALIZATION_THRESHOLD, PARALLEL_TOLERANCE
from ..errors import DegenerateGeometryError, NumericalError


@dataclass(frozen=True)
class Point:
    """A planar coordinate. Callers track whether it is in canvas or disk space."""
    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, s: float) -> "Point":
        return Point(self.x * s, self.y * s)

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Line:
    """
    Line ``a*x + b*y + c = 0``.

    ``normalized`` tells whether the coefficients were divided by ``b``
    (so ``b == 1``). Near-vertical lines are left as computed.
    """
    a: float
    b: float
    c: float
    normalized: bool = False


@dataclass(frozen=True)
class Circle:
    """
    A node marker.

    Attributes:
        cx, cy: Canvas-space centre of the rendered Euclidean circle.
        r: Canvas-space radius, never negative.
        center: Euclidean centre of the circle in disk-relative coordinates.
        hyperbolic_center: Canvas position of the hyperbolic centre, which
            sits closer to the boundary than ``(cx, cy)``.
    """
    cx: float
    cy: float
    r: float
    center: Point
    hyperbolic_center: Point

    def __post_init__(self):
        if self.r < 0:
            raise ValueError(f"Circle radius must be non-negative, got {self.r}")

    @property
    def canvas_center(self) -> Point:
        return Point(self.cx, self.cy)


@dataclass(frozen=True)
class Arc:
    """
    Circular arc from ``p1`` to ``p2`` around ``center``.

    A geodesic through the centre of the disk is a straight segment; it is
    stored with ``center=None`` and an infinite radius.
    """
    p1: Point
    p2: Point
    center: Optional[Point]
    radius: float
    start_angle: float
    end_angle: float

    @classmethod
    def straight(cls, p1: Point, p2: Point) -> "Arc":
        return cls(p1, p2, None, math.inf, 0.0, 0.0)

    @property
    def is_straight(self) -> bool:
        return self.center is None

    def translated(self, dx: float, dy: float) -> "Arc":
        """Return the same arc shifted by ``(dx, dy)``. Angles and radius are unchanged."""
        shift = Point(dx, dy)
        center = None if self.center is None else self.center + shift
        return Arc(self.p1 + shift, self.p2 + shift, center, self.radius,
                   self.start_angle, self.end_angle)


def ensure_finite(what: str, *values: float) -> None:
    """Raise NumericalError if any of ``values`` is NaN or infinite."""
    for v in values:
        if not math.isfinite(v):
            raise NumericalError(f"{what} is not finite: {values}")


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between p and q."""
    return math.hypot(p.x - q.x, p.y - q.y)


def midpoint(p: Point, q: Point) -> Point:
    return Point((p.x + q.x) / 2, (p.y + q.y) / 2)


def line_through(p: Point, q: Point, threshold: float = NORMALIZATION_THRESHOLD) -> Line:
    """
    The line through p and q.

    Args:
        p: First point
        q: Second point
        threshold: The coefficients are divided by ``b`` only when
            ``|b| > threshold``; steeper lines are returned unnormalized.

    Returns:
        Line: Coefficients of ``a*x + b*y + c = 0``.
    """
    a = p.y - q.y
    b = q.x - p.x
    c = p.x * q.y - q.x * p.y
    if abs(b) > threshold:
        return Line(a / b, 1.0, c / b, normalized=True)
    return Line(a, b, c, normalized=False)


def perpendicular_through(line: Line, v: Point) -> Line:
    """The line perpendicular to ``line`` that contains v."""
    return Line(line.b, -line.a, -v.x * line.b + v.y * line.a)


def intersect(l1: Line, l2: Line, tolerance: float = PARALLEL_TOLERANCE) -> Point:
    """
    Intersection point of two lines.

    Raises:
        DegenerateGeometryError: If the lines are parallel, i.e. the
            determinant is negligible relative to the coefficient sizes.
    """
    det = l1.b * l2.a - l1.a * l2.b
    scale = math.hypot(l1.a, l1.b) * math.hypot(l2.a, l2.b)
    if scale == 0 or abs(det) <= tolerance * scale:
        raise DegenerateGeometryError(f"lines {l1} and {l2} are parallel")
    return Point(
        (l1.c * l2.b - l1.b * l2.c) / det,
        (l1.a * l2.c - l1.c * l2.a) / det,
    )


def polar_to_cart(r: float, theta: float, center: Point = ORIGIN) -> Point:
    return Point(center.x + r * math.cos(theta), center.y + r * math.sin(theta))


def cart_to_polar(p: Point) -> tuple[float, float]:
    """Return ``(r, theta)`` of p around the origin."""
    return math.hypot(p.x, p.y), math.atan2(p.y, p.x)


def circle_inversion(p: Point, center: Point, radius: float) -> Point:
    """
    Invert p in the circle of the given centre and radius.

    The image lies on the ray from the centre through p, at distance
    ``radius**2 / |p - center|``.
    See https://en.wikipedia.org/wiki/Inversive_geometry#Inversion_in_a_circle

    Raises:
        DegenerateGeometryError: If p is the centre itself.
    """
    u = p - center
    d2 = u.x * u.x + u.y * u.y
    if d2 == 0:
        raise DegenerateGeometryError("cannot invert the centre of the circle")
    k = radius * radius / d2
    return Point(center.x + k * u.x, center.y + k * u.y)
