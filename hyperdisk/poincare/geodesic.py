"""
Geodesics of the Poincaré disk.

The hyperbolic line through p and q is the circle through both points that
meets the disk boundary at right angles. Any circle through a point and its
inverse in the boundary is orthogonal to the boundary, so the centre of the
geodesic circle lies on the perpendicular bisector of p and its inverse, and
on that of q and its inverse. When p, q and the disk centre are collinear the
bisectors are parallel and the geodesic is a diameter.
"""
from __future__ import annotations

import logging
import math

from ..config import DEFAULT_CONFIG, KernelConfig
from ..errors import DegenerateGeometryError
from .disk import PoincareDisk
from .primitives import (
    Arc,
    Point,
    circle_inversion,
    distance,
    ensure_finite,
    intersect,
    line_through,
    midpoint,
    perpendicular_through,
)

logger = logging.getLogger(__name__)


def is_diameter(p: Point, q: Point, center: Point, tolerance: float) -> bool:
    """True if p, q and the centre lie on one line (or p or q is the centre)."""
    u = p - center
    v = q - center
    scale = u.norm() * v.norm()
    if scale == 0:
        return True
    return abs(u.x * v.y - u.y * v.x) <= tolerance * scale


def poincare_geodesic(p: Point, q: Point, disk: PoincareDisk,
                      config: KernelConfig = DEFAULT_CONFIG) -> Arc:
    """
    Hyperbolic geodesic between two canvas points inside the disk.

    The construction runs in the frame of the disk's bounding box and the
    arc is returned in canvas coordinates.

    Args:
        p: Start point, canvas space
        q: End point, canvas space
        disk: The disk both points lie in
        config: Kernel parameters (tolerances)

    Returns:
        Arc: The circle arc through p and q, or a straight arc when the
        geodesic is a diameter.
    """
    local_p = disk.to_local(p)
    local_q = disk.to_local(q)
    origin = disk.local_center

    if is_diameter(local_p, local_q, origin, config.collinear_tolerance):
        return Arc.straight(p, q)

    try:
        arc = _orthogonal_arc(local_p, local_q, origin, disk.radius, config)
    except DegenerateGeometryError as exc:
        logger.debug("Falling back to a straight geodesic between %s and %s: %s", p, q, exc)
        return Arc.straight(p, q)

    box = disk.bounding_box
    arc = arc.translated(box.left, box.top)
    # the caller's points, not their round trip through the local frame
    return Arc(p, q, arc.center, arc.radius, arc.start_angle, arc.end_angle)


def _orthogonal_arc(p: Point, q: Point, origin: Point, radius: float, config: KernelConfig) -> Arc:
    threshold = config.normalization_threshold

    pp = circle_inversion(p, origin, radius)
    qq = circle_inversion(q, origin, radius)
    m = perpendicular_through(line_through(p, pp, threshold), midpoint(p, pp))
    n = perpendicular_through(line_through(q, qq, threshold), midpoint(q, qq))
    c = intersect(m, n, config.parallel_tolerance)

    r = distance(p, c)
    start_angle = math.atan2(q.y - c.y, q.x - c.x)
    end_angle = math.atan2(p.y - c.y, p.x - c.x)
    ensure_finite("geodesic", c.x, c.y, r)
    return Arc(p, q, c, r, start_angle, end_angle)
