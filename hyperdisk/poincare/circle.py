"""
Hyperbolic circles drawn as Euclidean circles.

A circle of hyperbolic radius ``r`` around a point at hyperbolic distance
``cr`` from the origin spans the hyperbolic distances ``cr - r`` to
``cr + r`` along its ray. Mapping both ends into the disk gives the
Euclidean diameter of the circle on that ray, which is all a node marker
needs.
"""
from __future__ import annotations

import math

from ..config import DEFAULT_CONFIG, KernelConfig
from .disk import PoincareDisk
from .primitives import Circle, Point, ensure_finite


def hyperbolic_to_euclidean_radius(d: float) -> float:
    """Distance from the origin in the disk of a point at hyperbolic distance d."""
    return math.tanh(d / 2)


def euclidean_to_hyperbolic_radius(r: float, eps: float = DEFAULT_CONFIG.boundary_epsilon) -> float:
    """
    Hyperbolic distance from the origin of a point at Euclidean radius r.

    r is clamped to ``[0, 1 - eps]``; points on or outside the boundary
    would otherwise be infinitely far away.
    """
    r = min(max(r, 0.0), 1.0 - eps)
    return 2 * math.atanh(r)


def poincare_circle(center: Point, r: float, disk: PoincareDisk,
                    config: KernelConfig = DEFAULT_CONFIG) -> Circle:
    """
    Circle of hyperbolic radius r around a disk-relative centre.

    Args:
        center: Hyperbolic centre, in disk-relative coordinates
        r: Hyperbolic radius of the circle
        disk: The disk the circle is drawn in
        config: Kernel parameters (boundary clamping)

    Returns:
        Circle: Canvas-space circle, with its disk-relative Euclidean centre
        and the canvas position of the hyperbolic centre.
    """
    if not r >= 0:
        raise ValueError(f"Hyperbolic radius must be non-negative, got {r}")

    cr = euclidean_to_hyperbolic_radius(center.norm(), config.boundary_epsilon)

    de_near = hyperbolic_to_euclidean_radius(cr - r)
    de_far = hyperbolic_to_euclidean_radius(cr + r)
    er = (de_far - de_near) / 2
    ecr = (de_far + de_near) / 2

    theta = math.atan2(center.y, center.x)
    e_center = Point(ecr * math.cos(theta), ecr * math.sin(theta))
    canvas = disk.disk_to_canvas(e_center)
    ensure_finite("poincare circle", canvas.x, canvas.y, er)

    return Circle(
        cx=canvas.x,
        cy=canvas.y,
        r=er * disk.radius,
        center=e_center,
        hyperbolic_center=disk.disk_to_canvas(center),
    )
