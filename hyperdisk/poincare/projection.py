"""
Projection of Euclidean layout positions into the Poincaré disk.

Layout offsets from a reference centre are read as tangent vectors at the
origin of the hyperbolic plane: the inverse Lambert azimuthal mapping turns
their length into a hyperbolic radius, which ``tanh(h/2)`` then places in
the disk. Radii grow logarithmically, so no layout point ever reaches the
boundary.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from ..config import DEFAULT_CONFIG, KernelConfig
from .circle import poincare_circle
from .disk import PoincareDisk
from .primitives import Circle, Point, ensure_finite


@dataclass(frozen=True)
class ProjectedNode:
    """Result of projecting one layout point."""
    center: Point            # canvas space
    circle: Circle
    poincare_radius: float   # distance from the origin in the unit disk


def layout_center(points: Iterable[Point]) -> Point:
    """Mean position of the layout points."""
    xy = np.array([(p.x, p.y) for p in points], dtype=float)
    if xy.size == 0:
        raise ValueError("Cannot take the centre of an empty layout")
    cx, cy = xy.mean(axis=0)
    return Point(float(cx), float(cy))


def poincare_radius(layout_r: float, config: KernelConfig = DEFAULT_CONFIG) -> float:
    """Disk radius of a point whose scaled layout offset has length ``layout_r``."""
    # inverse Lambert projection
    h_r = math.acosh(0.5 * layout_r * layout_r + 1)
    return min(math.tanh(h_r / 2), config.max_disk_radius)


def to_poincare(point: Point, center_x: float, center_y: float, disk: PoincareDisk,
                config: KernelConfig = DEFAULT_CONFIG,
                node_radius: Optional[float] = None) -> ProjectedNode:
    """
    Project a layout point into the Poincaré disk.

    Only meaningful on original layout coordinates: feeding an already
    projected point back in maps it a second time.

    Args:
        point: Layout position
        center_x: x coordinate of the layout centre (e.g. the mean of all points)
        center_y: y coordinate of the layout centre
        disk: The disk to project into
        config: Kernel parameters
        node_radius: Hyperbolic radius of the marker circle, defaults to
            ``config.node_radius``

    Returns:
        ProjectedNode: Canvas centre, marker circle and disk radius.
    """
    x = config.projection_scale * (point.x - center_x)
    y = config.projection_scale * (point.y - center_y)

    circle_r = math.hypot(x, y)
    theta = math.atan2(x, y)
    p_r = poincare_radius(circle_r, config)

    center = Point(
        disk.cx + disk.radius * p_r * math.sin(theta),
        disk.cy + disk.radius * p_r * math.cos(theta),
    )
    ensure_finite("projected centre", center.x, center.y)

    if node_radius is None:
        node_radius = config.node_radius
    circle = poincare_circle(disk.canvas_to_disk(center), node_radius, disk, config)
    return ProjectedNode(center=center, circle=circle, poincare_radius=p_r)


def project_points(xy: np.ndarray, center: Point, disk: PoincareDisk,
                   config: KernelConfig = DEFAULT_CONFIG) -> np.ndarray:
    """
    Vectorised ``to_poincare`` for the centres only.

    Args:
        xy: Layout positions, shape (n, 2)
        center: Layout centre
        disk: The disk to project into
        config: Kernel parameters

    Returns:
        np.ndarray: Canvas positions, shape (n, 2)
    """
    xy = np.asarray(xy, dtype=float).reshape(-1, 2)
    x = config.projection_scale * (xy[:, 0] - center.x)
    y = config.projection_scale * (xy[:, 1] - center.y)

    circle_r = np.hypot(x, y)
    theta = np.arctan2(x, y)
    h_r = np.arccosh(0.5 * circle_r**2 + 1)
    p_r = np.minimum(np.tanh(h_r / 2), config.max_disk_radius)

    out = np.column_stack((
        disk.cx + disk.radius * p_r * np.sin(theta),
        disk.cy + disk.radius * p_r * np.cos(theta),
    ))
    if not np.isfinite(out).all():
        ensure_finite("projected centres", *out[~np.isfinite(out)])
    return out
