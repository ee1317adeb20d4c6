"""
Core Poincaré disk model: where the unit disk sits on the canvas.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ..errors import InvalidDiskError
from .primitives import Point


@dataclass(frozen=True)
class BoundingBox:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


@dataclass(frozen=True)
class PoincareDisk:
    """
    The canvas region occupied by the unit disk.

    The bounding box is the square the disk is inscribed in, so that
    ``canvas_to_disk`` and ``disk_to_canvas`` are exact inverses. A disk is
    built once per render pass and rebuilt when the canvas is resized.

    Attributes:
        bounding_box: Square around the disk, in canvas coordinates.
        center: Centre of the disk, in canvas coordinates.
        radius: Radius of the disk in canvas units.
    """
    bounding_box: BoundingBox
    center: Point
    radius: float

    def __post_init__(self):
        box = self.bounding_box
        values = (box.left, box.top, box.right, box.bottom, self.center.x, self.center.y, self.radius)
        if not all(math.isfinite(v) for v in values):
            raise InvalidDiskError(f"Disk has non-finite geometry: {self}")
        if box.width <= 0 or box.height <= 0:
            raise InvalidDiskError(f"Bounding box must have a positive width and height, got {box}")
        if self.radius <= 0:
            raise InvalidDiskError(f"Disk radius must be positive, got {self.radius}")

    @classmethod
    def from_bounding_box(cls, left: float, top: float, right: float, bottom: float) -> "PoincareDisk":
        """
        Inscribe the disk in a canvas rectangle.

        The radius is ``min(width, height) / 2`` and the disk is centred in
        the rectangle; the stored bounding box is the square around it.
        """
        width, height = right - left, bottom - top
        if not (width > 0 and height > 0):
            raise InvalidDiskError(
                f"Bounding box must have a positive width and height, got {(left, top, right, bottom)}"
            )
        radius = min(width / 2, height / 2)
        cx, cy = left + width / 2, top + height / 2
        box = BoundingBox(cx - radius, cy - radius, cx + radius, cy + radius)
        return cls(box, Point(cx, cy), radius)

    @classmethod
    def from_canvas(cls, width: float, height: float, margin: float = 10.0) -> "PoincareDisk":
        """Disk filling a ``width`` x ``height`` canvas minus a margin on every side."""
        return cls.from_bounding_box(margin, margin, width - margin, height - margin)

    @property
    def cx(self) -> float:
        return self.center.x

    @property
    def cy(self) -> float:
        return self.center.y

    # ------------------------------------------------------------
    # Coordinate systems
    # ------------------------------------------------------------
    def canvas_to_disk(self, p: Point) -> Point:
        """
        Map a canvas point to disk-relative coordinates in ``[-1, 1]^2``.

        The y axis is flipped so positive y points up. Points are not checked
        against the unit disk; rounding can put them marginally outside.
        """
        box = self.bounding_box
        x = ((p.x - box.left) / box.width - 0.5) * 2
        y = ((p.y - box.top) / box.height - 0.5) * -2
        return Point(x, y)

    def disk_to_canvas(self, p: Point) -> Point:
        """Inverse of ``canvas_to_disk``."""
        return Point(p.x * self.radius + self.cx, -p.y * self.radius + self.cy)

    def to_local(self, p: Point) -> Point:
        """Canvas point relative to the top-left corner of the bounding box."""
        return Point(p.x - self.bounding_box.left, p.y - self.bounding_box.top)

    @property
    def local_center(self) -> Point:
        return self.to_local(self.center)

    # ------------------------------------------------------------
    # Disk-relative geometry
    # ------------------------------------------------------------
    @staticmethod
    def contains(p: Point) -> bool:
        """Check if a disk-relative point is within the open unit disk."""
        return p.x**2 + p.y**2 < 1

    @staticmethod
    def hyperbolic_distance(p1: Point, p2: Point, eps: float = 1e-9) -> float:
        """
        Hyperbolic distance between two disk-relative points.

        Args:
            p1: First point (x, y)
            p2: Second point (x, y)
            eps: Points are pulled inside the radius ``1 - eps``.

        Returns:
            float: Hyperbolic distance between the points
        """
        z1 = _clamp_to_disk(complex(p1.x, p1.y), eps)
        z2 = _clamp_to_disk(complex(p2.x, p2.y), eps)

        numerator = 2 * abs(z1 - z2)**2
        denominator = (1 - abs(z1)**2) * (1 - abs(z2)**2)

        return math.acosh(1 + numerator / denominator)

    @staticmethod
    def boundary_points(num_points: int = 100) -> tuple[np.ndarray, np.ndarray]:
        """Disk-relative points on the disk boundary."""
        theta = np.linspace(0, 2*np.pi, num_points)
        return np.cos(theta), np.sin(theta)

    @staticmethod
    def grid_points(num_rings: int = 4, points_per_ring: int = 100) -> list[tuple[np.ndarray, np.ndarray]]:
        """
        Disk-relative rings at equal hyperbolic spacing, for grid lines.

        Ring ``i`` is at hyperbolic distance ``i`` from the origin, so the
        rings crowd together towards the boundary.
        """
        grid_points = []
        theta = np.linspace(0, 2*np.pi, points_per_ring)
        for d in range(1, num_rings + 1):
            r = np.tanh(d / 2)
            grid_points.append((r * np.cos(theta), r * np.sin(theta)))
        return grid_points


def _clamp_to_disk(z: complex, eps: float) -> complex:
    limit = 1.0 - eps
    if abs(z) > limit:
        return z / abs(z) * limit
    return z
