"""
Shapes drawn by clicking on the disk.

Clicks are kept as canvas points in a JSON-able dict so they can live in a
``dcc.Store``::

    {"circles": [{"x": .., "y": .., "r": ..}],
     "lines": [{"p": [x, y], "q": [x, y]}],
     "pending": [x, y] or None}

``r`` is a hyperbolic radius. The geometry is rebuilt from these inputs on
every render, so the drawing follows the disk when the canvas changes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_CONFIG, KernelConfig
from .poincare.circle import poincare_circle
from .poincare.disk import PoincareDisk
from .poincare.geodesic import poincare_geodesic
from .poincare.primitives import Arc, Circle, Point

DRAW_MODES = ('circle', 'line')


@dataclass(frozen=True)
class Sketch:
    circles: tuple = ()            # Circle per drawn circle
    arcs: tuple = ()               # Arc per finished line
    lengths: tuple = ()            # hyperbolic length of each arc
    pending: Optional[Point] = None
    preview: Optional[Arc] = None  # pending vertex to the cursor

    def __len__(self):
        return len(self.circles) + len(self.arcs)


def empty_sketch() -> dict:
    return {"circles": [], "lines": [], "pending": None}


def add_click(data: Optional[dict], point: Point, mode: str, radius: float,
              disk: PoincareDisk) -> dict:
    """
    Record a click.

    In circle mode the click places a circle of hyperbolic radius ``radius``.
    In line mode the first click sets a pending vertex and the second one
    finishes a geodesic from it. Clicks outside the disk are ignored.

    Returns:
        dict: A new sketch dict; ``data`` is left untouched.
    """
    if mode not in DRAW_MODES:
        raise ValueError(f"Draw mode must be one of {DRAW_MODES}, got {mode!r}")
    data = data or empty_sketch()
    if not PoincareDisk.contains(disk.canvas_to_disk(point)):
        return data

    new = {
        "circles": list(data.get("circles", [])),
        "lines": list(data.get("lines", [])),
        "pending": data.get("pending"),
    }
    if mode == 'circle':
        new["circles"].append({"x": point.x, "y": point.y, "r": radius})
    elif new["pending"] is None:
        new["pending"] = [point.x, point.y]
    else:
        new["lines"].append({"p": list(new["pending"]), "q": [point.x, point.y]})
        new["pending"] = None
    return new


def build_sketch(data: Optional[dict], disk: PoincareDisk, config: KernelConfig = DEFAULT_CONFIG,
                 cursor: Optional[Point] = None) -> Sketch:
    """
    Geometry of a sketch dict on ``disk``.

    Args:
        data: Sketch dict as produced by ``add_click``
        disk: The disk the clicks were made on
        config: Kernel parameters
        cursor: Canvas position of the mouse, used for the preview line
            while a vertex is pending

    Returns:
        Sketch: Drawn circles, finished geodesics and the preview.
    """
    if not data:
        return Sketch()

    circles = tuple(
        poincare_circle(disk.canvas_to_disk(Point(c["x"], c["y"])), c["r"], disk, config)
        for c in data.get("circles", [])
    )

    arcs, lengths = [], []
    for line in data.get("lines", []):
        p, q = Point(*line["p"]), Point(*line["q"])
        arcs.append(poincare_geodesic(p, q, disk, config))
        lengths.append(PoincareDisk.hyperbolic_distance(
            disk.canvas_to_disk(p), disk.canvas_to_disk(q), config.boundary_epsilon))

    pending = data.get("pending")
    pending = None if pending is None else Point(*pending)
    preview = None
    if pending is not None and cursor is not None and cursor != pending \
            and PoincareDisk.contains(disk.canvas_to_disk(cursor)):
        preview = poincare_geodesic(pending, cursor, disk, config)

    return Sketch(circles, tuple(arcs), tuple(lengths), pending, preview)


def describe_circle(circle: Circle, disk: PoincareDisk) -> str:
    """Hover text with both centres of a drawn circle, in disk coordinates."""
    h = disk.canvas_to_disk(circle.hyperbolic_center)
    return (f"hyperbolic centre ({h.x:.3f}, {h.y:.3f})<br>"
            f"euclidean centre ({circle.center.x:.3f}, {circle.center.y:.3f})")
