"""
Tunable constants for the hyperbolic rendering kernel.

The defaults were picked by eye on graphs of a few hundred nodes drawn on a
canvas of roughly 1000 x 1000 pixels. Modules read them through a
``KernelConfig`` instance so a render pass can override any of them.
"""
from dataclasses import dataclass, fields, replace as _replace
import math

# ---------------------------------------------------------------
# PROJECTION
# ---------------------------------------------------------------

PROJECTION_SCALE = 0.005          # layout units -> tangent plane units
BOUNDARY_EPSILON = 1e-9           # keeps radii strictly inside the unit disk


# ---------------------------------------------------------------
# NODE MARKERS (hyperbolic radii)
# ---------------------------------------------------------------

NODE_RADIUS = 0.05
HIGHLIGHT_RADIUS = 0.2
EUCLIDEAN_NODE_RADIUS = 5.0       # pixels, euclidean projection only


# ---------------------------------------------------------------
# NUMERICS
# ---------------------------------------------------------------

NORMALIZATION_THRESHOLD = 0.001   # |b| above which a line is divided by b
COLLINEAR_TOLERANCE = 1e-9        # relative cross product for diameters
PARALLEL_TOLERANCE = 1e-12        # relative determinant for intersections
ARC_SAMPLES = 64                  # polyline points per edge


@dataclass(frozen=True)
class KernelConfig:
    """
    Named parameters of the kernel.

    Attributes:
        projection_scale: Factor applied to layout offsets before the
            inverse Lambert mapping. Larger values push nodes to the rim.
        node_radius: Hyperbolic radius of an ordinary node marker.
        highlight_radius: Hyperbolic radius of a highlighted node marker.
        euclidean_node_radius: Canvas radius of markers in euclidean mode.
        normalization_threshold: Lines whose ``b`` coefficient is larger
            than this (in magnitude) are rescaled so that ``b == 1``.
        boundary_epsilon: Euclidean radii are clamped to ``1 - epsilon``
            before ``atanh`` and after ``tanh``.
        collinear_tolerance: Relative tolerance under which two points are
            considered to lie on a diameter.
        parallel_tolerance: Relative tolerance under which two lines are
            considered parallel.
        arc_samples: Number of points used when an arc is drawn as a
            polyline.
    """
    projection_scale: float = PROJECTION_SCALE
    node_radius: float = NODE_RADIUS
    highlight_radius: float = HIGHLIGHT_RADIUS
    euclidean_node_radius: float = EUCLIDEAN_NODE_RADIUS
    normalization_threshold: float = NORMALIZATION_THRESHOLD
    boundary_epsilon: float = BOUNDARY_EPSILON
    collinear_tolerance: float = COLLINEAR_TOLERANCE
    parallel_tolerance: float = PARALLEL_TOLERANCE
    arc_samples: int = ARC_SAMPLES

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{f.name} must be a finite non-negative number, got {value!r}")
        if self.projection_scale == 0:
            raise ValueError("projection_scale must be positive")
        if not self.boundary_epsilon < 1:
            raise ValueError("boundary_epsilon must be smaller than 1")
        if self.arc_samples < 2:
            raise ValueError("arc_samples must be at least 2")

    def replace(self, **changes) -> "KernelConfig":
        """Return a copy with some parameters changed."""
        return _replace(self, **changes)

    @property
    def max_disk_radius(self) -> float:
        return 1.0 - self.boundary_epsilon


DEFAULT_CONFIG = KernelConfig()
