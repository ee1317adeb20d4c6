"""
hyperdisk: graphs drawn in the Poincaré disk model of the hyperbolic plane.
"""
from .config import DEFAULT_CONFIG, KernelConfig
from .errors import (
    DegenerateGeometryError,
    GraphFormatError,
    HyperdiskError,
    InvalidDiskError,
    NumericalError,
)
from .poincare import (
    Arc,
    Circle,
    Line,
    PathPrimitive,
    PoincareDisk,
    Point,
    arc_path,
    poincare_circle,
    poincare_geodesic,
    to_poincare,
)
from .graph import Edge, Graph, Node, erdos_renyi, read_dot
from .render import RenderPass, RenderResult

__version__ = "0.1.0"

__all__ = [
    'DEFAULT_CONFIG', 'KernelConfig',
    'DegenerateGeometryError', 'GraphFormatError', 'HyperdiskError', 'InvalidDiskError', 'NumericalError',
    'Arc', 'Circle', 'Line', 'PathPrimitive', 'PoincareDisk', 'Point',
    'arc_path', 'poincare_circle', 'poincare_geodesic', 'to_poincare',
    'Edge', 'Graph', 'Node', 'erdos_renyi', 'read_dot',
    'RenderPass', 'RenderResult',
]
