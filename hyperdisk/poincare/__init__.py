"""
Poincaré disk module: the hyperbolic geometry kernel.
"""
from .primitives import (
    Arc,
    Circle,
    Line,
    Point,
    cart_to_polar,
    circle_inversion,
    distance,
    intersect,
    line_through,
    midpoint,
    perpendicular_through,
    polar_to_cart,
)
from .disk import BoundingBox, PoincareDisk
from .circle import euclidean_to_hyperbolic_radius, hyperbolic_to_euclidean_radius, poincare_circle
from .projection import ProjectedNode, layout_center, project_points, to_poincare
from .geodesic import is_diameter, poincare_geodesic
from .arc import PathPrimitive, arc_path, sample_arc

__all__ = [
    'Arc', 'Circle', 'Line', 'Point',
    'cart_to_polar', 'circle_inversion', 'distance', 'intersect', 'line_through',
    'midpoint', 'perpendicular_through', 'polar_to_cart',
    'BoundingBox', 'PoincareDisk',
    'euclidean_to_hyperbolic_radius', 'hyperbolic_to_euclidean_radius', 'poincare_circle',
    'ProjectedNode', 'layout_center', 'project_points', 'to_poincare',
    'is_diameter', 'poincare_geodesic',
    'PathPrimitive', 'arc_path', 'sample_arc',
]
