"""
Rendering layer: plotly figures and SVG documents of render results.
"""
from .figure import GraphVisualization
from .svg import to_svg, write_svg

__all__ = ['GraphVisualization', 'to_svg', 'write_svg']
