"""
Standalone SVG documents of a render result.

Edges are written with their path primitives, so arcs keep the exact
``A`` command instead of a sampled polyline.
"""
from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Union

from ..utils.style_config import COLORS


def to_svg(result, edge_width: float = 1.5, precision: int = 3) -> str:
    """
    Serialise a RenderResult as an SVG document.

    Args:
        result: The render result
        edge_width: Stroke width of the edges
        precision: Decimals written for coordinates

    Returns:
        str: The SVG markup.
    """
    disk = result.disk
    box = disk.bounding_box
    # the disk is centred on the canvas
    width = box.right + box.left
    height = box.bottom + box.top

    def fmt(v):
        return f"{v:.{precision}f}"

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{fmt(width)}" height="{fmt(height)}" '
        f'viewBox="0 0 {fmt(width)} {fmt(height)}">',
        '<g class="bottomlayer">',
    ]
    if result.projection == 'hyperbolic':
        lines.append(
            f'<circle cx="{fmt(disk.cx)}" cy="{fmt(disk.cy)}" r="{fmt(disk.radius)}" '
            f'fill="{COLORS["disk_fill"]}" stroke="{COLORS["disk_boundary"]}"/>'
        )
    else:
        lines.append(
            f'<rect x="{fmt(box.left)}" y="{fmt(box.top)}" width="{fmt(box.width)}" height="{fmt(box.height)}" '
            f'fill="{COLORS["canvas_fill"]}" stroke="{COLORS["disk_boundary"]}"/>'
        )
    lines.append('</g>')

    lines.append('<g class="toplayer">')
    for edge in result.edges:
        lines.append(
            f'<path class="link" d="{edge.path.to_svg(precision)}" fill="none" '
            f'stroke="{COLORS["edge"]}" stroke-width="{edge_width}"/>'
        )
    for node in result.nodes:
        c = node.circle
        stroke = COLORS["node_highlight"] if node.id == result.highlight else COLORS["node_stroke"]
        fill = escape(str(node.attrs.get('color', COLORS['node'])), quote=True)
        lines.append(
            f'<circle class="node" cx="{fmt(c.cx)}" cy="{fmt(c.cy)}" r="{fmt(c.r)}" '
            f'fill="{fill}" stroke="{stroke}" stroke-width="1">'
            f'<title>{escape(str(node.id))}</title></circle>'
        )
    lines.append('</g>')
    lines.append('</svg>')
    return "\n".join(lines)


def write_svg(result, path: Union[str, Path], **kwargs) -> Path:
    """Write ``to_svg(result)`` to a file and return its path."""
    path = Path(path)
    path.write_text(to_svg(result, **kwargs), encoding='utf-8')
    return path
