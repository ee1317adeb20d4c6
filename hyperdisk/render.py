"""
Render passes: turning a graph into drawable node circles and edge paths.

A ``RenderPass`` holds the disk and the kernel parameters of one canvas
size. ``render`` never touches the graph it is given; it returns a new
``RenderResult`` with one record per node and per edge.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Hashable, Optional

from .config import DEFAULT_CONFIG, KernelConfig
from .graph.model import Graph
from .poincare.arc import PathPrimitive, arc_path
from .poincare.disk import PoincareDisk
from .poincare.geodesic import poincare_geodesic
from .poincare.primitives import Arc, Circle, Point
from .poincare.projection import layout_center, to_poincare

logger = logging.getLogger(__name__)

PROJECTIONS = ('hyperbolic', 'euclidean')


@dataclass(frozen=True)
class RenderedNode:
    id: Hashable
    layout: Point       # position handed to the projection, pan included
    center: Point       # canvas space
    circle: Circle
    attrs: dict = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class RenderedEdge:
    source: Hashable
    target: Hashable
    arc: Optional[Arc]  # None in euclidean mode
    path: PathPrimitive
    attrs: dict = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class RenderResult:
    projection: str
    disk: PoincareDisk
    nodes: list
    edges: list
    highlight: Optional[Hashable] = None

    @property
    def straight_edges(self) -> int:
        return sum(1 for e in self.edges if e.path.is_line)

    def node(self, node_id: Hashable) -> RenderedNode:
        for n in self.nodes:
            if n.id == node_id:
                return n
        raise KeyError(f"No node with id {node_id!r}")


class RenderPass:
    """
    Renders graphs onto one canvas.

    Args:
        disk: Where the unit disk sits on the canvas
        config: Kernel parameters
        projection: 'hyperbolic' or 'euclidean'
    """

    def __init__(self, disk: PoincareDisk, config: KernelConfig = DEFAULT_CONFIG,
                 projection: str = 'hyperbolic'):
        if projection not in PROJECTIONS:
            raise ValueError(f"Projection must be one of {PROJECTIONS}, got {projection!r}")
        self.disk = disk
        self.config = config
        self.projection = projection

    @classmethod
    def for_canvas(cls, width: float, height: float, margin: float = 10.0, **kwargs) -> "RenderPass":
        return cls(PoincareDisk.from_canvas(width, height, margin), **kwargs)

    def render(self, graph: Graph, offset: tuple[float, float] = (0.0, 0.0),
               highlight: Optional[Hashable] = None) -> RenderResult:
        """
        Render a graph.

        Args:
            graph: Nodes with layout positions and the edges between them
            offset: Pan applied to every layout position before projecting.
                The layout centre stays that of the unshifted graph, so
                panning moves the focus of the hyperbolic view.
            highlight: Id of a node drawn with ``config.highlight_radius``

        Returns:
            RenderResult: Node circles and edge paths in canvas space.
        """
        if self.projection == 'hyperbolic':
            nodes = self._hyperbolic_nodes(graph, offset, highlight)
        else:
            nodes = self._euclidean_nodes(graph, offset, highlight)

        centers = {n.id: n.center for n in nodes}
        edges = []
        for edge in graph.edges:
            p, q = centers[edge.source], centers[edge.target]
            if self.projection == 'hyperbolic':
                arc = poincare_geodesic(p, q, self.disk, self.config)
                path = arc_path(arc)
            else:
                arc = None
                path = PathPrimitive(start=p, end=q)
            edges.append(RenderedEdge(edge.source, edge.target, arc, path, dict(edge.attrs)))

        if highlight is not None and highlight not in centers:
            highlight = None
        result = RenderResult(self.projection, self.disk, nodes, edges, highlight)
        logger.debug("Rendered %d nodes and %d edges (%s, %d straight)",
                     len(nodes), len(edges), self.projection, result.straight_edges)
        return result

    def _hyperbolic_nodes(self, graph, offset, highlight):
        if not graph.nodes:
            return []
        center = layout_center(n.position for n in graph.nodes)
        dx, dy = offset
        nodes = []
        for node in graph.nodes:
            layout = Point(node.x + dx, node.y + dy)
            radius = self.config.highlight_radius if node.id == highlight else self.config.node_radius
            projected = to_poincare(layout, center.x, center.y, self.disk, self.config, node_radius=radius)
            nodes.append(RenderedNode(node.id, layout, projected.center, projected.circle, dict(node.attrs)))
        return nodes

    def _euclidean_nodes(self, graph, offset, highlight):
        dx, dy = offset
        nodes = []
        for node in graph.nodes:
            layout = Point(node.x + dx, node.y + dy)
            r = self.config.euclidean_node_radius
            if node.id == highlight:
                r *= 2
            disk_point = self.disk.canvas_to_disk(layout)
            circle = Circle(layout.x, layout.y, r, center=disk_point, hyperbolic_center=layout)
            nodes.append(RenderedNode(node.id, layout, layout, circle, dict(node.attrs)))
        return nodes
