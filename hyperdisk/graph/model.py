"""
Nodes, edges and graphs.

A graph only carries layout positions. Everything the kernel derives from
them (disk centres, marker circles, geodesic arcs) lives in the render
result, never on these records.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Mapping

import numpy as np

from ..errors import GraphFormatError
from ..poincare.primitives import Point


@dataclass(frozen=True)
class Node:
    id: Hashable
    x: float
    y: float
    attrs: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def color(self):
        return self.attrs.get('color')


@dataclass(frozen=True)
class Edge:
    source: Hashable
    target: Hashable
    attrs: Mapping[str, Any] = field(default_factory=dict, compare=False)


@dataclass
class Graph:
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def __post_init__(self):
        self._index = {}
        for node in self.nodes:
            if node.id in self._index:
                raise GraphFormatError(f"Duplicate node id {node.id!r}")
            self._index[node.id] = node
        for edge in self.edges:
            for end in (edge.source, edge.target):
                if end not in self._index:
                    raise GraphFormatError(f"Edge {edge.source!r} -> {edge.target!r} references unknown node {end!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Graph":
        """
        Build a graph from ``{"nodes": [{"id", "x", "y", ...}], "edges": [{"source", "target", ...}]}``.

        An edge endpoint naming a node id refers to that node. Other integer
        endpoints are indices into the node list. Extra keys are kept as
        attributes.
        """
        try:
            raw_nodes = list(data['nodes'])
            raw_edges = list(data.get('edges', []))
        except (TypeError, KeyError) as exc:
            raise GraphFormatError(f"Graph data needs a 'nodes' list: {exc}") from exc

        nodes = []
        for i, raw in enumerate(raw_nodes):
            try:
                node_id = raw.get('id', i)
                x, y = float(raw['x']), float(raw['y'])
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                raise GraphFormatError(f"Node #{i} needs numeric 'x' and 'y': {raw!r}") from exc
            attrs = {k: v for k, v in raw.items() if k not in ('id', 'x', 'y')}
            nodes.append(Node(node_id, x, y, attrs))

        ids = {n.id for n in nodes}

        def resolve(end):
            if end in ids:
                return end
            if isinstance(end, int) and not isinstance(end, bool):
                if not 0 <= end < len(nodes):
                    raise GraphFormatError(f"Edge endpoint index {end} out of range")
                return nodes[end].id
            return end

        edges = []
        for i, raw in enumerate(raw_edges):
            try:
                source, target = raw['source'], raw['target']
            except (KeyError, TypeError) as exc:
                raise GraphFormatError(f"Edge #{i} needs 'source' and 'target': {raw!r}") from exc
            attrs = {k: v for k, v in raw.items() if k not in ('source', 'target')}
            edges.append(Edge(resolve(source), resolve(target), attrs))

        return cls(nodes, edges)

    def to_dict(self) -> dict:
        return {
            'nodes': [{'id': n.id, 'x': n.x, 'y': n.y, **n.attrs} for n in self.nodes],
            'edges': [{'source': e.source, 'target': e.target, **e.attrs} for e in self.edges],
        }

    def node(self, node_id: Hashable) -> Node:
        try:
            return self._index[node_id]
        except KeyError:
            raise KeyError(f"No node with id {node_id!r}") from None

    def positions(self) -> np.ndarray:
        """Layout positions, shape (n, 2)."""
        return np.array([(n.x, n.y) for n in self.nodes], dtype=float).reshape(-1, 2)

    def __len__(self):
        return len(self.nodes)
