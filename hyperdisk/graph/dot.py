"""
Reading graphs from graphviz dot files.

Node statements become nodes and carry their attributes; edge statements
become edges. Positions come from a ``pos="x,y"`` attribute or from numeric
``x``/``y`` attributes. Nodes without one are placed by networkx's spring
layout, which stands in for the force-directed layout of the viewer.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import networkx as nx
import pydot

from ..errors import GraphFormatError
from .model import Edge, Graph, Node

logger = logging.getLogger(__name__)


def read_dot(text: str, width: float = 1000, height: float = 1000,
             seed: Optional[int] = None) -> Graph:
    """
    Parse a dot-format string.

    Args:
        text: The dot source.
        width: Width of the box unpositioned nodes are laid out in.
        height: Height of that box.
        seed: Seed of the spring layout.

    Returns:
        Graph: The first graph of the file.
    """
    try:
        parsed = pydot.graph_from_dot_data(text)
    except Exception as exc:  # pydot surfaces pyparsing errors of several kinds
        raise GraphFormatError(f"Invalid dot data: {exc}") from exc
    if not parsed:
        raise GraphFormatError("Invalid dot data: no graph found")
    if len(parsed) > 1:
        logger.warning("Dot data holds %d graphs, only the first one is read", len(parsed))

    g = nx.nx_pydot.from_pydot(parsed[0])
    if g.number_of_nodes() == 0:
        raise GraphFormatError("Dot graph has no nodes")

    attrs = {n: {k: _unquote(v) for k, v in data.items()} for n, data in g.nodes(data=True)}
    positions = {n: _position(a) for n, a in attrs.items()}

    missing = [n for n, pos in positions.items() if pos is None]
    if missing:
        logger.info("Laying out %d of %d nodes without a position", len(missing), len(positions))
        fixed = {n: pos for n, pos in positions.items() if pos is not None}
        layout = nx.spring_layout(
            g, pos=fixed or None, fixed=list(fixed) or None, seed=seed,
            center=(width / 2, height / 2), scale=min(width, height) / 2,
        )
        for n in missing:
            positions[n] = (float(layout[n][0]), float(layout[n][1]))

    nodes = []
    for n in g.nodes():
        x, y = positions[n]
        node_attrs = {k: v for k, v in attrs[n].items() if k not in ('pos', 'x', 'y')}
        nodes.append(Node(n, x, y, node_attrs))

    edges = [
        Edge(u, v, {k: _unquote(val) for k, val in data.items()})
        for u, v, data in g.edges(data=True)
    ]
    return Graph(nodes, edges)


def read_dot_file(path: Union[str, Path], **kwargs) -> Graph:
    """Read a dot file from disk. Keyword arguments go to ``read_dot``."""
    return read_dot(Path(path).read_text(encoding='utf-8'), **kwargs)


def _unquote(value):
    if isinstance(value, str) and len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _position(attrs: dict):
    if 'pos' in attrs:
        try:
            x, y = str(attrs['pos']).rstrip('!').split(',')[:2]
            return float(x), float(y)
        except ValueError as exc:
            raise GraphFormatError(f"Invalid pos attribute {attrs['pos']!r}") from exc
    if 'x' in attrs and 'y' in attrs:
        try:
            return float(attrs['x']), float(attrs['y'])
        except (TypeError, ValueError) as exc:
            raise GraphFormatError(f"Invalid x/y attributes {attrs['x']!r}, {attrs['y']!r}") from exc
    return None
