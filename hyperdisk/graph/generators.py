"""
Random graph generators.
"""
from __future__ import annotations

from typing import Optional

import networkx as nx
import numpy as np

from .model import Edge, Graph, Node


def erdos_renyi(n: int, p: float, x_width: float = 1000, y_width: float = 1000,
                seed: Optional[int] = None) -> Graph:
    """
    Undirected graph on n nodes where each pair is joined with probability p.

    Args:
        n: The number of nodes.
        p: Edge probability, the density of the graph.
        x_width: Node x positions are uniform in ``[0, x_width)``.
        y_width: Node y positions are uniform in ``[0, y_width)``.
        seed: Seed for positions, colours and edges.

    Returns:
        Graph: Nodes with ids ``0..n-1``, a random position and a random
        ``color`` attribute.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if not 0 <= p <= 1:
        raise ValueError(f"p must be a probability, got {p}")

    rng = np.random.default_rng(seed)
    xs = rng.random(n) * round(x_width)
    ys = rng.random(n) * round(y_width)
    colors = rng.integers(0, 0xFFFFFF, size=n, endpoint=True)

    nodes = [
        Node(i, float(xs[i]), float(ys[i]), {'color': f"#{int(colors[i]):06x}"})
        for i in range(n)
    ]
    g = nx.gnp_random_graph(n, p, seed=None if seed is None else int(rng.integers(2**31)))
    edges = [Edge(u, v) for u, v in g.edges()]
    return Graph(nodes, edges)
