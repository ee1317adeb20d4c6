"""Tests for graph records and generators."""

import re

import numpy as np
import pytest

from hyperdisk.errors import GraphFormatError
from hyperdisk.graph import Edge, Graph, Node, erdos_renyi


class TestGraph:
    def test_from_dict(self, triangle):
        assert len(triangle) == 3
        assert triangle.node('c').color == '#ff0000'
        assert triangle.node('a').position.x == 0
        assert triangle.edges[2].attrs == {'weight': 2}

    def test_index_endpoints(self):
        graph = Graph.from_dict({
            'nodes': [{'id': 'x', 'x': 0, 'y': 0}, {'id': 'y', 'x': 1, 'y': 1}],
            'edges': [{'source': 1, 'target': 0}],
        })
        assert (graph.edges[0].source, graph.edges[0].target) == ('y', 'x')

    def test_node_ids_take_precedence_over_indices(self):
        graph = Graph.from_dict({
            'nodes': [{'id': 10, 'x': 0, 'y': 0}, {'id': 20, 'x': 1, 'y': 1}, {'id': 0, 'x': 2, 'y': 2}],
            'edges': [{'source': 10, 'target': 0}, {'source': 1, 'target': 20}],
        })
        assert (graph.edges[0].source, graph.edges[0].target) == (10, 0)
        # 1 is not an id, so it is the second node
        assert (graph.edges[1].source, graph.edges[1].target) == (20, 20)

    def test_default_ids(self):
        graph = Graph.from_dict({'nodes': [{'x': 0, 'y': 0}, {'x': 1, 'y': 1}]})
        assert [n.id for n in graph.nodes] == [0, 1]

    def test_positions(self, triangle):
        assert np.array_equal(triangle.positions(), [[0, 0], [400, 0], [200, 300]])
        assert Graph().positions().shape == (0, 2)

    def test_to_dict(self, triangle):
        again = Graph.from_dict(triangle.to_dict())
        assert again.to_dict() == triangle.to_dict()

    @pytest.mark.parametrize("data", [
        {},
        {'nodes': 3},
        {'nodes': [{'id': 'a', 'x': 0}]},
        {'nodes': [{'id': 'a', 'x': 'left', 'y': 0}]},
        {'nodes': [{'id': 'a', 'x': 0, 'y': 0}], 'edges': [{'source': 'a'}]},
        {'nodes': [{'id': 'a', 'x': 0, 'y': 0}], 'edges': [{'source': 'a', 'target': 'b'}]},
        {'nodes': [{'id': 'a', 'x': 0, 'y': 0}], 'edges': [{'source': 0, 'target': 5}]},
        {'nodes': [{'id': 'a', 'x': 0, 'y': 0}, {'id': 'a', 'x': 1, 'y': 1}]},
    ])
    def test_invalid(self, data):
        with pytest.raises(GraphFormatError):
            Graph.from_dict(data)

    def test_unknown_node(self, triangle):
        with pytest.raises(KeyError):
            triangle.node('z')

    def test_direct_construction(self):
        graph = Graph([Node('a', 0, 0), Node('b', 1, 0)], [Edge('a', 'b')])
        assert graph.node('b').x == 1
        with pytest.raises(GraphFormatError):
            Graph([Node('a', 0, 0)], [Edge('a', 'b')])


class TestErdosRenyi:
    def test_size(self):
        graph = erdos_renyi(20, 0.3, seed=1)
        assert len(graph) == 20
        assert [n.id for n in graph.nodes] == list(range(20))

    def test_reproducible(self):
        assert erdos_renyi(15, 0.2, seed=7).to_dict() == erdos_renyi(15, 0.2, seed=7).to_dict()

    def test_seed_changes_graph(self):
        assert erdos_renyi(15, 0.2, seed=7).to_dict() != erdos_renyi(15, 0.2, seed=8).to_dict()

    def test_extreme_probabilities(self):
        assert erdos_renyi(10, 0, seed=0).edges == []
        assert len(erdos_renyi(10, 1, seed=0).edges) == 45

    def test_positions_and_colors(self):
        graph = erdos_renyi(50, 0.1, x_width=200, y_width=100, seed=3)
        xy = graph.positions()
        assert ((xy[:, 0] >= 0) & (xy[:, 0] < 200)).all()
        assert ((xy[:, 1] >= 0) & (xy[:, 1] < 100)).all()
        assert all(re.fullmatch(r'#[0-9a-f]{6}', n.color) for n in graph.nodes)

    def test_empty(self):
        assert len(erdos_renyi(0, 0.5)) == 0

    @pytest.mark.parametrize("n,p", [(-1, 0.5), (5, -0.1), (5, 1.5)])
    def test_invalid(self, n, p):
        with pytest.raises(ValueError):
            erdos_renyi(n, p)
