"""Tests for render passes."""

import pytest

from hyperdisk.graph import Graph
from hyperdisk.poincare import Point
from hyperdisk.render import RenderPass


@pytest.fixture
def pair():
    return Graph.from_dict({
        'nodes': [{'id': 'a', 'x': 0, 'y': 0}, {'id': 'b', 'x': 10, 'y': 0}],
        'edges': [{'source': 0, 'target': 1}],
    })


class TestHyperbolic:
    def test_pair_is_drawn_on_a_diameter(self, disk, pair):
        result = RenderPass(disk).render(pair)
        assert len(result.nodes) == 2
        assert result.straight_edges == 1
        a, b = result.node('a'), result.node('b')
        assert a.center.x < disk.cx < b.center.x
        assert a.center.y == pytest.approx(disk.cy)
        assert result.edges[0].path.to_svg().split()[3] == "L"

    def test_triangle(self, disk, triangle):
        result = RenderPass(disk).render(triangle)
        assert len(result.edges) == 3
        assert result.straight_edges < 3
        for edge in result.edges:
            assert edge.arc is not None
        assert result.edges[2].attrs == {'weight': 2}
        assert result.node('c').attrs['color'] == '#ff0000'

    def test_nodes_are_inside_the_disk(self, offset_disk, triangle):
        result = RenderPass(offset_disk).render(triangle, offset=(5000, -3000))
        for node in result.nodes:
            assert offset_disk.canvas_to_disk(node.center).norm() < 1

    def test_pan_moves_nodes(self, disk, triangle):
        still = RenderPass(disk).render(triangle)
        panned = RenderPass(disk).render(triangle, offset=(100, 0))
        assert panned.node('a').layout == Point(100, 0)
        assert panned.node('a').center != still.node('a').center

    def test_highlight(self, disk, triangle):
        plain = RenderPass(disk).render(triangle)
        lit = RenderPass(disk).render(triangle, highlight='b')
        assert lit.node('b').circle.r > plain.node('b').circle.r
        assert lit.node('a').circle.r == plain.node('a').circle.r

    def test_graph_is_not_modified(self, disk, triangle):
        before = triangle.to_dict()
        RenderPass(disk).render(triangle, offset=(10, 10), highlight='a')
        assert triangle.to_dict() == before

    def test_empty_graph(self, disk):
        result = RenderPass(disk).render(Graph())
        assert result.nodes == []
        assert result.edges == []

    def test_unknown_node(self, disk, pair):
        with pytest.raises(KeyError):
            RenderPass(disk).render(pair).node('z')


class TestEuclidean:
    def test_nodes_keep_layout_positions(self, disk, triangle):
        result = RenderPass(disk, projection='euclidean').render(triangle, offset=(1, 2))
        assert result.node('b').center == Point(401, 2)
        assert result.straight_edges == 3
        assert all(e.arc is None for e in result.edges)

    def test_highlight_doubles_radius(self, disk, triangle, config):
        result = RenderPass(disk, projection='euclidean').render(triangle, highlight='a')
        assert result.node('a').circle.r == 2 * config.euclidean_node_radius
        assert result.node('b').circle.r == config.euclidean_node_radius


def test_for_canvas():
    render_pass = RenderPass.for_canvas(800, 600)
    assert render_pass.disk.radius == 290
    assert render_pass.projection == 'hyperbolic'


def test_unknown_projection(disk):
    with pytest.raises(ValueError):
        RenderPass(disk, projection='spherical')


def test_highlight_is_recorded(disk, triangle):
    assert RenderPass(disk).render(triangle, highlight='c').highlight == 'c'
    assert RenderPass(disk).render(triangle, highlight='zz').highlight is None
