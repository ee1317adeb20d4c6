"""Pytest configuration and fixtures."""

import pytest

from hyperdisk.config import KernelConfig
from hyperdisk.graph import Graph
from hyperdisk.poincare import PoincareDisk


@pytest.fixture
def disk():
    """Disk of radius 100 centred at (100, 100)."""
    return PoincareDisk.from_bounding_box(0, 0, 200, 200)


@pytest.fixture
def offset_disk():
    """Disk whose bounding box does not start at the canvas origin."""
    return PoincareDisk.from_bounding_box(50, 20, 350, 320)


@pytest.fixture(params=['square', 'offset', 'wide', 'tall'])
def any_disk(request):
    """Fixture that parametrizes over differently placed disks."""
    if request.param == 'square':
        return PoincareDisk.from_bounding_box(0, 0, 200, 200)
    elif request.param == 'offset':
        return PoincareDisk.from_bounding_box(50, 20, 350, 320)
    elif request.param == 'wide':
        return PoincareDisk.from_canvas(1000, 600, margin=10)
    elif request.param == 'tall':
        return PoincareDisk.from_bounding_box(-40, -300, 60, 900)


@pytest.fixture
def config():
    return KernelConfig()


@pytest.fixture
def triangle():
    """Three nodes whose edges are not all diameters."""
    return Graph.from_dict({
        'nodes': [
            {'id': 'a', 'x': 0, 'y': 0},
            {'id': 'b', 'x': 400, 'y': 0},
            {'id': 'c', 'x': 200, 'y': 300, 'color': '#ff0000'},
        ],
        'edges': [
            {'source': 'a', 'target': 'b'},
            {'source': 'b', 'target': 'c'},
            {'source': 'c', 'target': 'a', 'weight': 2},
        ],
    })
