"""
Graph records consumed by the render pass, and ways to obtain them.
"""
from .model import Edge, Graph, Node
from .generators import erdos_renyi
from .dot import read_dot, read_dot_file

__all__ = ['Edge', 'Graph', 'Node', 'erdos_renyi', 'read_dot', 'read_dot_file']
