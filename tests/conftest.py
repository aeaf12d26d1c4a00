"""
Shared fixtures and node types for the test-suite.
"""

from dataclasses import dataclass, field
from typing import Dict

import pytest

from gridalgos import REGISTRY
from gridgraph import Graph, GridNode


@dataclass(eq=False)
class LinkNode:
    """
    Node with explicit outgoing links {node: cost}.  Used where a test needs
    arbitrary topology rather than grid adjacency.
    """

    x: float
    y: float
    links: Dict["LinkNode", float] = field(default_factory=dict)

    def get_x(self):
        return self.x

    def get_y(self):
        return self.y

    def get_neighbors(self, graph):
        return list(self.links)

    def get_cost(self, neighbor):
        return self.links[neighbor]

    def link(self, other: "LinkNode", cost: float = 1.0, both: bool = False) -> None:
        self.links[other] = cost
        if both:
            other.links[self] = cost


@dataclass(eq=False)
class PointNode:
    """Positioned only: no adjacency."""

    x: float
    y: float

    def get_x(self):
        return self.x

    def get_y(self):
        return self.y


@pytest.fixture
def line_graph():
    """(0,0) – (1,0) – (2,0) with unit steps."""
    g = Graph()
    nodes = [g.add_node(GridNode(x, 0)) for x in range(3)]
    return g, nodes


@pytest.fixture
def restore_registry():
    """Undo any change a test makes to the process-wide REGISTRY."""
    algorithms = dict(REGISTRY._algorithms)
    defaults = dict(REGISTRY._defaults)
    yield REGISTRY
    REGISTRY._algorithms = algorithms
    REGISTRY._defaults = defaults
