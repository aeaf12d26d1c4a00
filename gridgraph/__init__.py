"""
gridgraph/
----------
Core data layer.  Public API:

    from gridgraph import Graph, GridNode
    from gridgraph import Positioned, Traversable
    from gridgraph import pythagoras, manhattan
"""

from gridgraph.errors   import (
    EmptyGraph, GraphError, IncompatibleAlgorithm, InvalidCoordinate,
    MissingCoordinate, MissingGoal, NotTraversable, UnknownAlgorithm,
)
from gridgraph.distance import METRICS, manhattan, octile, pythagoras
from gridgraph.node     import GridNode, Positioned, Traversable
from gridgraph.graph    import Graph

__version__ = "0.7.0"

__all__ = [
    "Graph",             "GridNode",
    "Positioned",        "Traversable",
    "pythagoras",        "manhattan",        "octile",   "METRICS",
    "GraphError",        "InvalidCoordinate", "MissingCoordinate",
    "MissingGoal",       "UnknownAlgorithm",  "IncompatibleAlgorithm",
    "EmptyGraph",        "NotTraversable",
]
