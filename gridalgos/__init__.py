"""
gridalgos/
----------
Traversal strategies for gridgraph.Graph.  Public API:

    from gridalgos import REGISTRY, register_algorithm, lookup_algorithm
    from gridalgos import Capability, SearchAlgorithm, ShortestPathAlgorithm, Path
"""

from gridalgos.base     import Algorithm, Capability, Path, SearchAlgorithm, ShortestPathAlgorithm
from gridalgos.linear   import LinearAlgorithm
from gridalgos.bfs      import BreadthFirstAlgorithm
from gridalgos.dijkstra import DijkstraAlgorithm
from gridalgos.astar    import AStarAlgorithm
from gridalgos.registry import (
    REGISTRY, AlgorithmRegistry, list_algorithms, lookup_algorithm, register_algorithm
)

__all__ = [
    "Algorithm",           "Capability",        "Path",
    "SearchAlgorithm",     "ShortestPathAlgorithm",
    "LinearAlgorithm",     "BreadthFirstAlgorithm",
    "DijkstraAlgorithm",   "AStarAlgorithm",
    "REGISTRY",            "AlgorithmRegistry",
    "register_algorithm",  "lookup_algorithm",  "list_algorithms",
]
